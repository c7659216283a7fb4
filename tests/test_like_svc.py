import uuid

import pytest

from app.core.exceptions import InvalidIdError, LikeConflictError, TargetNotFound
from app.models.like import LikeTargetType
from app.models.video import Video
from app.schemas.like import LikeCreate
from app.service import like_svc


ACTOR = str(uuid.uuid4())


class UntouchableRepo:
    def __getattr__(self, name):
        raise AssertionError(f"repository accessed: {name}")


class RacingLikeRepo:
    """模拟并发：另一个请求在我们 create 之前刚好建好了同一条点赞"""

    def __init__(self, inner):
        self.inner = inner

    def find_and_delete(self, *args):
        return self.inner.find_and_delete(*args)

    def create(self, data):
        self.inner.create(data)
        return self.inner.create(data)


@pytest.fixture
def toggle(like_repo, video_repo, comment_repo, tweet_repo):
    def _toggle(target_type, target_id, user_id=ACTOR, repo=None):
        return like_svc.toggle_like(
            like_repo=repo or like_repo,
            video_repo=video_repo,
            comment_repo=comment_repo,
            tweet_repo=tweet_repo,
            user_id=user_id,
            target_type=target_type,
            target_id=target_id,
            to_dict=False,
        )
    return _toggle


def test_like_then_unlike_leaves_nothing(toggle, make_user, make_video, count_likes):
    vid = make_video(make_user("owner").uid)

    first = toggle(LikeTargetType.VIDEO, vid)
    assert first.liked is True
    assert first.like.target_id == vid
    assert first.like.target_type == LikeTargetType.VIDEO
    assert count_likes(ACTOR, LikeTargetType.VIDEO, vid) == 1

    second = toggle(LikeTargetType.VIDEO, vid)
    assert second.liked is False
    assert second.like is None
    assert count_likes(ACTOR, LikeTargetType.VIDEO, vid) == 0


@pytest.mark.parametrize("times, expected", [(1, 1), (2, 0), (3, 1), (4, 0), (5, 1)])
def test_toggle_parity(toggle, make_user, make_tweet, count_likes, times, expected):
    tid = make_tweet(make_user("owner").uid)

    for _ in range(times):
        toggle(LikeTargetType.TWEET, tid)

    assert count_likes(ACTOR, LikeTargetType.TWEET, tid) == expected


def test_comment_likes_are_independent_per_actor(toggle, make_user, make_video, make_comment, count_likes):
    owner = make_user("owner")
    cid = make_comment(owner.uid, make_video(owner.uid))
    other = str(uuid.uuid4())

    assert toggle(LikeTargetType.COMMENT, cid).liked is True
    assert toggle(LikeTargetType.COMMENT, cid, user_id=other).liked is True
    assert toggle(LikeTargetType.COMMENT, cid).liked is False

    assert count_likes(ACTOR, LikeTargetType.COMMENT, cid) == 0
    assert count_likes(other, LikeTargetType.COMMENT, cid) == 1


def test_missing_target_is_not_found_and_creates_nothing(toggle, count_likes):
    missing = str(uuid.uuid4())

    with pytest.raises(TargetNotFound):
        toggle(LikeTargetType.VIDEO, missing)

    assert count_likes(ACTOR, LikeTargetType.VIDEO, missing) == 0


def test_id_of_another_kind_is_not_found(toggle, make_user, make_video):
    vid = make_video(make_user("owner").uid)

    with pytest.raises(TargetNotFound):
        toggle(LikeTargetType.COMMENT, vid)


@pytest.mark.parametrize("bad_id", ["", "  ", "xyz", "64b7f0c2e4b0a1a2b3c4d5e6"])
def test_malformed_id_fails_before_storage(bad_id):
    repo = UntouchableRepo()
    with pytest.raises(InvalidIdError):
        like_svc.toggle_like(repo, repo, repo, repo, ACTOR, LikeTargetType.VIDEO, bad_id)


def test_duplicate_create_raises_conflict(make_user, make_video, like_repo, count_likes):
    vid = make_video(make_user("owner").uid)
    data = LikeCreate(user_id=ACTOR, target_type=LikeTargetType.VIDEO, target_id=vid)
    like_repo.create(data)

    with pytest.raises(LikeConflictError):
        like_repo.create(data)

    assert count_likes(ACTOR, LikeTargetType.VIDEO, vid) == 1


def test_lost_create_race_is_treated_as_unlike(toggle, make_user, make_video, like_repo, count_likes):
    vid = make_video(make_user("owner").uid)

    result = toggle(LikeTargetType.VIDEO, vid, repo=RacingLikeRepo(like_repo))

    assert result.liked is False
    assert count_likes(ACTOR, LikeTargetType.VIDEO, vid) == 0


def test_unlike_skips_existence_check(toggle, make_user, make_video, count_likes, db):
    vid = make_video(make_user("owner").uid)
    toggle(LikeTargetType.VIDEO, vid)

    db.query(Video).filter(Video.vid == vid).delete()
    db.commit()

    assert toggle(LikeTargetType.VIDEO, vid).liked is False
    assert count_likes(ACTOR, LikeTargetType.VIDEO, vid) == 0


def test_to_dict_output(toggle, make_user, make_video, like_repo, video_repo, comment_repo, tweet_repo):
    vid = make_video(make_user("owner").uid)

    result = like_svc.toggle_like(like_repo, video_repo, comment_repo, tweet_repo, ACTOR, LikeTargetType.VIDEO, vid)

    assert result["liked"] is True
    assert result["like"]["user_id"] == ACTOR
