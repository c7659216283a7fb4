# app/routers/likes.py

from fastapi import APIRouter, Depends

from app.schemas.like import ToggleLikeOut, LikedVideoOut
from app.models.like import LikeTargetType

from app.core.biz_response import BizResponse
from app.core.logx import logger
from app.core.security import get_current_user_id

from app.service import like_svc

from app.storage.database import (
    get_like_repo,
    get_video_repo,
    get_comment_repo,
    get_tweet_repo,
)
from app.storage.like.like_interface import ILikeRepository
from app.storage.video.video_interface import IVideoRepository
from app.storage.comment.comment_interface import ICommentRepository
from app.storage.tweet.tweet_interface import ITweetRepository

from app.core.exceptions import InvalidIdError, TargetNotFound, NoLikedVideosFound

likes_router = APIRouter(prefix="/like", tags=["likes"])


def _toggle(
    target_type: LikeTargetType,
    target_id: str,
    user_id: str,
    like_repo: ILikeRepository,
    video_repo: IVideoRepository,
    comment_repo: ICommentRepository,
    tweet_repo: ITweetRepository,
) -> BizResponse:
    """
    三种目标共用的 toggle 处理：
    - 新建点赞 => 201
    - 取消点赞 => 200
    """
    try:
        result = like_svc.toggle_like(
            like_repo=like_repo,
            video_repo=video_repo,
            comment_repo=comment_repo,
            tweet_repo=tweet_repo,
            user_id=user_id,
            target_type=target_type,
            target_id=target_id,
            to_dict=True,
        )
        status_code = 201 if result["liked"] else 200
        return BizResponse(
            data=result,
            msg=f"Toggled {target_type.label.lower()} like successfully!",
            status_code=status_code,
        )
    except InvalidIdError as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except TargetNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.exception(f"toggle {target_type.name} like error")
        return BizResponse(data=None, msg=str(e), status_code=500)


# -------------------------- 视频 / 评论 / 推文 点赞 toggle -------------------------- #

@likes_router.post("/toggle-video-like/{video_id}", response_model=ToggleLikeOut)
def toggle_video_like(
    video_id: str,
    user_id: str = Depends(get_current_user_id),
    like_repo: ILikeRepository = Depends(get_like_repo),
    video_repo: IVideoRepository = Depends(get_video_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
    tweet_repo: ITweetRepository = Depends(get_tweet_repo),
):
    return _toggle(LikeTargetType.VIDEO, video_id, user_id, like_repo, video_repo, comment_repo, tweet_repo)


@likes_router.post("/toggle-comment-like/{comment_id}", response_model=ToggleLikeOut)
def toggle_comment_like(
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    like_repo: ILikeRepository = Depends(get_like_repo),
    video_repo: IVideoRepository = Depends(get_video_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
    tweet_repo: ITweetRepository = Depends(get_tweet_repo),
):
    return _toggle(LikeTargetType.COMMENT, comment_id, user_id, like_repo, video_repo, comment_repo, tweet_repo)


@likes_router.post("/toggle-tweet-like/{tweet_id}", response_model=ToggleLikeOut)
def toggle_tweet_like(
    tweet_id: str,
    user_id: str = Depends(get_current_user_id),
    like_repo: ILikeRepository = Depends(get_like_repo),
    video_repo: IVideoRepository = Depends(get_video_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
    tweet_repo: ITweetRepository = Depends(get_tweet_repo),
):
    return _toggle(LikeTargetType.TWEET, tweet_id, user_id, like_repo, video_repo, comment_repo, tweet_repo)


# -------------------------- 我点赞的视频 -------------------------- #

@likes_router.get("/get-liked-videos", response_model=list[LikedVideoOut])
def get_liked_videos(
    user_id: str = Depends(get_current_user_id),
    like_repo: ILikeRepository = Depends(get_like_repo),
):
    """
    当前用户点赞过的视频（视频 + 上传者信息拍平）
    - 一条都没有 => 404
    """
    try:
        items = like_svc.get_liked_videos(like_repo=like_repo, user_id=user_id, to_dict=True)
        return BizResponse(data=items, msg="Liked videos fetched successfully")
    except NoLikedVideosFound as e:
        return BizResponse(data=[], msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_liked_videos error")
        return BizResponse(data=[], msg=str(e), status_code=500)
