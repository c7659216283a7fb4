import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models.base import Base
from app.models.like import Like, LikeTargetType
from app.models.video import Video
from app.schemas.user import UserCreate
from app.schemas.video import VideoOnlyCreate
from app.schemas.comment import CommentCreate
from app.schemas.tweet import TweetCreate
from app.storage.database import get_db
from app.storage.user.SQLAlchemyUserRepository import SQLAlchemyUserRepository
from app.storage.video.SQLAlchemyVideoRepository import SQLAlchemyVideoRepository
from app.storage.like.SQLAlchemyLikeRepository import SQLAlchemyLikeRepository
from app.storage.comment.SQLAlchemyCommentRepository import SQLAlchemyCommentRepository
from app.storage.tweet.SQLAlchemyTweetRepository import SQLAlchemyTweetRepository
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def user_repo(db):
    return SQLAlchemyUserRepository(db)


@pytest.fixture
def video_repo(db):
    return SQLAlchemyVideoRepository(db)


@pytest.fixture
def like_repo(db):
    return SQLAlchemyLikeRepository(db)


@pytest.fixture
def comment_repo(db):
    return SQLAlchemyCommentRepository(db)


@pytest.fixture
def tweet_repo(db):
    return SQLAlchemyTweetRepository(db)


@pytest.fixture
def make_user(user_repo):
    def _make(username: str, avatar_url: str | None = None):
        return user_repo.create_user(
            UserCreate(username=username, avatar_url=avatar_url or f"https://cdn.test/{username}.png")
        )
    return _make


@pytest.fixture
def make_video(video_repo):
    def _make(owner_id: str, title: str = "video", description: str = "", views: int = 0, duration: float = 60.0):
        vid = video_repo.create_video(
            VideoOnlyCreate(
                owner_id=owner_id,
                title=title,
                description=description,
                duration=duration,
                video_file_url=f"https://cdn.test/{title}.mp4",
                thumbnail_url=f"https://cdn.test/{title}.jpg",
            )
        )
        if views:
            video_repo.db.query(Video).filter(Video.vid == vid).update({"views": views})
            video_repo.db.commit()
        return vid
    return _make


@pytest.fixture
def make_comment(comment_repo):
    def _make(owner_id: str, video_id: str, content: str = "nice"):
        return comment_repo.create_comment(owner_id, CommentCreate(video_id=video_id, content=content)).cid
    return _make


@pytest.fixture
def make_tweet(tweet_repo):
    def _make(owner_id: str, content: str = "hello"):
        return tweet_repo.create_tweet(owner_id, TweetCreate(content=content)).tid
    return _make


@pytest.fixture
def count_likes(db):
    """某用户对某目标的点赞记录数（正常情况下只会是 0 或 1）"""
    def _count(user_id: str, target_type: LikeTargetType, target_id: str) -> int:
        return (
            db.query(Like)
            .filter(Like.user_id == user_id, Like.target_type == int(target_type), Like.target_id == target_id)
            .count()
        )
    return _count


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
