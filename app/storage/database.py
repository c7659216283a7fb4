from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.models.base import Base
from app.storage.user.SQLAlchemyUserRepository import SQLAlchemyUserRepository
from app.storage.video.SQLAlchemyVideoRepository import SQLAlchemyVideoRepository
from app.storage.like.SQLAlchemyLikeRepository import SQLAlchemyLikeRepository
from app.storage.comment.SQLAlchemyCommentRepository import SQLAlchemyCommentRepository
from app.storage.tweet.SQLAlchemyTweetRepository import SQLAlchemyTweetRepository

# 模型全部在上面的仓库里导入过，这里的 Base.metadata 已包含所有表

# SQLAlchemy 引擎（连接串见 app/core/config.py，可用环境变量 DATABASE_URL 覆盖）
engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """按模型建表（已存在的表不会重复创建）"""
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# 未来可以根据配置切换不同的实现
def get_user_repo(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db)
def get_video_repo(db: Session = Depends(get_db)) -> SQLAlchemyVideoRepository:
    return SQLAlchemyVideoRepository(db)
def get_like_repo(db: Session = Depends(get_db)) -> SQLAlchemyLikeRepository:
    return SQLAlchemyLikeRepository(db)
def get_comment_repo(db: Session = Depends(get_db)) -> SQLAlchemyCommentRepository:
    return SQLAlchemyCommentRepository(db)
def get_tweet_repo(db: Session = Depends(get_db)) -> SQLAlchemyTweetRepository:
    return SQLAlchemyTweetRepository(db)
