from sqlalchemy import Column, Integer, String, TIMESTAMP
from sqlalchemy.orm import relationship
import uuid
from app.models.base import Base
from app.core.time import now_utc


class User(Base):
    """ 用户模型，对应数据库中的 users 表。

        CREATE TABLE IF NOT EXISTS users (
            _id INT AUTO_INCREMENT PRIMARY KEY,        -- 系统主键 ID
            uid VARCHAR(36) UNIQUE,                    -- 用户的业务主键（UUID）
            username VARCHAR(100) NOT NULL UNIQUE,     -- 用户名（频道名）
            email VARCHAR(100) UNIQUE,                 -- 邮箱（可为空）
            avatar_url VARCHAR(255),                   -- 头像地址
            avatar_public_id VARCHAR(255),             -- 头像在媒体存储中的 ID
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,    -- 创建时间
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,    -- 更新时间
            deleted_at TIMESTAMP NULL                  -- 软删除时间戳
        );
    """

    __tablename__ = "users"
    # 系统主键：自增
    _id = Column(Integer, primary_key=True, autoincrement=True)  # 系统主键ID，系统用，不对外暴露
    # 业务主键：UUID，唯一且不自增
    uid = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    username = Column(String(100), unique=True, nullable=False)  # 用户名
    email = Column(String(100), unique=True, nullable=True)  # 用户邮箱
    avatar_url = Column(String(255), nullable=True)  # 头像地址
    avatar_public_id = Column(String(255), nullable=True)  # 头像存储 ID
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)  # 创建时间
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)  # 更新时间
    deleted_at = Column(TIMESTAMP(timezone=True), nullable=True)  # 软删除时间戳

    # 反向引用：该用户发布的视频
    videos = relationship("Video", back_populates="owner")
    # 反向引用：该用户的评论
    comments = relationship("Comment", back_populates="owner")
    # 反向引用：该用户的推文
    tweets = relationship("Tweet", back_populates="owner")
