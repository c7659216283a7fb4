from sqlalchemy import Column, Integer, String, Float, Boolean, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
import uuid
from app.models.base import Base
from app.core.time import now_utc


class Video(Base):
    """ 视频表，存储视频元数据以及媒体存储中的文件引用。

        CREATE TABLE IF NOT EXISTS videos (
            _id INT AUTO_INCREMENT PRIMARY KEY,           -- 系统主键ID（自增）
            vid VARCHAR(36) UNIQUE,                       -- 业务主键（UUID）
            owner_id VARCHAR(36) NOT NULL,                -- 上传者 ID (FK -> users.uid)
            title VARCHAR(255) NOT NULL,                  -- 标题
            description TEXT,                             -- 简介
            duration FLOAT DEFAULT 0,                     -- 时长（秒）
            views INT DEFAULT 0,                          -- 播放量
            is_published BOOLEAN DEFAULT TRUE,            -- 是否公开
            video_file_url VARCHAR(512) NOT NULL,         -- 视频文件地址
            video_file_public_id VARCHAR(255),            -- 视频文件存储 ID
            thumbnail_url VARCHAR(512),                   -- 封面地址
            thumbnail_public_id VARCHAR(255),             -- 封面存储 ID
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP NULL,                    -- 软删除时间戳

            FOREIGN KEY (owner_id) REFERENCES users(uid)
        );

        -- 索引建议：检索页按作者过滤，按播放量 / 时间 / 时长排序
        CREATE INDEX idx_videos_owner_id ON videos (owner_id);
        CREATE INDEX idx_videos_views ON videos (views);
        CREATE INDEX idx_videos_created_at ON videos (created_at);
    """

    __tablename__ = "videos"

    _id = Column(Integer, primary_key=True, autoincrement=True)  # 系统主键ID，不对外暴露
    vid = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))  # 业务主键

    owner_id = Column(String(36), ForeignKey("users.uid"), nullable=False)  # 上传者 ID
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    duration = Column(Float, default=0, nullable=False)  # 时长（秒）
    views = Column(Integer, default=0, nullable=False)  # 播放量
    is_published = Column(Boolean, default=True, nullable=False)

    # 媒体引用：地址 + 存储 ID（上传本身不在本服务内完成）
    video_file_url = Column(String(512), nullable=False)
    video_file_public_id = Column(String(255), nullable=True)
    thumbnail_url = Column(String(512), nullable=True)
    thumbnail_public_id = Column(String(255), nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)
    deleted_at = Column(TIMESTAMP(timezone=True), nullable=True)

    # 反向引用：上传者
    owner = relationship("User", back_populates="videos")

    __table_args__ = (
        Index("idx_videos_owner_id", "owner_id"),
        Index("idx_videos_views", "views"),
        Index("idx_videos_created_at", "created_at"),
    )
