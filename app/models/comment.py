from sqlalchemy import Column, Integer, String, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
import uuid
from app.models.base import Base
from app.core.time import now_utc


class Comment(Base):
    """ 视频评论表。

        CREATE TABLE IF NOT EXISTS comments (
            _id INT AUTO_INCREMENT PRIMARY KEY,               -- 系统主键（自增）
            cid VARCHAR(36) NOT NULL UNIQUE,                  -- 业务主键（UUID，对外使用）
            video_id VARCHAR(36) NOT NULL,                    -- 所属视频（FK -> videos.vid）
            owner_id VARCHAR(36) NOT NULL,                    -- 评论作者（FK -> users.uid）
            content TEXT NOT NULL,                            -- 评论内容
            created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP NULL,                        -- 软删除

            FOREIGN KEY (video_id) REFERENCES videos(vid),
            FOREIGN KEY (owner_id) REFERENCES users(uid)
        );
    """

    __tablename__ = "comments"

    _id = Column(Integer, primary_key=True, autoincrement=True)
    cid = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    video_id = Column(String(36), ForeignKey("videos.vid"), nullable=False)
    owner_id = Column(String(36), ForeignKey("users.uid"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    deleted_at = Column(TIMESTAMP(timezone=True), nullable=True)

    # 反向引用：评论作者
    owner = relationship("User", back_populates="comments")

    __table_args__ = (
        Index("idx_comments_video_id", "video_id"),
    )
