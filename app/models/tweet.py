from sqlalchemy import Column, Integer, String, TIMESTAMP, Text, ForeignKey
from sqlalchemy.orm import relationship
import uuid
from app.models.base import Base
from app.core.time import now_utc


class Tweet(Base):
    """ 推文（社区动态）表。

        CREATE TABLE IF NOT EXISTS tweets (
            _id INT AUTO_INCREMENT PRIMARY KEY,
            tid VARCHAR(36) NOT NULL UNIQUE,                  -- 业务主键（UUID）
            owner_id VARCHAR(36) NOT NULL,                    -- 作者（FK -> users.uid）
            content TEXT NOT NULL,
            created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP NULL,

            FOREIGN KEY (owner_id) REFERENCES users(uid)
        );
    """

    __tablename__ = "tweets"

    _id = Column(Integer, primary_key=True, autoincrement=True)
    tid = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(36), ForeignKey("users.uid"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    deleted_at = Column(TIMESTAMP(timezone=True), nullable=True)

    owner = relationship("User", back_populates="tweets")
