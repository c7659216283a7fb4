from sqlalchemy import Column, Integer, String, SmallInteger, TIMESTAMP, UniqueConstraint, Index
import uuid
from enum import IntEnum
from app.models.base import Base
from app.core.time import now_utc


# 点赞目标类型：判别字段 + 单一 target_id，代替三个互斥的可空外键
class LikeTargetType(IntEnum):
    VIDEO = 0    # 视频
    COMMENT = 1  # 评论
    TWEET = 2    # 推文

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Like(Base):
    """ 点赞模型，对应数据库中的 likes 表。

        CREATE TABLE IF NOT EXISTS likes (
            _id INT AUTO_INCREMENT PRIMARY KEY,              -- 系统主键（自增）
            lid VARCHAR(36) UNIQUE,                          -- 业务主键（UUID）
            user_id VARCHAR(36) NOT NULL,                    -- 点赞用户 ID
            target_type SMALLINT NOT NULL,                   -- 点赞目标类型（0: 视频, 1: 评论, 2: 推文）
            target_id VARCHAR(36) NOT NULL,                  -- 点赞目标 ID（弱引用，创建时校验存在性）
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,  -- 点赞时间

            CONSTRAINT uq_likes_user_target UNIQUE (user_id, target_type, target_id)
            -- user_id 来自身份服务，不加外键
        );
        -- 索引建议：
        CREATE INDEX idx_likes_user_target_type ON likes (user_id, target_type);
        CREATE INDEX idx_likes_target_type_id   ON likes (target_type, target_id);

        取消点赞直接物理删除记录，没有软删除 / 更新。
    """

    __tablename__ = "likes"
    # 系统主键（内部使用，不对外暴露）
    _id = Column(Integer, primary_key=True, autoincrement=True)
    # 业务主键（UUID，对外使用）
    lid = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False)  # 点赞用户 ID（身份服务提供的可信 ID）
    target_type = Column(SmallInteger, nullable=False)  # 点赞目标类型
    target_id = Column(String(36), nullable=False)  # 点赞目标 ID
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)  # 点赞时间

    __table_args__ = (
        # 每个用户对同一目标最多一条点赞（并发 toggle 的最终保障）
        UniqueConstraint("user_id", "target_type", "target_id", name="uq_likes_user_target"),
        Index("idx_likes_user_target_type", "user_id", "target_type"),
        Index("idx_likes_target_type_id", "target_type", "target_id"),
    )
