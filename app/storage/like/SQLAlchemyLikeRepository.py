# app/storage/like/SQLAlchemyLikeRepository.py

from typing import Optional, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.like import Like, LikeTargetType
from app.models.user import User
from app.models.video import Video
from app.schemas.like import LikeCreate, LikeOut, LikedVideoOut
from app.storage.like.like_interface import ILikeRepository
from app.core.db import transaction
from app.core.exceptions import LikeConflictError


class SQLAlchemyLikeRepository(ILikeRepository):
    """
    使用 SQLAlchemy 实现的点赞仓库
    业务层依赖 ILikeRepository 接口，而不是这个具体实现
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------- 内部基础查询 ----------

    def _match_query(self, user_id: str, target_type: LikeTargetType, target_id: str):
        """定位某用户对某目标的点赞"""
        return self.db.query(Like).filter(
            Like.user_id == user_id,
            Like.target_type == int(target_type),
            Like.target_id == target_id,
        )

    # ---------- 删除 / 创建 ----------

    def find_and_delete(self, user_id: str, target_type: LikeTargetType, target_id: str) -> Optional[LikeOut]:
        """
        查到记录后按主键删除：
        - DELETE 影响行数为 0 说明被并发请求先删了，同样视为“没有可删的记录”
        """
        with transaction(self.db):
            like: Optional[Like] = self._match_query(user_id, target_type, target_id).first()
            if like is None:
                return None

            snapshot = LikeOut.model_validate(like)
            deleted = (
                self.db.query(Like)
                .filter(Like._id == like._id)
                .delete(synchronize_session=False)
            )
            self.db.expunge(like)

        return snapshot if deleted else None

    def create(self, data: LikeCreate) -> LikeOut:
        like = Like(
            user_id=data.user_id,
            target_type=int(data.target_type),
            target_id=data.target_id,
        )

        try:
            with transaction(self.db):
                self.db.add(like)
        except IntegrityError as e:
            # 唯一约束 uq_likes_user_target：并发请求已经建好了这条点赞
            raise LikeConflictError(
                user_id=data.user_id,
                target_type=data.target_type,
                target_id=data.target_id,
            ) from e

        self.db.refresh(like)
        return LikeOut.model_validate(like)

    # ---------- 查询 ----------

    def list_liked_videos(self, user_id: str) -> List[LikedVideoOut]:
        """
        相当于：
            SELECT v.title, v.description, v.thumbnail_url, v.video_file_url, v.duration,
                   v.views, v.created_at, u.username, u.avatar_url
            FROM likes l
            JOIN videos v ON v.vid = l.target_id AND v.deleted_at IS NULL
            JOIN users  u ON u.uid = v.owner_id  AND u.deleted_at IS NULL
            WHERE l.user_id = :user_id AND l.target_type = 0
            ORDER BY l.created_at DESC
        """
        rows = (
            self.db.query(
                Video.title.label("title"),
                Video.description.label("description"),
                Video.thumbnail_url.label("thumbnail"),
                Video.video_file_url.label("video_file"),
                Video.duration.label("duration"),
                Video.views.label("views"),
                Video.created_at.label("created_at"),
                User.username.label("video_owner_username"),
                User.avatar_url.label("video_owner_avatar_url"),
            )
            .select_from(Like)
            .join(Video, (Video.vid == Like.target_id) & Video.deleted_at.is_(None))
            .join(User, (User.uid == Video.owner_id) & User.deleted_at.is_(None))
            .filter(
                Like.user_id == user_id,
                Like.target_type == int(LikeTargetType.VIDEO),
            )
            .order_by(Like.created_at.desc(), Like._id.desc())
            .all()
        )

        return [LikedVideoOut.model_validate(dict(row._mapping)) for row in rows]
