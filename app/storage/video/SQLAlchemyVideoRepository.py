from typing import Optional, List

from sqlalchemy import exists
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.models.user import User
from app.models.video import Video
from app.schemas.video import VideoOnlyCreate, VideoOut, VideoDetailOut, SortPolicy

from app.storage.video.video_interface import IVideoRepository
from app.core.db import transaction

# 对外排序字段 -> 列
SORT_COLUMNS = {
    "createdAt": Video.created_at,
    "views": Video.views,
    "duration": Video.duration,
}


class SQLAlchemyVideoRepository(IVideoRepository):
    """
    使用 SQLAlchemy 实现的视频仓库
    """

    def __init__(self, db: Session):
        self.db = db

    def _base_query(self):
        """过滤软删除"""
        return self.db.query(Video).filter(Video.deleted_at.is_(None))

    # ---------- 创建 ----------

    def create_video(self, data: VideoOnlyCreate) -> str:
        payload = data.model_dump(exclude_none=True)
        video = Video(**payload)

        with transaction(self.db):
            self.db.add(video)

        self.db.refresh(video)
        return video.vid

    # ---------- 查询 ----------

    def get_video_detail(self, vid: str) -> Optional[VideoDetailOut]:
        """
        视频 join 上传者：
        - 上传者不存在（或已软删）时视为视频不可见
        """
        row = (
            self.db.query(
                Video,
                User.username.label("owner_username"),
                User.avatar_url.label("owner_avatar_url"),
            )
            .join(User, User.uid == Video.owner_id)
            .filter(
                Video.vid == vid,
                Video.deleted_at.is_(None),
                User.deleted_at.is_(None),
            )
            .first()
        )
        if not row:
            return None

        video, owner_username, owner_avatar_url = row
        base = VideoOut.model_validate(video).model_dump()
        return VideoDetailOut(
            **base,
            owner_username=owner_username,
            owner_avatar_url=owner_avatar_url,
        )

    def exists(self, vid: str) -> bool:
        return bool(
            self.db.query(
                exists().where(Video.vid == vid, Video.deleted_at.is_(None))
            ).scalar()
        )

    def count_videos(self, criteria: ColumnElement) -> int:
        return self.db.query(Video).filter(criteria).count()

    def list_videos(self, criteria: ColumnElement, sort: SortPolicy, skip: int, limit: int) -> List[VideoOut]:
        """
        读取一页：
        - 主排序按 sort
        - 同值时按 _id 同方向排序，保证翻页稳定
        """
        column = SORT_COLUMNS[sort.field]
        if sort.direction == "asc":
            ordering = (column.asc(), Video._id.asc())
        else:
            ordering = (column.desc(), Video._id.desc())

        videos: List[Video] = (
            self.db.query(Video)
            .filter(criteria)
            .order_by(*ordering)
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [VideoOut.model_validate(v) for v in videos]
