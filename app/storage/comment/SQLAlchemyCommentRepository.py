from sqlalchemy import exists
from sqlalchemy.orm import Session

from app.models.comment import Comment
from app.schemas.comment import CommentCreate, CommentOut
from app.storage.comment.comment_interface import ICommentRepository
from app.core.db import transaction


class SQLAlchemyCommentRepository(ICommentRepository):
    """
    使用 SQLAlchemy 实现的评论仓库
    """

    def __init__(self, db: Session):
        self.db = db

    def create_comment(self, owner_id: str, data: CommentCreate) -> CommentOut:
        comment = Comment(owner_id=owner_id, video_id=data.video_id, content=data.content)

        with transaction(self.db):
            self.db.add(comment)

        self.db.refresh(comment)
        return CommentOut.model_validate(comment)

    def exists(self, cid: str) -> bool:
        return bool(
            self.db.query(
                exists().where(Comment.cid == cid, Comment.deleted_at.is_(None))
            ).scalar()
        )
