from typing import Protocol

from app.schemas.comment import CommentCreate, CommentOut


class ICommentRepository(Protocol):
    """
    评论仓库接口协议
    """

    def create_comment(self, owner_id: str, data: CommentCreate) -> CommentOut:
        """在视频下创建一条评论"""
        ...

    def exists(self, cid: str) -> bool:
        """只判断评论是否存在（未软删）"""
        ...
