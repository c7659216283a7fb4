from typing import Dict

from app.schemas.comment import CommentCreate, CommentOut
from app.storage.comment.comment_interface import ICommentRepository
from app.storage.video.video_interface import IVideoRepository
from app.service.target_validator import validate_id
from app.core.exceptions import VideoNotFound
from app.core.logx import logger


def create_comment(
    comment_repo: ICommentRepository,
    video_repo: IVideoRepository,
    owner_id: str,
    data: CommentCreate,
    to_dict: bool = True,
) -> Dict | CommentOut:
    """
    在视频下发表评论：
    - 视频 ID 非法 => InvalidIdError
    - 视频不存在 => VideoNotFound
    """
    video_id = validate_id(data.video_id, field="videoId")
    if not video_repo.exists(video_id):
        raise VideoNotFound(vid=video_id)

    comment = comment_repo.create_comment(owner_id, CommentCreate(video_id=video_id, content=data.content))
    logger.info(f"User {owner_id} commented on video {video_id}, cid={comment.cid}")
    return comment.model_dump() if to_dict else comment
