import uuid
from typing import Optional

from app.models.like import LikeTargetType
from app.storage.video.video_interface import IVideoRepository
from app.storage.comment.comment_interface import ICommentRepository
from app.storage.tweet.tweet_interface import ITweetRepository
from app.core.exceptions import InvalidIdError


def validate_id(value: Optional[str], field: str = "id") -> str:
    """
    校验业务主键格式（不访问数据库）：
    - 空 / 空白 => InvalidIdError
    - 不是 UUID => InvalidIdError
    返回规范化后的小写带横线形式，与库里存储的一致
    """
    if value is None or not value.strip():
        raise InvalidIdError(field=field, value=value)
    try:
        return str(uuid.UUID(value.strip()))
    except ValueError:
        raise InvalidIdError(field=field, value=value)


def target_exists(
    video_repo: IVideoRepository,
    comment_repo: ICommentRepository,
    tweet_repo: ITweetRepository,
    target_type: LikeTargetType,
    target_id: str,
) -> bool:
    """
    判断点赞目标是否存在：
    1. 先校验 ID 格式（失败直接抛 InvalidIdError，不查库）
    2. 再去对应的表做 exists 查询，只返回布尔值
    """
    target_id = validate_id(target_id, field=f"{target_type.label.lower()}Id")

    if target_type == LikeTargetType.VIDEO:
        return video_repo.exists(target_id)
    if target_type == LikeTargetType.COMMENT:
        return comment_repo.exists(target_id)
    if target_type == LikeTargetType.TWEET:
        return tweet_repo.exists(target_id)
    raise ValueError(f"unsupported target_type: {target_type}")
