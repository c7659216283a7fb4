from typing import Dict, List

from app.schemas.like import LikeCreate, ToggleLikeOut, LikedVideoOut
from app.models.like import LikeTargetType

from app.storage.like.like_interface import ILikeRepository
from app.storage.video.video_interface import IVideoRepository
from app.storage.comment.comment_interface import ICommentRepository
from app.storage.tweet.tweet_interface import ITweetRepository

from app.service.target_validator import validate_id, target_exists
from app.core.exceptions import TargetNotFound, LikeConflictError, NoLikedVideosFound
from app.core.logx import logger


# ----------------------------- 点赞 toggle -----------------------------
def toggle_like(
    like_repo: ILikeRepository,
    video_repo: IVideoRepository,
    comment_repo: ICommentRepository,
    tweet_repo: ITweetRepository,
    user_id: str,
    target_type: LikeTargetType,
    target_id: str,
    to_dict: bool = True,
) -> Dict | ToggleLikeOut:
    """
    点赞 / 取消点赞（同一个接口来回切换）：

    1. 校验目标 ID 格式（非法直接 InvalidIdError，不访问数据库）
    2. 尝试删除已有点赞
       - 删到了 => 本次是“取消点赞”，liked=False（不再校验目标是否存在）
    3. 没删到 => 校验目标是否存在
       - 不存在 => TargetNotFound，且不创建任何记录
       - 存在 => 新建点赞，liked=True
    4. 新建时输给了并发请求（唯一约束冲突）=> 当作一次删除重试，liked=False
    """
    target_id = validate_id(target_id, field=f"{target_type.label.lower()}Id")

    # 2. 先删
    removed = like_repo.find_and_delete(user_id, target_type, target_id)
    if removed is not None:
        logger.info(
            f"User {user_id} unliked target_type={target_type.name} "
            f"target_id={target_id}, lid={removed.lid}"
        )
        result = ToggleLikeOut(liked=False)
        return result.model_dump() if to_dict else result

    # 3. 没有可删的点赞 => 校验目标后创建
    if not target_exists(video_repo, comment_repo, tweet_repo, target_type, target_id):
        raise TargetNotFound(target_type=target_type, target_id=target_id)

    data = LikeCreate(user_id=user_id, target_type=target_type, target_id=target_id)
    try:
        like_out = like_repo.create(data)
    except LikeConflictError as e:
        # 4. 并发请求刚建好同一条点赞：本次按“删除”处理
        logger.info(f"LikeConflictError: {e}; retrying as unlike")
        like_repo.find_and_delete(user_id, target_type, target_id)
        result = ToggleLikeOut(liked=False)
        return result.model_dump() if to_dict else result

    logger.info(
        f"User {user_id} liked target_type={target_type.name} "
        f"target_id={target_id}, lid={like_out.lid}"
    )
    result = ToggleLikeOut(liked=True, like=like_out)
    return result.model_dump() if to_dict else result


# ----------------------------- 我点赞的视频 -----------------------------
def get_liked_videos(
    like_repo: ILikeRepository,
    user_id: str,
    to_dict: bool = True,
) -> List[Dict] | List[LikedVideoOut]:
    """
    查询用户点赞过的视频（带上传者信息的拍平结果）：
    - 视频 / 上传者已不存在的点赞不会出现在结果里
    - 结果为空 => NoLikedVideosFound（接口层返回 404）
    """
    items = like_repo.list_liked_videos(user_id)
    if not items:
        raise NoLikedVideosFound(user_id=user_id)

    return [item.model_dump() for item in items] if to_dict else items
