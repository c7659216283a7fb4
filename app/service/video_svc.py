from typing import Any, Dict

from app.schemas.video import (
    VideoCreate,
    VideoOnlyCreate,
    VideoDetailOut,
    VideoQuery,
    BatchVideosOut,
    PaginationOut,
)
from app.storage.video.video_interface import IVideoRepository
from app.storage.user.user_interface import IUserRepository

from app.service.video_query import build_video_filter, resolve_sort_policy
from app.service.target_validator import validate_id
from app.core.pagination import paginate
from app.core.exceptions import UserNotFound, VideoNotFound, NoVideosFound
from app.core.logx import logger


#---------------------------------------- 发布 -----------------------------------------
def publish_video(
    user_repo: IUserRepository,
    video_repo: IVideoRepository,
    owner_id: str,
    data: VideoCreate,
    to_dict: bool = True,
) -> Dict | VideoDetailOut:
    """
    发布视频（文件已上传，这里只落库元数据）：
    1. 校验上传者是否存在
    2. 创建 videos 记录
    3. 返回带上传者信息的视频详情
    """
    if not user_repo.exists(owner_id):
        raise UserNotFound(user_id=owner_id)

    vid = video_repo.create_video(VideoOnlyCreate(owner_id=owner_id, **data.model_dump()))
    logger.info(f"Published video vid={vid} for owner={owner_id}")

    video = video_repo.get_video_detail(vid)
    if video is None:
        raise VideoNotFound(vid=vid)
    return video.model_dump() if to_dict else video


#---------------------------------------- 查询 -----------------------------------------
def get_video_by_id(
    video_repo: IVideoRepository,
    video_id: str,
    to_dict: bool = True,
) -> Dict | VideoDetailOut:
    video_id = validate_id(video_id, field="videoId")

    video = video_repo.get_video_detail(video_id)
    if video is None:
        raise VideoNotFound(vid=video_id)
    return video.model_dump() if to_dict else video


def list_videos(
    video_repo: IVideoRepository,
    query: VideoQuery,
    page: Any = None,
    limit: Any = None,
    to_dict: bool = True,
) -> Dict | BatchVideosOut:
    """
    视频检索：
    1. 构造过滤条件（上传者 / 标题简介关键字；上传者 id 非法 => InvalidIdError，空白视为不限）
    2. 解析排序方式
    3. 统计命中数 => 0 条直接 NoVideosFound
    4. 计算分页窗口（页码越界 => PageOutOfRangeError，在读取之前）
    5. 读取当前页
    """
    owner_id = query.owner_id.strip() if query.owner_id else None
    if owner_id:
        owner_id = validate_id(owner_id, field="userId")

    criteria = build_video_filter(owner_id=owner_id, search_text=query.search_text)
    sort = resolve_sort_policy(sort_by=query.sort_by, sort_type=query.sort_type)

    total = video_repo.count_videos(criteria)
    if total == 0:
        raise NoVideosFound()

    window = paginate(page, limit, total)
    videos = video_repo.list_videos(criteria, sort, skip=window.skip, limit=window.limit)
    if not videos:
        raise NoVideosFound()

    logger.debug(
        f"Listed {len(videos)} videos page={window.page}/{window.total_pages} "
        f"sort={sort.field}:{sort.direction}"
    )

    result = BatchVideosOut(
        videos=videos,
        pagination=PaginationOut(
            current_page=window.page,
            per_page=window.limit,
            total_items=window.total_items,
            total_pages=window.total_pages,
            has_prev_page=window.has_prev,
            has_next_page=window.has_next,
        ),
    )
    return result.model_dump() if to_dict else result
