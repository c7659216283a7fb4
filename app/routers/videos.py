from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.schemas.video import VideoCreate, VideoDetailOut, VideoQuery, BatchVideosOut
from app.core.biz_response import BizResponse
from app.core.logx import logger
from app.core.security import get_current_user_id
from app.service import video_svc

from app.storage.database import get_user_repo, get_video_repo
from app.storage.user.user_interface import IUserRepository
from app.storage.video.video_interface import IVideoRepository

from app.core.exceptions import (
    InvalidIdError,
    UserNotFound,
    VideoNotFound,
    NoVideosFound,
    PageOutOfRangeError,
)

videos_router = APIRouter(prefix="/video", tags=["videos"])


# --------------------------------- 视频检索 ---------------------------------
@videos_router.get("/get-all-videos", response_model=BatchVideosOut)
def get_all_videos(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    query: Optional[str] = None,
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_type: Optional[str] = Query(default=None, alias="sortType"),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    _: str = Depends(get_current_user_id),
    video_repo: IVideoRepository = Depends(get_video_repo),
):
    """
    分页检索视频：
    - page / limit 原样接收字符串，非法值在分页计算里回落到默认值
    - query: 标题或简介关键字；userId: 上传者
    - sortBy: createdAt / views / duration；sortType: asc / desc
    """
    try:
        result = video_svc.list_videos(
            video_repo=video_repo,
            query=VideoQuery(owner_id=user_id, search_text=query, sort_by=sort_by, sort_type=sort_type),
            page=page,
            limit=limit,
            to_dict=True,
        )
        return BizResponse(data=result, msg="Videos fetched successfully")
    except InvalidIdError as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except PageOutOfRangeError as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except NoVideosFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_all_videos error")
        return BizResponse(data=None, msg=str(e), status_code=500)


# --------------------------------- 发布视频 ---------------------------------
@videos_router.post("/publish-video", response_model=VideoDetailOut)
def publish_video(
    payload: VideoCreate,
    user_id: str = Depends(get_current_user_id),
    user_repo: IUserRepository = Depends(get_user_repo),
    video_repo: IVideoRepository = Depends(get_video_repo),
):
    """
    发布视频：文件已由上传服务存好，这里只登记元数据和文件地址
    """
    try:
        video = video_svc.publish_video(
            user_repo=user_repo,
            video_repo=video_repo,
            owner_id=user_id,
            data=payload,
            to_dict=True,
        )
        return BizResponse(data=video, msg="Video is published successfully", status_code=201)
    except UserNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.exception(e)
        return BizResponse(data=None, msg=str(e), status_code=500)


# --------------------------------- 视频详情 ---------------------------------
@videos_router.get("/get-video-by-id/{video_id}", response_model=VideoDetailOut)
def get_video_by_id(
    video_id: str,
    _: str = Depends(get_current_user_id),
    video_repo: IVideoRepository = Depends(get_video_repo),
):
    try:
        video = video_svc.get_video_by_id(video_repo=video_repo, video_id=video_id, to_dict=True)
        return BizResponse(data=video, msg="Video fetched from videoId successfully")
    except InvalidIdError as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except VideoNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_video_by_id error")
        return BizResponse(data=None, msg=str(e), status_code=500)
