from fastapi import APIRouter, Depends

from app.schemas.comment import CommentCreate, CommentOut
from app.core.biz_response import BizResponse
from app.core.logx import logger
from app.core.security import get_current_user_id
from app.service import comment_svc

from app.storage.database import get_comment_repo, get_video_repo
from app.storage.comment.comment_interface import ICommentRepository
from app.storage.video.video_interface import IVideoRepository

from app.core.exceptions import InvalidIdError, VideoNotFound

comments_router = APIRouter(prefix="/comments", tags=["comments"])


@comments_router.post("/", response_model=CommentOut)
def create_comment(
    payload: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
    video_repo: IVideoRepository = Depends(get_video_repo),
):
    """在视频下发表评论"""
    try:
        comment = comment_svc.create_comment(
            comment_repo=comment_repo,
            video_repo=video_repo,
            owner_id=user_id,
            data=payload,
            to_dict=True,
        )
        return BizResponse(data=comment, msg="Comment added successfully", status_code=201)
    except InvalidIdError as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except VideoNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("create_comment error")
        return BizResponse(data=None, msg=str(e), status_code=500)
