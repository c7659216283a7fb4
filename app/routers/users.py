from fastapi import APIRouter, Depends

from app.schemas.user import UserCreate, UserOut
from app.core.biz_response import BizResponse
from app.core.logx import logger
from app.service import user_svc

from app.storage.database import get_user_repo
from app.storage.user.user_interface import IUserRepository

from app.core.exceptions import InvalidIdError, UserNotFound, UsernameTakenError

users_router = APIRouter(prefix="/users", tags=["users"])


@users_router.post("/", response_model=UserOut)
def create_user(user: UserCreate, user_repo: IUserRepository = Depends(get_user_repo)):
    """
    创建用户（频道）
    """
    try:
        new_user = user_svc.create_user(user_repo=user_repo, user_data=user, to_dict=True)
        return BizResponse(data=new_user, msg="User created successfully", status_code=201)
    except UsernameTakenError as e:
        return BizResponse(data=None, msg=str(e), status_code=409)
    except Exception as e:
        logger.exception("create_user error")
        return BizResponse(data=None, msg=str(e), status_code=500)


@users_router.get("/{uid}", response_model=UserOut)
def get_user(uid: str, user_repo: IUserRepository = Depends(get_user_repo)):
    try:
        user = user_svc.get_user(user_repo=user_repo, uid=uid, to_dict=True)
        return BizResponse(data=user)
    except InvalidIdError as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except UserNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_user error")
        return BizResponse(data=None, msg=str(e), status_code=500)
