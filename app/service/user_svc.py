from typing import Dict

from app.schemas.user import UserCreate, UserOut
from app.storage.user.user_interface import IUserRepository
from app.service.target_validator import validate_id
from app.core.exceptions import UserNotFound, UsernameTakenError
from app.core.logx import logger


def create_user(user_repo: IUserRepository, user_data: UserCreate, to_dict: bool = True) -> Dict | UserOut:
    """
    创建用户：
    - 用户名唯一，重复 => UsernameTakenError
    """
    if user_repo.get_user_by_username(user_data.username):
        raise UsernameTakenError(username=user_data.username)

    user = user_repo.create_user(user_data)
    logger.info(f"Created user uid={user.uid} username={user.username}")
    return user.model_dump() if to_dict else user


def get_user(user_repo: IUserRepository, uid: str, to_dict: bool = True) -> Dict | UserOut:
    uid = validate_id(uid, field="userId")
    user = user_repo.get_user_by_uid(uid)
    if not user:
        raise UserNotFound(user_id=uid)
    return user.model_dump() if to_dict else user
