from typing import Optional

from sqlalchemy import exists
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import UserCreate, UserOut
from app.storage.user.user_interface import IUserRepository
from app.core.db import transaction


class SQLAlchemyUserRepository(IUserRepository):
    """
    使用 SQLAlchemy 实现的用户仓库
    业务层依赖 IUserRepository 接口，而不是这个具体实现
    """

    def __init__(self, db: Session):
        self.db = db

    def _base_query(self):
        """内部封装一个基础查询（过滤软删除）"""
        return self.db.query(User).filter(User.deleted_at.is_(None))

    def get_user_by_uid(self, uid: str) -> Optional[UserOut]:
        user = self._base_query().filter(User.uid == uid).first()
        return UserOut.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserOut]:
        user = self._base_query().filter(User.username == username).first()
        return UserOut.model_validate(user) if user else None

    def exists(self, uid: str) -> bool:
        return bool(
            self.db.query(
                exists().where(User.uid == uid, User.deleted_at.is_(None))
            ).scalar()
        )

    def create_user(self, user_data: UserCreate) -> UserOut:
        """
        创建用户
        - 头像字段可为空
        """
        data = user_data.model_dump(exclude_none=True)
        user = User(**data)

        with transaction(self.db):
            self.db.add(user)

        # 提交完成之后再 refresh，拿到默认值（uid / created_at）
        self.db.refresh(user)
        return UserOut.model_validate(user)
