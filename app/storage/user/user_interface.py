from typing import Optional, Protocol

from app.schemas.user import UserCreate, UserOut


class IUserRepository(Protocol):
    """
    用户仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    """

    def get_user_by_uid(self, uid: str) -> Optional[UserOut]:
        """根据业务主键 uid 查询用户（已过滤软删除）"""
        ...

    def get_user_by_username(self, username: str) -> Optional[UserOut]:
        """根据用户名查询用户（用户名唯一）"""
        ...

    def exists(self, uid: str) -> bool:
        """只判断用户是否存在，不取整行数据"""
        ...

    def create_user(self, user_data: UserCreate) -> UserOut:
        """创建用户"""
        ...
