# domain_exceptions.py
from typing import Optional


class InvalidIdError(Exception):
    """
    业务主键格式非法时抛出（在访问数据库之前）：
    - 空字符串 / 只有空白
    - 不是合法的 UUID
    """

    def __init__(self, field: str = "id", value: Optional[str] = None, message: Optional[str] = None):
        self.field = field
        self.value = value
        if message:
            self.message = message
        elif value is None or not str(value).strip():
            self.message = f"{field} cannot be left blank!"
        else:
            self.message = f"Invalid {field} passed: '{value}'"
        super().__init__(self.message)


class UserNotFound(Exception):
    """
    在需要用户存在的场景下未找到对应用户时抛出：
    - 例如发布视频时校验作者、查询用户资料
    """

    def __init__(self, user_id: Optional[str] = None, message: Optional[str] = None):
        if message:
            self.message = message
        elif user_id is not None:
            self.message = f"User with id '{user_id}' not found."
        else:
            self.message = "User not found."

        super().__init__(self.message)


class VideoNotFound(Exception):
    """找不到视频"""
    def __init__(self, vid: str | None = None, message: str | None = None):
        if message:
            super().__init__(message)
        else:
            super().__init__(f"video {vid} not found")


class TargetNotFound(Exception):
    """点赞目标（视频 / 评论 / 推文）不存在，只在“新建点赞”分支上抛出"""
    def __init__(self, target_type, target_id: str):
        self.target_type = target_type
        self.target_id = target_id
        name = getattr(target_type, "label", str(target_type))
        super().__init__(f"{name} {target_id} not found in the database!")


class LikeConflictError(Exception):
    """
    并发点赞冲突：
    - 两个请求同时判断“无记录可删”，都去创建
    - 输掉唯一约束 uq_likes_user_target 的那一方收到这个异常
    业务层把它当作良性冲突处理，不会透出给调用方
    """

    def __init__(self, user_id: str, target_type, target_id: str):
        self.user_id = user_id
        self.target_type = target_type
        self.target_id = target_id
        super().__init__(
            f"like for user {user_id} on target_type={target_type}, target_id={target_id} already exists"
        )


class EmptyResultError(Exception):
    """列表查询命中 0 条记录（区别于“引用的实体不存在”）"""
    def __init__(self, message: str = "No records found!"):
        self.message = message
        super().__init__(message)


class NoLikedVideosFound(EmptyResultError):
    """用户没有任何（仍可解析的）点赞视频"""
    def __init__(self, user_id: str | None = None):
        self.user_id = user_id
        super().__init__("No videos liked by user!")


class NoVideosFound(EmptyResultError):
    """检索条件没有匹配到任何视频"""
    def __init__(self, message: str = "No videos found!"):
        super().__init__(message)


class PageOutOfRangeError(Exception):
    """请求页码超过总页数"""
    def __init__(self, page: int, total_pages: int):
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"Out of range page requested! page={page}, total_pages={total_pages}")


class UsernameTakenError(Exception):
    """用户名已被占用"""
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"username '{username}' is already taken")
