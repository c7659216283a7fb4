# app/storage/like/like_interface.py

from typing import Optional, List, Protocol

from app.models.like import LikeTargetType
from app.schemas.like import LikeCreate, LikeOut, LikedVideoOut


class ILikeRepository(Protocol):
    """
    点赞仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    """

    def find_and_delete(self, user_id: str, target_type: LikeTargetType, target_id: str) -> Optional[LikeOut]:
        """
        原子地删除 (user_id, target_type, target_id) 对应的点赞：
        - 删除成功 => 返回被删除的记录
        - 没有记录（或已被并发请求删掉）=> None
        """
        ...

    def create(self, data: LikeCreate) -> LikeOut:
        """
        新建点赞：
        - 触发唯一约束（并发请求抢先创建）=> LikeConflictError
        """
        ...

    def list_liked_videos(self, user_id: str) -> List[LikedVideoOut]:
        """
        点赞 -> 视频 -> 上传者 三表连接后拍平：
        - 视频或上传者已经不存在的点赞直接被连接丢弃
        - 按点赞时间倒序
        """
        ...
