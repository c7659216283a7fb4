from typing import Optional, List, Protocol

from sqlalchemy.sql.elements import ColumnElement

from app.schemas.video import VideoOnlyCreate, VideoOut, VideoDetailOut, SortPolicy


class IVideoRepository(Protocol):
    """
    视频仓库接口协议（数据层抽象接口）
    """

    def create_video(self, data: VideoOnlyCreate) -> str:
        """创建视频记录，返回新视频的 vid"""
        ...

    def get_video_detail(self, vid: str) -> Optional[VideoDetailOut]:
        """视频详情（连表带出上传者用户名、头像），不存在返回 None"""
        ...

    def exists(self, vid: str) -> bool:
        """只判断视频是否存在（未软删）"""
        ...

    def count_videos(self, criteria: ColumnElement) -> int:
        """统计满足检索条件的视频数"""
        ...

    def list_videos(self, criteria: ColumnElement, sort: SortPolicy, skip: int, limit: int) -> List[VideoOut]:
        """按排序方式读取一页视频"""
        ...
