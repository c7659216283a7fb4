from typing import NamedTuple, Optional, List
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class VideoCreate(BaseModel):
    """
    发布视频：
    - 文件已经由上传服务存到媒体存储，这里只接收元数据 + 文件引用
    - owner_id 由接口层根据当前用户填入
    """
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    duration: float = Field(default=0, ge=0)       # 时长（秒）
    video_file_url: str = Field(min_length=1)
    video_file_public_id: Optional[str] = None
    thumbnail_url: Optional[str] = None
    thumbnail_public_id: Optional[str] = None
    is_published: bool = True

    model_config = ConfigDict(extra="forbid")


class VideoOnlyCreate(VideoCreate):
    """仓库层使用：带上 owner_id 的完整创建数据"""
    owner_id: str


class VideoOut(BaseModel):
    """检索列表里的视频信息"""
    vid: str
    owner_id: str
    title: str
    description: Optional[str] = None
    duration: float
    views: int
    is_published: bool
    video_file_url: str
    thumbnail_url: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class VideoDetailOut(VideoOut):
    """视频详情：附带上传者用户名和头像"""
    owner_username: str
    owner_avatar_url: Optional[str] = None


class PaginationOut(BaseModel):
    """分页信息"""
    current_page: int
    per_page: int
    total_items: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool


class BatchVideosOut(BaseModel):
    """视频检索结果：当前页视频 + 分页信息"""
    videos: List[VideoOut]
    pagination: PaginationOut


class VideoQuery(BaseModel):
    """
    视频检索条件（不可变）：
    - owner_id: 只看某个上传者
    - search_text: 标题或简介包含该文本（不区分大小写）
    - sort_by / sort_type: 原样保存，由 resolve_sort_policy 解析
    """
    owner_id: Optional[str] = None
    search_text: Optional[str] = None
    sort_by: Optional[str] = None
    sort_type: Optional[str] = None

    model_config = ConfigDict(frozen=True)


# 允许排序的字段（对外名称）
SORTABLE_FIELDS = ("createdAt", "views", "duration")
SORT_DIRECTIONS = ("asc", "desc")

DEFAULT_SORT_FIELD = "views"


class SortPolicy(NamedTuple):
    """解析后的排序方式"""
    field: str       # SORTABLE_FIELDS 之一
    direction: str   # "asc" / "desc"
