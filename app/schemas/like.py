from typing import Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.models.like import LikeTargetType


class LikeCreate(BaseModel):
    """
    创建点赞：
    - 一个用户对同一 target_type + target_id 最多只有一条点赞记录
    """
    user_id: str                          # 点赞用户 ID
    target_type: LikeTargetType           # 点赞目标类型（0: 视频, 1: 评论, 2: 推文）
    target_id: str                        # 点赞目标业务主键（vid / cid / tid）

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class LikeOut(BaseModel):
    """对外返回的点赞记录"""
    lid: str
    user_id: str
    target_type: LikeTargetType
    target_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ToggleLikeOut(BaseModel):
    """
    toggle 结果：
    - liked=True  => 本次新建了点赞，like 为新记录
    - liked=False => 本次取消了点赞，like 为空
    """
    liked: bool
    like: Optional[LikeOut] = None


class LikedVideoOut(BaseModel):
    """
    “我点赞的视频”列表中的一行：点赞 -> 视频 -> 上传者 拍平后的结果
    """
    title: str
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    video_file: str
    duration: float
    views: int
    created_at: datetime
    video_owner_username: str
    video_owner_avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
