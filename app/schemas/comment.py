from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """在视频下发表评论"""
    video_id: str
    content: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class CommentOut(BaseModel):
    cid: str
    video_id: str
    owner_id: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
