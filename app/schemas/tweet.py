from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TweetCreate(BaseModel):
    """发布推文（社区动态）"""
    content: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class TweetOut(BaseModel):
    tid: str
    owner_id: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
