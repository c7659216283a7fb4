from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, ConfigDict


class UserCreate(BaseModel):
    """
    创建用户（频道）
    - 头像已由媒体服务上传完毕，这里只记录地址
    """
    username: str
    email: Optional[EmailStr] = None
    avatar_url: Optional[str] = None
    avatar_public_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class UserOut(BaseModel):
    """
    对外返回的用户基础信息
    """
    uid: str                                     # 业务主键（UUID 字符串）
    username: str                                # 用户名
    email: Optional[EmailStr] = None
    avatar_url: Optional[str] = None             # 头像 URL
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
