from typing import Optional

from fastapi import Header, HTTPException, status


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    当前操作用户：
    - 由上游身份服务（网关）注入 X-User-Id 请求头，这里视为可信的不透明 ID
    - 本服务不做认证，只要求请求头存在且非空
    """
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="missing X-User-Id header")
    return x_user_id.strip()
