from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class BizResponse(JSONResponse):
    """
    统一响应体：
        {"statusCode": 200, "data": ..., "message": "ok", "success": true}
    - HTTP 状态码与 statusCode 保持一致
    - success = statusCode < 400
    """

    def __init__(self, data: Any = None, msg: Optional[str] = None, status_code: int = 200, **kwargs):
        success = status_code < 400
        body = {
            "statusCode": status_code,
            "data": jsonable_encoder(data),
            "message": msg if msg is not None else ("ok" if success else "error"),
            "success": success,
        }
        super().__init__(content=body, status_code=status_code, **kwargs)
