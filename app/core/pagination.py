import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from app.core.config import settings
from app.core.exceptions import PageOutOfRangeError


class PageWindow(BaseModel):
    """
    一次分页读取的窗口：
    - page / limit 都是归一化之后的值（page 从 1 开始）
    - skip = (page - 1) * limit
    """
    page: int
    limit: int
    total_items: int
    total_pages: int
    skip: int
    has_prev: bool
    has_next: bool

    model_config = ConfigDict(frozen=True)


def _to_int(raw: Any) -> Optional[int]:
    """查询参数可能是字符串；非整数一律视为缺省"""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def normalize_page(raw: Any) -> int:
    """非数字或 <= 0 => 默认第 1 页"""
    page = _to_int(raw)
    if page is None or page <= 0:
        return settings.DEFAULT_PAGE
    return page


def normalize_limit(raw: Any) -> int:
    """非数字、<= 0 或 >= MAX_LIMIT => 默认每页 10 条"""
    limit = _to_int(raw)
    if limit is None or limit <= 0 or limit >= settings.MAX_LIMIT:
        return settings.DEFAULT_LIMIT
    return limit


def paginate(page: Any, limit: Any, total_matching: int) -> PageWindow:
    """
    计算分页窗口：
    1. 先归一化 page / limit
    2. total_pages = ceil(total_matching / limit)，使用归一化后的 limit
    3. page 超过 total_pages => PageOutOfRangeError（在真正读取之前）
    """
    page_value = normalize_page(page)
    limit_value = normalize_limit(limit)

    total_pages = math.ceil(total_matching / limit_value)
    if page_value > total_pages:
        raise PageOutOfRangeError(page=page_value, total_pages=total_pages)

    return PageWindow(
        page=page_value,
        limit=limit_value,
        total_items=total_matching,
        total_pages=total_pages,
        skip=(page_value - 1) * limit_value,
        has_prev=page_value > 1,
        has_next=page_value < total_pages,
    )
