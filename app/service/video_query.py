from typing import Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from app.models.video import Video
from app.schemas.video import DEFAULT_SORT_FIELD, SORT_DIRECTIONS, SORTABLE_FIELDS, SortPolicy


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _escape_like(text: str) -> str:
    """LIKE 模式里的 % _ 按字面匹配"""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_video_filter(owner_id: Optional[str] = None, search_text: Optional[str] = None) -> ColumnElement:
    """
    构造视频检索条件：
    - owner_id 非空 => 上传者精确匹配
    - search_text 非空 => 标题 或 简介 包含该文本（不区分大小写）
    - 两者都有 => AND
    - 都没有 => 不限制
    软删除的视频永远不参与检索。
    """
    clauses = [Video.deleted_at.is_(None)]

    owner_id = _clean(owner_id)
    if owner_id:
        clauses.append(Video.owner_id == owner_id)

    search_text = _clean(search_text)
    if search_text:
        pattern = f"%{_escape_like(search_text)}%"
        clauses.append(
            or_(
                Video.title.ilike(pattern, escape="\\"),
                Video.description.ilike(pattern, escape="\\"),
            )
        )

    return and_(*clauses)


def resolve_sort_policy(sort_by: Optional[str] = None, sort_type: Optional[str] = None) -> SortPolicy:
    """
    解析排序方式：
    | sort_by（白名单内） | sort_type       | 结果                |
    | 有                  | asc / desc      | (sort_by, sort_type) |
    | 有                  | 非法 / 缺省     | (sort_by, asc)       |
    | 无                  | asc             | (views, asc)         |
    | 无                  | 其他 / 缺省     | (views, desc)        |
    不在白名单里的 sort_by 当作没传。
    """
    field = _clean(sort_by)
    if field not in SORTABLE_FIELDS:
        field = None

    direction = _clean(sort_type)
    direction = direction.lower() if direction else None

    if field:
        if direction in SORT_DIRECTIONS:
            return SortPolicy(field, direction)
        return SortPolicy(field, "asc")

    if direction == "asc":
        return SortPolicy(DEFAULT_SORT_FIELD, "asc")
    return SortPolicy(DEFAULT_SORT_FIELD, "desc")
