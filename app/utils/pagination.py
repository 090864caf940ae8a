from dataclasses import dataclass
from typing import Optional

from app.core.config import settings
from app.schemas.common import PaginationOptions

DEFAULT_PAGE = 1
DEFAULT_SORT_BY = "created_at"
DEFAULT_SORT_ORDER = "desc"


@dataclass(frozen=True)
class PaginationResult:
    page: int
    limit: int
    skip: int
    sort_by: str
    sort_order: str


def calculate_pagination(options: Optional[PaginationOptions] = None) -> PaginationResult:
    """
    将分页参数规范化为 page/limit/skip 以及排序字段

    Args:
        options: 请求中的分页参数，缺省字段使用默认值（第1页、默认条数、按创建时间倒序）

    Returns:
        PaginationResult，其中 skip = (page - 1) * limit
    """
    options = options or PaginationOptions()

    page = options.page or DEFAULT_PAGE
    limit = options.limit or settings.DEFAULT_PAGE_LIMIT
    limit = min(limit, settings.MAX_PAGE_LIMIT)
    skip = (page - 1) * limit

    # 排序字段和方向需同时提供才生效
    sort_requested = bool(options.sort_by and options.sort_order)
    sort_by = options.sort_by if sort_requested else DEFAULT_SORT_BY
    sort_order = options.sort_order if sort_requested else DEFAULT_SORT_ORDER

    return PaginationResult(
        page=page,
        limit=limit,
        skip=skip,
        sort_by=sort_by,
        sort_order=sort_order,
    )
