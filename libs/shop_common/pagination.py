# libs/shop_common/pagination.py
"""
Page-based pagination over in-memory sequences.
"""

import math
from typing import Optional, Sequence, TypeVar

from .models import PaginatedResult, PaginationMeta, PaginationParams

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 50


def paginate(
    items: Sequence[T],
    params: Optional[PaginationParams] = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> PaginatedResult[T]:
    """
    Slice one page out of ``items``.

    Missing or non-positive values use the defaults, the page size is capped
    at ``max_page_size`` and the page is clamped to the last existing page.

    Returns:
        PaginatedResult with ``items`` and ``paginations`` metadata
    """
    params = params or PaginationParams()
    page = params.page if params.page and params.page > 0 else DEFAULT_PAGE
    page_size = (
        min(params.page_size, max_page_size)
        if params.page_size and params.page_size > 0
        else default_page_size
    )

    total_items = len(items)
    total_pages = max(math.ceil(total_items / page_size), 1)
    current_page = min(max(page, 1), total_pages)
    start = (current_page - 1) * page_size
    page_items = list(items[start : start + page_size])

    return PaginatedResult(
        items=page_items,
        paginations=PaginationMeta(
            current_page=current_page,
            total_pages=total_pages,
            page_size=page_size,
            total_items=total_items,
            items_on_page=len(page_items),
        ),
    )
