# catalog/pagination.py
from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

ROWS_PER_PAGE_OPTIONS = (5, 10, 25, 50)
DEFAULT_ROWS_PER_PAGE = 10


def page_count(total: int, rows_per_page: int) -> int:
    if rows_per_page <= 0 or total <= 0:
        return 0
    return (total + rows_per_page - 1) // rows_per_page


def clamp_page(page: int, total: int, rows_per_page: int) -> int:
    """Keep `page` inside [0, last page]; an empty list only has page 0."""
    last = max(page_count(total, rows_per_page) - 1, 0)
    return min(max(page, 0), last)


def paginate(items: Sequence[T], page: int, rows_per_page: int) -> List[T]:
    """Rows [page*rpp, page*rpp + rpp) of `items` (0-based page)."""
    if rows_per_page <= 0:
        return []
    start = max(page, 0) * rows_per_page
    return list(items[start:start + rows_per_page])
