"""Offset/limit windows and page metadata shared by listings and search."""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from chat_system.errors import ValidationFailure

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
# Largest OFFSET accepted by a signed 64-bit SQL integer.
MAX_SQL_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageWindow:
    """A normalized page request together with the rows it selects."""

    page: int
    per_page: int
    offset: int
    limit: int
    total: int
    total_pages: int

    def meta(self) -> Dict[str, int]:
        """Return the ``meta`` block rendered next to paginated data."""
        return {
            "page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "total_pages": self.total_pages,
        }


def _coerce(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class PaginationEngine:
    """Compute page windows from a requested page/size and a total count."""

    def __init__(
        self,
        default_per_page: int = DEFAULT_PER_PAGE,
        max_per_page: Optional[int] = None,
        max_result_window: Optional[int] = None,
    ) -> None:
        """
        Args:
            default_per_page (int): Page size used when the request omits or garbles it.
            max_per_page (Optional[int]): Upper clamp on the page size, None for no bound.
            max_result_window (Optional[int]): Largest ``offset + limit`` a request may
                reach, None to only enforce the SQL integer range.
        """
        self.default_per_page = default_per_page
        self.max_per_page = max_per_page
        self.max_result_window = max_result_window

    def normalize(self, page: Any, per_page: Any) -> tuple[int, int]:
        """
        Coerce page and page size to integers clamped to their allowed range.

        Raises:
            ValidationFailure: the requested page lies beyond the result window.
        """
        page_number = max(_coerce(page, DEFAULT_PAGE), 1)
        size = max(_coerce(per_page, self.default_per_page), 1)
        if self.max_per_page is not None:
            size = min(size, self.max_per_page)

        reach = page_number * size
        if reach > MAX_SQL_OFFSET or (
            self.max_result_window is not None and reach > self.max_result_window
        ):
            raise ValidationFailure("Requested page is out of range")
        return page_number, size

    def window(self, page: Any, per_page: Any, total: int) -> PageWindow:
        """
        Compute offset, limit and page count.

        ``offset = (page - 1) * per_page`` and ``total_pages = ceil(total / per_page)``,
        which is 0 for an empty collection.
        """
        page_number, size = self.normalize(page, per_page)
        total = max(int(total), 0)
        return PageWindow(
            page=page_number,
            per_page=size,
            offset=(page_number - 1) * size,
            limit=size,
            total=total,
            total_pages=math.ceil(total / size),
        )
