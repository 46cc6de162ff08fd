"""Pagination utilities."""

from dataclasses import dataclass
from typing import TypeVar, Generic

T = TypeVar("T")


@dataclass
class PaginationResult(Generic[T]):
    """Result container for paginated queries."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages."""
        if self.total == 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size


def page_of(items: list[T], page: int, page_size: int) -> PaginationResult[T]:
    """Slice an already filtered and sorted list down to one page."""
    offset = (page - 1) * page_size
    return PaginationResult(
        items=items[offset : offset + page_size],
        total=len(items),
        page=page,
        page_size=page_size,
    )
