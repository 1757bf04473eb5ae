# (c) Nelen & Schuurmans

from collections.abc import Sequence
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel

__all__ = [
    "Page",
    "total_pages",
    "clamp_page_index",
    "remap_page_index",
    "page_slice",
]

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    total: int
    items: Sequence[T]
    limit: int | None = None
    offset: int | None = None
    page: int = 1
    total_pages: int = 1


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items; never less than 1.

    An empty result still has one (empty) page so that a counter never reads
    "page 1 of 0".
    """
    return max(1, -(-total // page_size))


def clamp_page_index(index: int, total: int, page_size: int) -> int:
    return min(max(index, 0), total_pages(total, page_size) - 1)


def remap_page_index(offset: int, page_size: int, total: int) -> int:
    """Zero-based page index that shows the item at flat ``offset``.

    Used to keep the first visible item on screen when the page size or the
    result set changes.
    """
    return clamp_page_index(offset // page_size, total, page_size)


def page_slice(items: Sequence[T], index: int, page_size: int) -> list[T]:
    start = index * page_size
    return list(items[start : start + page_size])
