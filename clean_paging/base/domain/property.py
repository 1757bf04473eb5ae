# (c) Nelen & Schuurmans

from enum import Enum

__all__ = ["Property", "PAGE_STATE"]


class Property(str, Enum):
    CURRENT_PAGE_ITEMS = "current_page_items"
    CURRENT_PAGE = "current_page"
    TOTAL_PAGES = "total_pages"
    HAS_NEXT = "has_next"
    HAS_PREVIOUS = "has_previous"
    IS_EMPTY = "is_empty"
    HAS_ITEMS = "has_items"
    IS_SOURCE_EMPTY = "is_source_empty"
    TOTAL_ITEMS = "total_items"
    PAGE_SIZE = "page_size"
    IS_SORTED = "is_sorted"
    IS_SEARCHING = "is_searching"


# everything that is derived from the filtered items and the page position
PAGE_STATE = (
    Property.CURRENT_PAGE_ITEMS,
    Property.CURRENT_PAGE,
    Property.TOTAL_PAGES,
    Property.HAS_NEXT,
    Property.HAS_PREVIOUS,
    Property.IS_EMPTY,
    Property.HAS_ITEMS,
    Property.IS_SOURCE_EMPTY,
    Property.TOTAL_ITEMS,
)
