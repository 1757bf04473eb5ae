# (c) Nelen & Schuurmans

from pydantic import NonNegativeInt
from pydantic import PositiveInt

from .value_object import ValueObject

__all__ = ["PagedViewOptions", "DEFAULT_PAGE_SIZE"]

DEFAULT_PAGE_SIZE = 50


class PagedViewOptions(ValueObject):
    page_size: PositiveInt = DEFAULT_PAGE_SIZE
    # used by the search methods when they are called with debounce_ms=None
    search_debounce_ms: NonNegativeInt = 0
