# (c) Nelen & Schuurmans

import logging
from typing import Any

from pydantic import Field

from ..application import PagedView
from ..application import PropertyListener
from ..domain import resolve_field_path
from ..domain import ValueObject

__all__ = ["SortRequest", "PagedViewAdapter"]

logger = logging.getLogger(__name__)


class SortRequest(ValueObject):
    """A column-header click: sort on a field path in the given direction."""

    field: str = Field(min_length=1)
    ascending: bool = True


class PagedViewAdapter:
    """Untyped paging interface for widgets that don't know the item type.

    Exposes the current page and navigation of a PagedView, and translates
    sort requests on dotted field paths into selector-based sorts.
    """

    def __init__(self, view: PagedView[Any]):
        self.view = view
        self._sort_request: SortRequest | None = None

    @property
    def current_page_items(self) -> list[Any]:
        return list(self.view.current_page_items)

    @property
    def current_page(self) -> int:
        return self.view.current_page

    @property
    def total_pages(self) -> int:
        return self.view.total_pages

    @property
    def has_next(self) -> bool:
        return self.view.has_next

    @property
    def has_previous(self) -> bool:
        return self.view.has_previous

    def next_page(self) -> None:
        self.view.next_page()

    def previous_page(self) -> None:
        self.view.previous_page()

    def go_to_page(self, page: int) -> None:
        self.view.go_to_page(page)

    def subscribe(self, listener: PropertyListener) -> PropertyListener:
        return self.view.subscribe(listener)

    def unsubscribe(self, listener: PropertyListener) -> None:
        self.view.unsubscribe(listener)

    @property
    def sort_request(self) -> SortRequest | None:
        """The last applied sort request, if the view is still sorted by it."""
        if not self.view.is_sorted:
            self._sort_request = None
        return self._sort_request

    def request_sort(self, request: SortRequest) -> None:
        logger.debug("sort on %s (ascending=%s)", request.field, request.ascending)
        self.view.set_sort(resolve_field_path(request.field), request.ascending)
        self._sort_request = request

    def toggle_sort(self, field: str) -> SortRequest:
        """Sort on ``field``; flips the direction if it is already sorted on it."""
        current = self.sort_request
        if current is not None and current.field == field:
            request = current.update(ascending=not current.ascending)
        else:
            request = SortRequest.create(field=field)
        self.request_sort(request)
        return request

    def clear_sort(self) -> None:
        self.view.clear_sort()
        self._sort_request = None
