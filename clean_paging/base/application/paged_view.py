# (c) Nelen & Schuurmans

import logging
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Sequence
from typing import Any
from typing import Generic
from typing import TypeVar

import blinker

from clean_paging.blinker import BlinkerEventProvider

from ..domain import apply_sort
from ..domain import as_predicate
from ..domain import as_selectors
from ..domain import clamp_page_index
from ..domain import Debouncer
from ..domain import DEFAULT_PAGE_SIZE
from ..domain import EventProvider
from ..domain import Filter
from ..domain import FilterKey
from ..domain import FilterSet
from ..domain import FiltersChanged
from ..domain import InvalidArgument
from ..domain import InvalidRange
from ..domain import Page
from ..domain import PAGE_STATE
from ..domain import page_slice
from ..domain import PageChanged
from ..domain import PagedViewOptions
from ..domain import PageSizeChanged
from ..domain import Predicate
from ..domain import Property
from ..domain import remap_page_index
from ..domain import Scheduler
from ..domain import Search
from ..domain import SearchChanged
from ..domain import SearchMode
from ..domain import Selector
from ..domain import SortChanged
from ..domain import SortKey
from ..domain import SortSelector
from ..domain import SourceChanged
from ..domain import total_pages
from ..infrastructure import AsyncioScheduler

__all__ = ["PagedView", "PropertyListener"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

PropertyListener = Callable[..., None]

NAVIGATION_STATE = (
    Property.CURRENT_PAGE_ITEMS,
    Property.CURRENT_PAGE,
    Property.HAS_NEXT,
    Property.HAS_PREVIOUS,
)


def _check_page_size(page_size: int) -> int:
    if page_size is None:
        raise InvalidArgument("page_size")
    if page_size <= 0:
        raise InvalidRange("page_size", page_size)
    return page_size


class PagedView(Generic[T]):
    """A filtered, searched, sorted and paged view over an in-memory sequence.

    The filtered items are always derived from the source in a fixed order:
    filters (ANDed), then search, then sort. Every mutating call recomputes
    them and then notifies subscribers.

    Structural changes (``set_source``, ``clear_filters``, ``clear_search``,
    ``clear_sort``) go back to the first page. Refinements (``set_filter``,
    ``remove_filter``, ``set_search``, ``set_sort``, ``set_page_size``) keep
    the first visible item's offset and clamp the page into range.

    Not thread-safe: a view must be owned by a single thread. Debounced
    searches run through the scheduler, which must call back on that same
    thread.
    """

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        scheduler: Scheduler | None = None,
        event_provider: EventProvider | None = None,
        search_debounce_ms: int = 0,
    ):
        self._page_size = _check_page_size(page_size)
        self._page_index = 0
        self._source: list[T] = []
        self._filtered: list[T] = []
        self._filters: FilterSet[T] = FilterSet()
        self._search = Search()
        self._sort: list[SortKey] = []
        self._is_searching = False
        self._search_debounce_ms = self._check_debounce(search_debounce_ms)
        self._debouncer = Debouncer(scheduler or AsyncioScheduler())
        self.property_changed = blinker.Signal()
        self.events = event_provider or BlinkerEventProvider()

    @classmethod
    def from_options(
        cls,
        options: PagedViewOptions,
        scheduler: Scheduler | None = None,
        event_provider: EventProvider | None = None,
    ) -> "PagedView[T]":
        return cls(
            page_size=options.page_size,
            scheduler=scheduler,
            event_provider=event_provider,
            search_debounce_ms=options.search_debounce_ms,
        )

    # lifecycle

    def close(self) -> None:
        if self._debouncer.cancel():
            logger.debug("discarded a pending search on close")
        self._is_searching = False

    def __enter__(self) -> "PagedView[T]":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # notifications

    def subscribe(self, listener: PropertyListener) -> PropertyListener:
        """Call ``listener(view, property=Property.X)`` on every change."""
        self.property_changed.connect(listener, sender=self, weak=False)
        return listener

    def unsubscribe(self, listener: PropertyListener) -> None:
        self.property_changed.disconnect(listener, sender=self)

    def _notify(self, *properties: Property) -> None:
        for prop in properties:
            self.property_changed.send(self, property=prop)

    # source & filters

    def set_source(self, items: Iterable[T]) -> None:
        if items is None:
            raise InvalidArgument("items")
        self._source = list(items)
        self._recompute(reset=True)
        self.events.send(SourceChanged(total_items=len(self._source)))

    def add_filter(self, predicate: Predicate | Filter) -> FilterKey:
        """Add an anonymous filter; returns the generated key."""
        predicate = as_predicate(predicate)
        key = self._filters.new_key()
        self.set_filter(key, predicate)
        return key

    def set_filter(self, key: FilterKey, predicate: Predicate | Filter) -> None:
        if key is None:
            raise InvalidArgument("key")
        self._filters.set(key, as_predicate(predicate))
        self._recompute(reset=False)
        self._send_filters_changed()

    def remove_filter(self, key: FilterKey) -> None:
        if key is None:
            raise InvalidArgument("key")
        if not self._filters.remove(key):
            return
        self._recompute(reset=False)
        self._send_filters_changed()

    def clear_filters(self) -> None:
        self._filters.clear()
        self._recompute(reset=True)
        self._send_filters_changed()

    def get_active_filters(self) -> frozenset[FilterKey]:
        return self._filters.keys()

    def _send_filters_changed(self) -> None:
        self.events.send(FiltersChanged(keys=self._filters.keys()))

    # search

    def set_search(
        self,
        selectors: Selector | Sequence[Selector],
        term: str | None,
        use_wildcards: bool = False,
        debounce_ms: int | None = None,
    ) -> None:
        """Search in the selected fields; an item matches if any field matches."""
        self._start_search(selectors, term, use_wildcards, debounce_ms, SearchMode.ANY)

    def set_search_all(
        self,
        selectors: Selector | Sequence[Selector],
        term: str | None,
        use_wildcards: bool = False,
        debounce_ms: int | None = None,
    ) -> None:
        """Search in the selected fields; an item matches if all fields match."""
        self._start_search(selectors, term, use_wildcards, debounce_ms, SearchMode.ALL)

    def clear_search(self, debounce_ms: int | None = None) -> None:
        delay = self._debounce_or_default(debounce_ms)
        self._search = Search()
        self._run_search(delay, reset=True)

    def _start_search(
        self,
        selectors: Selector | Sequence[Selector],
        term: str | None,
        use_wildcards: bool,
        debounce_ms: int | None,
        mode: SearchMode,
    ) -> None:
        search = Search.create(
            selectors=as_selectors(selectors),
            term=term,
            use_wildcards=use_wildcards,
            mode=mode,
        )
        delay = self._debounce_or_default(debounce_ms)
        self._search = search
        self._run_search(delay, reset=False)

    def _run_search(self, debounce_ms: int, reset: bool) -> None:
        if debounce_ms > 0 and self._schedule_search(debounce_ms, reset):
            self._set_searching(True)
            return
        self._debouncer.cancel()
        self._complete_search(reset)

    def _schedule_search(self, debounce_ms: int, reset: bool) -> bool:
        """Returns False when the scheduler refuses (e.g. no running loop)."""
        try:
            self._debouncer.schedule(
                debounce_ms / 1000, lambda: self._complete_search(reset)
            )
        except RuntimeError as e:
            logger.warning("could not debounce search (%s), searching now", e)
            return False
        return True

    def _complete_search(self, reset: bool) -> None:
        self._recompute(reset=reset)
        self._set_searching(False)
        self.events.send(SearchChanged(term=self._search.term, mode=self._search.mode))

    def _set_searching(self, value: bool) -> None:
        if self._is_searching == value:
            return
        self._is_searching = value
        self._notify(Property.IS_SEARCHING)

    def _debounce_or_default(self, debounce_ms: int | None) -> int:
        if debounce_ms is None:
            return self._search_debounce_ms
        return self._check_debounce(debounce_ms)

    @staticmethod
    def _check_debounce(debounce_ms: int) -> int:
        if debounce_ms < 0:
            raise InvalidRange("debounce_ms", debounce_ms, "must not be negative")
        return debounce_ms

    # sort

    def set_sort(self, selector: SortSelector, ascending: bool = True) -> None:
        if selector is None:
            raise InvalidArgument("selector")
        self._sort = [SortKey.create(selector=selector, ascending=ascending)]
        self._recompute(reset=False)
        self._notify(Property.IS_SORTED)
        self.events.send(SortChanged(is_sorted=True, ascending=ascending))

    def clear_sort(self) -> None:
        self._sort = []
        self._recompute(reset=True)
        self._notify(Property.IS_SORTED)
        self.events.send(SortChanged(is_sorted=False))

    # navigation

    def next_page(self) -> None:
        if self.has_next:
            self._move_to(self._page_index + 1)

    def previous_page(self) -> None:
        if self.has_previous:
            self._move_to(self._page_index - 1)

    def go_to_page(self, page: int) -> None:
        """Go to a 1-based page number, clamped to the available pages."""
        index = clamp_page_index(page - 1, len(self._filtered), self._page_size)
        if index != self._page_index:
            self._move_to(index)

    def go_to_first_page(self) -> None:
        self.go_to_page(1)

    def go_to_last_page(self) -> None:
        self.go_to_page(self.total_pages)

    def _move_to(self, index: int) -> None:
        self._page_index = index
        self._notify(*NAVIGATION_STATE)
        self.events.send(PageChanged(page=self.current_page))

    def set_page_size(self, page_size: int) -> None:
        """Change the page size, keeping the first visible item on screen."""
        _check_page_size(page_size)
        offset = self._page_index * self._page_size
        self._page_size = page_size
        self._page_index = remap_page_index(offset, page_size, len(self._filtered))
        self._notify(*PAGE_STATE, Property.PAGE_SIZE)
        self.events.send(PageSizeChanged(page_size=page_size))

    # recomputation

    def _apply(self) -> list[T]:
        items = self._filters.apply(self._source)
        if self._search.is_active:
            items = [x for x in items if self._search.matches(x)]
        return apply_sort(items, self._sort)

    def _recompute(self, reset: bool) -> None:
        offset = self._page_index * self._page_size
        self._filtered = self._apply()
        if reset:
            self._page_index = 0
        else:
            self._page_index = remap_page_index(
                offset, self._page_size, len(self._filtered)
            )
        logger.debug(
            "recomputed %d of %d items, page %d/%d",
            len(self._filtered),
            len(self._source),
            self.current_page,
            self.total_pages,
        )
        self._notify(*PAGE_STATE)

    # derived state

    @property
    def source(self) -> Sequence[T]:
        return tuple(self._source)

    @property
    def filtered(self) -> Sequence[T]:
        return tuple(self._filtered)

    @property
    def current_page_items(self) -> list[T]:
        return page_slice(self._filtered, self._page_index, self._page_size)

    @property
    def current_page(self) -> int:
        return self._page_index + 1

    @property
    def total_pages(self) -> int:
        return total_pages(len(self._filtered), self._page_size)

    @property
    def total_items(self) -> int:
        return len(self._filtered)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def has_next(self) -> bool:
        return self._page_index < self.total_pages - 1

    @property
    def has_previous(self) -> bool:
        return self._page_index > 0

    @property
    def is_empty(self) -> bool:
        return not self._filtered

    @property
    def has_items(self) -> bool:
        return bool(self._filtered)

    @property
    def is_source_empty(self) -> bool:
        return not self._source

    @property
    def is_sorted(self) -> bool:
        return bool(self._sort)

    @property
    def sort_ascending(self) -> bool | None:
        return self._sort[0].ascending if self._sort else None

    @property
    def is_searching(self) -> bool:
        return self._is_searching

    @property
    def has_pending_search(self) -> bool:
        return self._debouncer.pending

    @property
    def search_term(self) -> str | None:
        return self._search.term

    @property
    def use_wildcards(self) -> bool:
        return self._search.use_wildcards

    @property
    def search_mode(self) -> SearchMode:
        return self._search.mode

    def page(self) -> Page[T]:
        """A snapshot of the current page."""
        return Page(
            total=self.total_items,
            items=self.current_page_items,
            limit=self._page_size,
            offset=self._page_index * self._page_size,
            page=self.current_page,
            total_pages=self.total_pages,
        )
