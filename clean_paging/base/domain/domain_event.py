# (c) Nelen & Schuurmans
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from typing import ClassVar

from .search import SearchMode
from .value_object import ValueObject

__all__ = [
    "DomainEvent",
    "EventProvider",
    "EventHandler",
    "ViewEvent",
    "SourceChanged",
    "FiltersChanged",
    "SearchChanged",
    "SortChanged",
    "PageChanged",
    "PageSizeChanged",
]


EventHandler = Callable[["DomainEvent"], None]


class DomainEvent(ValueObject):
    event_path: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls: type["DomainEvent"], path: str | None = None) -> None:
        if path is None:
            cls.event_path += (cls.__name__,)
        else:
            cls.event_path += tuple(path.split("."))
        super().__init_subclass__()


class EventProvider(ABC):
    @abstractmethod
    def register_handler(
        self, event_cls: type[DomainEvent], handler: EventHandler
    ) -> EventHandler:
        pass

    @abstractmethod
    def unregister_handler(
        self, event_cls: type[DomainEvent], handler: EventHandler
    ) -> None:
        pass

    @abstractmethod
    def send(self, event: DomainEvent) -> None:
        pass


class ViewEvent(DomainEvent, path="paged_view"):
    pass


class SourceChanged(ViewEvent):
    total_items: int


class FiltersChanged(ViewEvent):
    keys: frozenset[str]


class SearchChanged(ViewEvent):
    term: str | None
    mode: SearchMode


class SortChanged(ViewEvent):
    is_sorted: bool
    ascending: bool | None = None


class PageChanged(ViewEvent):
    page: int


class PageSizeChanged(ViewEvent):
    page_size: int
