# (c) Nelen & Schuurmans
import blinker

from clean_paging.base.domain import DomainEvent
from clean_paging.base.domain import EventHandler
from clean_paging.base.domain import EventProvider

__all__ = ["BlinkerEventProvider"]


class BlinkerEventProvider(EventProvider):
    """Dispatches domain events through blinker signals.

    Every provider has its own namespace, so handlers registered on one view
    never see events of another view. An event is delivered to the handlers
    of its own path and of every parent path: a handler registered for
    ``ViewEvent`` receives all view events.
    """

    def __init__(self):
        self._namespace = blinker.Namespace()

    def _signal(self, path: tuple[str, ...]) -> blinker.NamedSignal:
        return self._namespace.signal(".".join(path))

    def register_handler(
        self, event_cls: type[DomainEvent], handler: EventHandler
    ) -> EventHandler:
        # keep a strong reference; lambdas and closures are common handlers
        self._signal(event_cls.event_path).connect(handler, weak=False)
        return handler

    def unregister_handler(
        self, event_cls: type[DomainEvent], handler: EventHandler
    ) -> None:
        self._signal(event_cls.event_path).disconnect(handler)

    def send(self, event: DomainEvent) -> None:
        path = event.__class__.event_path
        for i in range(len(path), 0, -1):
            self._signal(path[:i]).send(event)
