# (c) Nelen & Schuurmans

import logging
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from typing import Protocol

__all__ = ["Cancellable", "Scheduler", "CancellationToken", "Debouncer"]

logger = logging.getLogger(__name__)


class Cancellable(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(ABC):
    """Runs a callback after a delay, on the thread that owns the view."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        pass


class CancellationToken:
    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class Debouncer:
    """Keeps at most one delayed job alive; scheduling a new one cancels the old.

    Every job carries its own token. The old token is cancelled only once the
    scheduler has accepted the new job; if ``call_later`` raises, the previous
    job stays pending. A superseded job that fires anyway (e.g. because the
    scheduler could not unschedule it in time) sees its cancelled token and
    does nothing.
    """

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        self._token: CancellationToken | None = None
        self._handle: Cancellable | None = None

    @property
    def pending(self) -> bool:
        return self._token is not None

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        token = CancellationToken()
        handle = self.scheduler.call_later(delay, lambda: self._fire(token, callback))
        self.cancel()
        self._token = token
        self._handle = handle
        logger.debug("debounce scheduled in %.3fs", delay)

    def cancel(self) -> bool:
        if self._token is None:
            return False
        self._token.cancel()
        if self._handle is not None:
            self._handle.cancel()
        self._token = self._handle = None
        logger.debug("pending debounce cancelled")
        return True

    def _fire(self, token: CancellationToken, callback: Callable[[], None]) -> None:
        if token.cancelled:
            return
        self._token = self._handle = None
        callback()
