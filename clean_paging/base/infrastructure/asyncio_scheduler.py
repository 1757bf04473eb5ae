# (c) Nelen & Schuurmans

import asyncio
import logging
from collections.abc import Callable

from ..domain import Scheduler

__all__ = ["AsyncioScheduler"]

logger = logging.getLogger(__name__)


class AsyncioScheduler(Scheduler):
    """Schedules delayed callbacks on an asyncio event loop.

    Without an explicit loop, the loop that is running at the time of
    scheduling is used; scheduling outside of a running loop raises
    RuntimeError, and a PagedView then searches synchronously. The callback
    runs on the loop's thread, so the loop must be the one driving the view's
    owner.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self.loop = loop

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
