"""Debounce scheduling on the running asyncio event loop.

Textual applications run on asyncio, so the same scheduler serves the
terminal browser and any other asyncio-based front end.
"""

import asyncio
from typing import Callable

from docnav.domain.protocols import ScheduledTask, Scheduler


class AsyncioScheduler(Scheduler):
    """Schedules callbacks with ``loop.call_later``.

    The loop is looked up when a callback is scheduled, so the scheduler may
    be created before the application's loop starts.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
