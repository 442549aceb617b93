"""Scheduler protocol for cancellable delayed callbacks."""

from typing import Callable, Protocol

__all__ = ["Scheduler", "ScheduledTask"]


class ScheduledTask(Protocol):
    """Handle to a pending one-shot callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. Cancelling twice is harmless."""
        ...


class Scheduler(Protocol):
    """Runs a callback once after a delay.

    ``asyncio.AbstractEventLoop`` already satisfies this protocol through
    ``call_later``; tests use a manual clock instead.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        """Schedule ``callback`` to run after ``delay`` seconds."""
        ...
