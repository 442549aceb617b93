"""Domain protocols - interfaces for all implementations.

Using protocols keeps the query layer independent of where the registry comes
from and of which event loop drives the debounce timer, and lets tests swap
in stubs.
"""

from docnav.domain.protocols.registry import TypeRegistry
from docnav.domain.protocols.scheduler import ScheduledTask, Scheduler

__all__ = [
    "TypeRegistry",
    "Scheduler",
    "ScheduledTask",
]
