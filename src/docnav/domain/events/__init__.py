"""Event system for decoupled component communication.

The autocomplete controller publishes events; the terminal UI (or any other
front end) subscribes to them.

Example:
    ```python
    from docnav.domain.events import EventBus, NavigationRequested

    event_bus = EventBus()

    def handle_navigation(event: NavigationRequested):
        print(f"Show {event.target.type_qualified_name}")

    event_bus.subscribe(NavigationRequested, handle_navigation)
    ```
"""

from .bus import EventBus
from .types import (
    AutocompleteClosed,
    CloseReason,
    Event,
    NavigationRequested,
    NavigationTarget,
    ResultsUpdated,
    SelectionChanged,
)

__all__ = [
    "EventBus",
    "Event",
    "CloseReason",
    "NavigationTarget",
    "ResultsUpdated",
    "SelectionChanged",
    "NavigationRequested",
    "AutocompleteClosed",
]
