"""Event bus for decoupled event-driven communication.

The AutocompleteController publishes what happened (results arrived, the
selection moved, the user picked an entry, the dropdown closed) and the
presentation layer reacts, so the controller never holds widget references.

Event Handler Contract:
    Event handlers MUST be synchronous (non-async) functions. This is enforced
    at subscription time. The controller's state is already final when a
    handler runs, so handlers may freely read it.
"""

import inspect
from typing import Callable, Type, TypeVar

from docnav.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

# Type alias for event handlers - must be synchronous
EventHandler = Callable[[Event], None]


class EventBus:
    """Event bus for publishing and subscribing to events.

    Example:
        ```python
        bus = EventBus()
        bus.subscribe(NavigationRequested, lambda event: router.show(event.target))
        controller = AutocompleteController(engine, scheduler, bus)
        ```

    Thread safety:
        Not thread-safe. All publishing happens on the thread delivering UI
        events.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[EventHandler]] = {}
        """Registry of event handlers by event type."""

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to (e.g., NavigationRequested)
            handler: Synchronous callback receiving the event instance

        Raises:
            TypeError: If handler is an async function (coroutine function)
        """
        if inspect.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {getattr(handler, '__name__', handler)!r} is a coroutine function."
            )

        handlers = self._handlers.setdefault(event_type, [])
        if handler in handlers:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")
            return
        handlers.append(handler)  # type: ignore[arg-type]
        logger.debug(f"Subscribed handler for {event_type.__name__}")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Unsubscribe a handler. Unknown handlers are ignored.
        """
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)  # type: ignore[arg-type]
            logger.debug(f"Unsubscribed handler for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Publish an event to all handlers subscribed to its exact type.

        Handlers run synchronously in subscription order. A handler that raises
        is logged and does not prevent the remaining handlers from running.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers subscribed for {event_type.__name__}")
            return

        logger.debug(f"Publishing {event_type.__name__} to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event_type.__name__}")

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        return bool(self._handlers.get(event_type))
