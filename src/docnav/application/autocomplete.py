"""
Autocomplete controller for the documentation search field.

The controller owns the dropdown's interaction state and turns raw UI events
(input, keys, pointer, focus) into query evaluations and navigation requests.
It never touches widgets: everything the UI has to do is published on the
event bus.

States::

    Closed      is_open is False
    Open        is_open is True, selected_index == -1
    Navigating  is_open is True, selected_index >= 0
"""

from __future__ import annotations

from dataclasses import dataclass, field

from docnav.application.search_engine import MIN_QUERY_LENGTH, SearchQueryEngine
from docnav.domain.events import (
    AutocompleteClosed,
    CloseReason,
    EventBus,
    NavigationRequested,
    NavigationTarget,
    ResultsUpdated,
    SelectionChanged,
)
from docnav.domain.protocols import ScheduledTask, Scheduler
from docnav.domain.types import SearchIndexEntry
from docnav.logger import get_logger

logger = get_logger("autocomplete.controller")

DEBOUNCE_DELAY = 0.150
"""Quiet period, in seconds, before a query is evaluated."""


@dataclass
class AutocompleteState:
    """Interaction state of one search widget."""

    is_open: bool = False
    selected_index: int = -1
    current_results: list[SearchIndexEntry] = field(default_factory=list)
    pending_query: str | None = None

    @property
    def is_navigating(self) -> bool:
        return self.is_open and self.selected_index >= 0

    @property
    def selected_entry(self) -> SearchIndexEntry | None:
        if 0 <= self.selected_index < len(self.current_results):
            return self.current_results[self.selected_index]
        return None

    def reset(self) -> None:
        self.is_open = False
        self.selected_index = -1
        self.current_results = []
        self.pending_query = None


class AutocompleteController:
    """Drives one search widget's dropdown.

    At most one debounced evaluation is pending at a time: every keystroke
    cancels the previous one before scheduling its own, and every close
    cancels it too, so a stale evaluation can never reopen a closed dropdown.
    Events delivered in a state where they mean nothing (arrows or Enter while
    closed) are ignored.
    """

    def __init__(self, engine: SearchQueryEngine, scheduler: Scheduler, event_bus: EventBus | None = None) -> None:
        self._engine = engine
        self._scheduler = scheduler
        self.event_bus = event_bus or EventBus()
        self.state = AutocompleteState()
        self._pending: ScheduledTask | None = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def cancel_pending(self) -> None:
        """Cancel the scheduled evaluation, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            logger.debug(f"Cancelled pending evaluation of {self.state.pending_query!r}")
        self.state.pending_query = None

    # Input and focus

    def on_input(self, text: str) -> None:
        self.cancel_pending()

        if len(text) < MIN_QUERY_LENGTH:
            self._close(CloseReason.SHORT_QUERY)
            return

        self.state.pending_query = text
        task: ScheduledTask | None = None

        def evaluate() -> None:
            # A cancelled handle may still fire on some schedulers
            if self._pending is not task:
                return
            self._evaluate(text)

        task = self._scheduler.call_later(DEBOUNCE_DELAY, evaluate)
        self._pending = task

    def on_focus(self, text: str) -> None:
        """Re-run the current input when the field regains focus."""
        if len(text) >= MIN_QUERY_LENGTH:
            self.on_input(text)

    def _evaluate(self, query: str) -> None:
        self._pending = None
        self.state.pending_query = None

        results = self._engine.filter(query)
        self.state.is_open = True
        self.state.selected_index = -1
        self.state.current_results = results.flatten()

        logger.debug(f"Dropdown open for {query!r} with {len(self.state.current_results)} result(s)")
        self.event_bus.publish(ResultsUpdated(query=query, results=results))

    # Keyboard

    def on_arrow_down(self) -> None:
        self._move_selection(1)

    def on_arrow_up(self) -> None:
        self._move_selection(-1)

    def _move_selection(self, step: int) -> None:
        count = len(self.state.current_results)
        if not self.state.is_open or count == 0:
            return
        if step > 0:
            index = (self.state.selected_index + 1) % count
        else:
            index = self.state.selected_index - 1
            if index < 0:
                index = count - 1
        self._select(index)

    def on_enter(self) -> bool:
        """
        Navigate to the highlighted entry.

        Returns:
            True when a navigation was dispatched
        """
        entry = self.state.selected_entry if self.state.is_open else None
        if entry is None:
            return False
        self._navigate(entry)
        return True

    def on_escape(self) -> None:
        self._close(CloseReason.ESCAPE, release_focus=True)

    # Pointer

    def on_item_activate(self, entry: SearchIndexEntry) -> None:
        self._navigate(entry)

    def on_item_hover(self, entry: SearchIndexEntry) -> None:
        """Keep the keyboard selection in sync with the pointer."""
        if not self.state.is_open:
            return
        try:
            index = self.state.current_results.index(entry)
        except ValueError:
            return
        if index != self.state.selected_index:
            self._select(index)

    def on_outside_interaction(self) -> None:
        self._close(CloseReason.OUTSIDE)

    def on_clear(self) -> None:
        self._close(CloseReason.CLEARED, clear_input=True)

    # Internals

    def _select(self, index: int) -> None:
        self.state.selected_index = index
        entry = self.state.current_results[index]
        logger.debug(f"Selected #{index}: {entry.qualified_name}")
        self.event_bus.publish(SelectionChanged(index=index, entry=entry))

    def _navigate(self, entry: SearchIndexEntry) -> None:
        target = NavigationTarget.from_entry(entry)
        logger.debug(f"Navigating to {entry.category.value} {entry.qualified_name}")
        self.event_bus.publish(NavigationRequested(entry=entry, target=target))
        self._close(CloseReason.NAVIGATED, clear_input=True)

    def _close(self, reason: CloseReason, release_focus: bool = False, clear_input: bool = False) -> None:
        self.cancel_pending()
        was_open = self.state.is_open
        self.state.reset()

        if was_open or release_focus or clear_input:
            logger.debug(f"Dropdown closed ({reason.value})")
            self.event_bus.publish(
                AutocompleteClosed(reason=reason, release_focus=release_focus, clear_input=clear_input)
            )
