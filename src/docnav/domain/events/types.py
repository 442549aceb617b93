"""Event types published by the autocomplete controller.

The controller never talks to a widget directly; the presentation layer
subscribes to these events and updates the dropdown, the input field and the
detail view accordingly.
"""

import time
from dataclasses import dataclass, field
from enum import Enum

from docnav.domain.types.search import FacetedResultSet, SearchCategory, SearchIndexEntry


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


class CloseReason(Enum):
    """Why the dropdown was closed."""

    SHORT_QUERY = "short_query"
    ESCAPE = "escape"
    OUTSIDE = "outside"
    CLEARED = "cleared"
    NAVIGATED = "navigated"


@dataclass(frozen=True)
class NavigationTarget:
    """Where the router should go for a search entry.

    Type entries point at the type itself. Member entries point at the owning
    type plus the member to scroll to once the type is shown.
    """

    package_name: str
    type_name: str
    qualified_name: str
    member_name: str | None = None
    member_kind: SearchCategory | None = None

    @property
    def is_member(self) -> bool:
        return self.member_name is not None

    @property
    def type_qualified_name(self) -> str:
        """Qualified name of the type to display."""
        if self.member_name is not None:
            return self.qualified_name.rsplit(".", 1)[0]
        return self.qualified_name

    @classmethod
    def from_entry(cls, entry: SearchIndexEntry) -> "NavigationTarget":
        if entry.category.is_type:
            return cls(
                package_name=entry.package_name,
                type_name=entry.name,
                qualified_name=entry.qualified_name,
            )
        return cls(
            package_name=entry.package_name,
            type_name=entry.type_name or "",
            qualified_name=entry.qualified_name,
            member_name=entry.name,
            member_kind=entry.category,
        )


@dataclass
class ResultsUpdated(Event):
    """A debounced query was evaluated and the dropdown is open.

    Attributes:
        query: The query text that was evaluated
        results: Faceted results; empty buckets mean the empty state is shown
    """

    query: str
    results: FacetedResultSet


@dataclass
class SelectionChanged(Event):
    """The highlighted dropdown item changed.

    Attributes:
        index: Position in the flattened result list
        entry: The highlighted entry
    """

    index: int
    entry: SearchIndexEntry


@dataclass
class NavigationRequested(Event):
    """The user picked a result; the router should display it."""

    entry: SearchIndexEntry
    target: NavigationTarget


@dataclass
class AutocompleteClosed(Event):
    """The dropdown closed and its state was reset.

    Attributes:
        reason: What triggered the close
        release_focus: The input field should give up focus
        clear_input: The input field should be emptied
    """

    reason: CloseReason
    release_focus: bool = False
    clear_input: bool = False
