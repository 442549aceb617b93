"""
DocBrowserApp - Textual application for browsing a documentation model.
"""

from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, OptionList

from docnav.application.autocomplete import AutocompleteController
from docnav.application.search_engine import SearchQueryEngine
from docnav.application.type_expression import TypeExpressionResolver
from docnav.domain.events import (
    AutocompleteClosed,
    EventBus,
    NavigationRequested,
    ResultsUpdated,
    SelectionChanged,
)
from docnav.domain.protocols import Scheduler
from docnav.domain.types import DocumentationModel
from docnav.infrastructure.scheduling import AsyncioScheduler
from docnav.logger import get_logger
from docnav.presentation.widgets import SearchDropdown, SearchInput, TypeDetail

logger = get_logger("browser_app")


class DocBrowserApp(App):
    """
    The documentation browser.

    Layout:
    ┌──────────────────────────────────────┐
    │               Header                 │
    ├──────────────────────────────────────┤
    │  Search input                        │
    │  Faceted dropdown (while open)       │
    ├──────────────────────────────────────┤
    │  Type details (scrollable)           │
    ├──────────────────────────────────────┤
    │               Footer                 │
    └──────────────────────────────────────┘
    """

    TITLE = "docnav"
    SUB_TITLE = "API documentation browser"

    CSS = """
    #search-area {
        height: auto;
    }
    SearchInput {
        border: round $accent;
    }
    SearchDropdown {
        max-height: 20;
        border: round $secondary;
    }
    TypeDetail {
        border: round $primary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+l", "clear_search", "Clear Search"),
        Binding("ctrl+f", "focus_search", "Search"),
    ]

    def __init__(
        self,
        model: DocumentationModel,
        scheduler: Scheduler | None = None,
        event_bus: EventBus | None = None,
    ):
        """
        Initialize the browser.

        Args:
            model: Loaded documentation model
            scheduler: Debounce scheduler. Defaults to the running asyncio loop.
            event_bus: Bus the controller publishes on. A new one is created if None.
        """
        super().__init__()
        self.model = model
        self.event_bus = event_bus or EventBus()
        self.resolver = TypeExpressionResolver(model.registry)
        self.controller = AutocompleteController(
            SearchQueryEngine(model.search_index),
            scheduler or AsyncioScheduler(),
            self.event_bus,
        )

        self.event_bus.subscribe(ResultsUpdated, self._on_results_updated)
        self.event_bus.subscribe(SelectionChanged, self._on_selection_changed)
        self.event_bus.subscribe(NavigationRequested, self._on_navigation_requested)
        self.event_bus.subscribe(AutocompleteClosed, self._on_autocomplete_closed)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="search-area"):
            yield SearchInput(self.controller, id="search")
            yield SearchDropdown(id="dropdown")
        yield TypeDetail(self.model, self.resolver, id="detail")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(SearchInput).focus()
        logger.info(f"Browser mounted with {len(self.model.search_index)} index entries")

    @property
    def search_input(self) -> SearchInput:
        return self.query_one(SearchInput)

    @property
    def dropdown(self) -> SearchDropdown:
        return self.query_one(SearchDropdown)

    @property
    def detail(self) -> TypeDetail:
        return self.query_one(TypeDetail)

    # Controller events

    def _on_results_updated(self, event: ResultsUpdated) -> None:
        self.dropdown.show_results(event.results, event.query)

    def _on_selection_changed(self, event: SelectionChanged) -> None:
        self.dropdown.show_selection(event.index)

    def _on_navigation_requested(self, event: NavigationRequested) -> None:
        logger.info(f"Showing {event.target.type_qualified_name} ({event.entry.category.value} result)")
        self.detail.show_target(event.target)

    def _on_autocomplete_closed(self, event: AutocompleteClosed) -> None:
        self.dropdown.hide()
        search = self.search_input
        if event.clear_input and search.value:
            # Clearing posts Input.Changed, which closes again as a short query
            search.value = ""
        if event.release_focus:
            self.detail.focus()

    # UI events

    @on(OptionList.OptionSelected, "#dropdown")
    def _on_option_selected(self, event: OptionList.OptionSelected) -> None:
        entry = self.dropdown.entry_for(event.option.id)
        if entry is not None:
            self.controller.on_item_activate(entry)

    @on(OptionList.OptionHighlighted, "#dropdown")
    def _on_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        # Highlights replaced by a later re-render are stale
        if event.option_index != self.dropdown.highlighted:
            return
        entry = self.dropdown.entry_for(event.option.id)
        if entry is not None:
            self.controller.on_item_hover(entry)

    def on_click(self, event: events.Click) -> None:
        widget = event.widget
        search_area = self.query_one("#search-area")
        if widget is None or (widget is not search_area and search_area not in widget.ancestors):
            self.controller.on_outside_interaction()

    # Actions

    def action_show_type(self, qualified_name: str) -> None:
        """Follow a type link in the detail view."""
        self.detail.show_type(qualified_name)

    def action_clear_search(self) -> None:
        self.controller.on_clear()
        self.search_input.focus()

    def action_focus_search(self) -> None:
        self.search_input.focus()
