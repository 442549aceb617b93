"""
SearchDropdown - faceted result list shown under the search field.
"""

from __future__ import annotations

from textual import events
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from docnav.domain.types import FacetedResultSet, SearchIndexEntry
from docnav.logger import get_logger
from docnav.presentation.formatters import format_result_label, format_section_header

logger = get_logger("search_dropdown")

EMPTY_STATE = "No results found"


class SearchDropdown(OptionList):
    """Renders a FacetedResultSet as sections of selectable options.

    Section headers and the empty-state line are disabled options. Result
    options are numbered in the controller's flattened order, so the
    controller's ``selected_index`` maps directly onto an option id.
    """

    can_focus = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._entries: dict[str, SearchIndexEntry] = {}
        self.display = False

    @staticmethod
    def option_id(index: int) -> str:
        return f"result-{index}"

    def show_results(self, results: FacetedResultSet, query: str) -> None:
        self.clear_options()
        self._entries.clear()

        if results.is_empty():
            self.add_option(Option(EMPTY_STATE, disabled=True))
        else:
            options: list[Option] = []
            index = 0
            for category, entries in results.sections():
                options.append(Option(format_section_header(category), disabled=True))
                for entry in entries:
                    option_id = self.option_id(index)
                    self._entries[option_id] = entry
                    options.append(Option(format_result_label(entry, query), id=option_id))
                    index += 1
            self.add_options(options)

        self.highlighted = None
        self.display = True
        logger.debug(f"Rendered {len(self._entries)} result(s) for {query!r}")

    def show_selection(self, index: int) -> None:
        self.highlighted = self.get_option_index(self.option_id(index))

    def hover_option(self, option_index: int | None) -> None:
        """Move the highlight to the result under the pointer.

        Section headers and the empty-state line are skipped. Moving the
        highlight posts ``OptionHighlighted``, which the app forwards to the
        controller.
        """
        if option_index is None or option_index == self.highlighted:
            return
        if not 0 <= option_index < self.option_count:
            return
        if self.get_option_at_index(option_index).disabled:
            return
        self.highlighted = option_index

    def on_mouse_move(self, event: events.MouseMove) -> None:
        # OptionList tags each rendered line with its option index
        self.hover_option(event.style.meta.get("option"))

    def hide(self) -> None:
        self.clear_options()
        self._entries.clear()
        self.display = False

    def entry_for(self, option_id: str | None) -> SearchIndexEntry | None:
        if option_id is None:
            return None
        return self._entries.get(option_id)

    @property
    def result_count(self) -> int:
        return len(self._entries)
