"""
SearchInput - the global search field.

Keystrokes, arrow keys, Enter, Escape and focus changes are forwarded to the
AutocompleteController; the widget keeps no search state of its own.
"""

from textual import events
from textual.binding import Binding
from textual.widgets import Input

from docnav.application.autocomplete import AutocompleteController
from docnav.logger import get_logger

logger = get_logger("search_input")


class SearchInput(Input):
    """Input field wired to an AutocompleteController."""

    BORDER_TITLE = "Search"

    BINDINGS = [
        Binding("down", "select_next", "Next result", show=False),
        Binding("up", "select_previous", "Previous result", show=False),
        Binding("escape", "dismiss", "Close results", show=False),
    ]

    def __init__(self, controller: AutocompleteController, **kwargs):
        self.controller = controller
        super().__init__(placeholder="Search types, methods and fields...", **kwargs)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input is self:
            self.controller.on_input(event.value)

    def on_focus(self, event: events.Focus) -> None:
        self.controller.on_focus(self.value)

    def action_select_next(self) -> None:
        self.controller.on_arrow_down()

    def action_select_previous(self) -> None:
        self.controller.on_arrow_up()

    def action_dismiss(self) -> None:
        self.controller.on_escape()

    async def action_submit(self) -> None:
        # Enter navigates when a result is highlighted, otherwise it submits as usual
        if self.controller.on_enter():
            return
        await super().action_submit()
