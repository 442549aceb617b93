"""
TypeDetail - shows the type a search result navigated to.
"""

from __future__ import annotations

from rich.console import Group
from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import Static

from docnav.application.type_expression import TypeExpressionResolver
from docnav.domain.events import NavigationTarget
from docnav.domain.types import DocumentationModel, SearchCategory, SearchIndexEntry
from docnav.presentation.formatters import format_type_segments

PLACEHOLDER = "Type in the search field to find classes, interfaces, enums, annotations, methods and fields."


class TypeDetail(VerticalScroll):
    """Header and member list of one documented type.

    Member types are resolved through the TypeExpressionResolver, so
    documented types appear as clickable links and everything else as
    external references.
    """

    BORDER_TITLE = "Details"

    def __init__(self, model: DocumentationModel, resolver: TypeExpressionResolver, **kwargs):
        super().__init__(**kwargs)
        self._model = model
        self._resolver = resolver
        self._body = Static(PLACEHOLDER, id="detail-body")
        self.current_type: str | None = None
        self.highlighted_member: str | None = None
        self.lines: list[Text] = []

    def compose(self):
        yield self._body

    def show_target(self, target: NavigationTarget) -> None:
        self.show_type(target.type_qualified_name, highlight_member=target.member_name)

    def show_type(self, qualified_name: str, highlight_member: str | None = None) -> None:
        self.current_type = qualified_name
        self.highlighted_member = highlight_member

        record = self._model.registry.lookup_by_qualified_name(qualified_name)
        header = Text()
        if record is None:
            header.append(qualified_name, style="bold")
            header.append("  (not documented)", style="dim")
        else:
            header.append(record.name, style="bold")
            header.append(f"  {record.kind}", style="magenta")
            header.append(f"\n{record.qualified_name}", style="dim")

        lines: list[Text] = [header, Text()]
        members = self._model.members_of(qualified_name)
        for category in (SearchCategory.FIELD, SearchCategory.METHOD):
            of_kind = [member for member in members if member.category is category]
            if not of_kind:
                continue
            lines.append(Text(category.label, style="bold underline"))
            lines.extend(self._format_member(member) for member in of_kind)
            lines.append(Text())

        self.lines = lines
        self._body.update(Group(*lines))
        self.scroll_home(animate=False)

    @property
    def plain_text(self) -> str:
        return "\n".join(line.plain for line in self.lines)

    def _format_member(self, member: SearchIndexEntry) -> Text:
        line = Text("  ")
        if member.return_type:
            line.append_text(format_type_segments(self._resolver.resolve(member.return_type)))
            line.append(" ")
        style = "bold reverse" if member.name == self.highlighted_member else "bold"
        line.append(member.signature or member.name, style=style)
        return line
