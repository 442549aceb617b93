"""
Formatting helpers for search results and resolved type expressions.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.style import Style
from rich.text import Text

from docnav.application.highlight import highlight_spans
from docnav.domain.types import MEMBER_CATEGORIES, SearchCategory, SearchIndexEntry, SegmentKind, TypeSegment

BADGE_STYLES = {
    SearchCategory.CLASS: "bold white on blue",
    SearchCategory.INTERFACE: "bold white on green",
    SearchCategory.ENUM: "bold white on magenta",
    SearchCategory.ANNOTATION: "bold black on yellow",
    SearchCategory.METHOD: "bold white on dark_cyan",
    SearchCategory.FIELD: "bold white on grey42",
}
MATCH_STYLE = "bold yellow"
LINK_STYLE = "underline cyan"
EXTERNAL_STYLE = "italic"


def format_section_header(category: SearchCategory) -> Text:
    return Text(category.label, style="bold dim")


def format_result_label(entry: SearchIndexEntry, query: str = "") -> Text:
    """Badge, highlighted name or signature, and a dim context line."""
    label = Text()
    label.append(f" {entry.category.badge} ", style=BADGE_STYLES[entry.category])
    label.append(" ")

    name = Text(entry.display_name)
    for start, end in highlight_spans(entry.display_name, query):
        name.stylize(MATCH_STYLE, start, end)
    label.append_text(name)

    label.append(f"  {entry.context}", style="dim")
    if entry.category in MEMBER_CATEGORIES and entry.return_type:
        label.append(f" : {entry.return_type}", style="dim italic")
    return label


def format_type_segments(segments: Iterable[TypeSegment], link_action: str | None = "app.show_type") -> Text:
    """
    Render resolved segments as rich Text.

    Links carry a Textual ``@click`` action that receives the target's
    qualified name; external references are shown in italics.
    """
    text = Text()
    for segment in segments:
        if segment.kind is SegmentKind.LINK:
            style = Style.parse(LINK_STYLE)
            if link_action and segment.target:
                style += Style.from_meta({"@click": f"{link_action}({segment.target!r})"})
            text.append(segment.text, style=style)
        elif segment.kind is SegmentKind.EXTERNAL:
            text.append(segment.text, style=EXTERNAL_STYLE)
        else:
            text.append(segment.text)
    return text
