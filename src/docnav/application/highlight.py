"""
Query match highlighting for result labels.
"""

from __future__ import annotations

import html
import re


def highlight_spans(text: str | None, query: str | None) -> list[tuple[int, int]]:
    """
    Find every non-overlapping, case-insensitive occurrence of ``query``.

    Args:
        text: Label to search in
        query: Search query

    Returns:
        ``(start, end)`` offsets in ``text``, left to right
    """
    if not text or not query:
        return []

    # Matching on text itself keeps offsets valid when lowercasing changes length
    return [match.span() for match in re.finditer(re.escape(query), text, re.IGNORECASE)]


def highlight_html(text: str | None, query: str | None) -> str:
    """Escape ``text`` and wrap each match of ``query`` in ``<mark>``."""
    if not text:
        return ""

    parts = []
    last = 0
    for start, end in highlight_spans(text, query):
        parts.append(html.escape(text[last:start]))
        parts.append(f"<mark>{html.escape(text[start:end])}</mark>")
        last = end
    parts.append(html.escape(text[last:]))
    return "".join(parts)
