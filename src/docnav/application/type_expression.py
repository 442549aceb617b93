"""
Type-expression linking.

A type expression such as ``Map<String, List<? extends Number>>[]`` is turned
into segments in two passes:

1. ``tokenize`` splits the string into delimiter, keyword and identifier
   tokens in a single left-to-right scan.
2. ``TypeExpressionResolver`` looks each identifier up in the type registry
   and decides whether it becomes a link or an external reference.

The resolver links, it does not validate: unbalanced brackets and other
malformed input pass through as literal text.
"""

from __future__ import annotations

import html
from collections.abc import Iterable

from docnav.domain.protocols import TypeRegistry
from docnav.domain.types import SegmentKind, TokenKind, TypeSegment, TypeToken
from docnav.logger import get_logger
from docnav.utils import simple_name

logger = get_logger("type_expression")

PRIMITIVE_KEYWORDS = frozenset({"void", "boolean", "byte", "short", "int", "long", "float", "double", "char"})
BOUND_KEYWORDS = frozenset({"extends", "super"})
WILDCARD = "?"
DELIMITERS = frozenset("<>,[]")
VARARGS = "..."

_LITERAL_WORDS = PRIMITIVE_KEYWORDS | BOUND_KEYWORDS | {WILDCARD}


def tokenize(expression: str | None) -> list[TypeToken]:
    """
    Split a type expression into tokens.

    Spaces are kept inside an identifier unless the text collected so far is a
    bound keyword or the wildcard, so multi-word bound clauses are not split
    early. A space is emitted after every ``,``.

    Args:
        expression: Raw type expression (e.g., "List<String>")

    Returns:
        Tokens in source order; empty for empty or None input
    """
    if not expression:
        return []
    if expression in PRIMITIVE_KEYWORDS:
        return [TypeToken(TokenKind.KEYWORD, expression)]

    tokens: list[TypeToken] = []
    buffer: list[str] = []

    def flush() -> None:
        word = "".join(buffer).strip()
        buffer.clear()
        if not word:
            return
        if word in _LITERAL_WORDS:
            tokens.append(TypeToken(TokenKind.KEYWORD, word))
        elif word.endswith(VARARGS) and len(word) > len(VARARGS):
            tokens.append(TypeToken(TokenKind.IDENTIFIER, word[: -len(VARARGS)]))
            tokens.append(TypeToken(TokenKind.DELIMITER, VARARGS))
        else:
            tokens.append(TypeToken(TokenKind.IDENTIFIER, word))

    for char in expression:
        if char in DELIMITERS:
            flush()
            tokens.append(TypeToken(TokenKind.DELIMITER, char))
            if char == ",":
                tokens.append(TypeToken(TokenKind.SPACE, " "))
        elif char == " ":
            word = "".join(buffer).strip()
            if word in BOUND_KEYWORDS or word == WILDCARD:
                buffer.clear()
                tokens.append(TypeToken(TokenKind.KEYWORD, word))
                tokens.append(TypeToken(TokenKind.SPACE, " "))
            else:
                buffer.append(char)
        else:
            buffer.append(char)

    flush()
    return tokens


class TypeExpressionResolver:
    """Resolves type expressions against a type registry.

    Identifiers are looked up by qualified name first, then by simple name.
    Found types become links to the record's qualified name, labelled with its
    simple name. Anything else (platform types, type variables) is shown as an
    external reference labelled with the text after the last dot.
    """

    def __init__(self, registry: TypeRegistry) -> None:
        self._registry = registry

    def resolve(self, expression: str | None, display_text: str | None = None) -> list[TypeSegment]:
        """
        Resolve a whole type expression.

        Args:
            expression: Raw type expression
            display_text: Label override, used only when the expression holds
                exactly one identifier

        Returns:
            Segments in source order
        """
        tokens = tokenize(expression)
        identifier_count = sum(1 for token in tokens if token.kind is TokenKind.IDENTIFIER)
        override = display_text if identifier_count == 1 else None

        segments = [
            self.resolve_identifier(token.text, override)
            if token.kind is TokenKind.IDENTIFIER
            else TypeSegment.literal(token.text)
            for token in tokens
        ]
        logger.debug(f"Resolved {expression!r} into {len(segments)} segment(s)")
        return segments

    def resolve_identifier(self, identifier: str, display_text: str | None = None) -> TypeSegment:
        record = self._registry.lookup_by_qualified_name(identifier)
        if record is None:
            record = self._registry.lookup_by_simple_name(identifier)

        if display_text is None:
            display_text = record.name if record is not None else simple_name(identifier)

        if record is None:
            return TypeSegment.external(display_text)
        return TypeSegment.link(display_text, record.qualified_name)

    def resolve_html(self, expression: str | None, display_text: str | None = None) -> str:
        return render_html(self.resolve(expression, display_text))


def render_html(segments: Iterable[TypeSegment]) -> str:
    """
    Render segments as escaped HTML.

    Links carry their target in ``data-type`` for the page's router; external
    references are plain spans.
    """
    parts = []
    for segment in segments:
        text = html.escape(segment.text)
        if segment.kind is SegmentKind.LINK:
            target = html.escape(segment.target or "")
            parts.append(f'<a class="type-link" href="#{target}" data-type="{target}">{text}</a>')
        elif segment.kind is SegmentKind.EXTERNAL:
            parts.append(f'<span class="external-type">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)


def render_plain(segments: Iterable[TypeSegment]) -> str:
    return "".join(segment.text for segment in segments)
