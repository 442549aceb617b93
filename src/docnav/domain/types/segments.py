"""Tokens and resolved segments of a type expression."""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "TokenKind",
    "TypeToken",
    "SegmentKind",
    "TypeSegment",
]


class TokenKind(Enum):
    """Lexical class of a type-expression token."""

    DELIMITER = "delimiter"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    # Whitespace the tokenizer emits itself (after ``,`` and keywords)
    SPACE = "space"


@dataclass(frozen=True, slots=True)
class TypeToken:
    kind: TokenKind
    text: str


class SegmentKind(Enum):
    """How a resolved segment is rendered."""

    TEXT = "text"
    LINK = "link"
    EXTERNAL = "external"


@dataclass(frozen=True, slots=True)
class TypeSegment:
    """One piece of a resolved type expression.

    Attributes:
        kind: Literal text, a link to a documented type, or an external reference
        text: Display text (unescaped)
        target: Qualified name to navigate to, for links only
    """

    kind: SegmentKind
    text: str
    target: str | None = None

    @property
    def is_link(self) -> bool:
        return self.kind is SegmentKind.LINK

    @property
    def is_external(self) -> bool:
        return self.kind is SegmentKind.EXTERNAL

    @classmethod
    def literal(cls, text: str) -> "TypeSegment":
        return cls(SegmentKind.TEXT, text)

    @classmethod
    def link(cls, text: str, target: str) -> "TypeSegment":
        return cls(SegmentKind.LINK, text, target)

    @classmethod
    def external(cls, text: str) -> "TypeSegment":
        return cls(SegmentKind.EXTERNAL, text)
