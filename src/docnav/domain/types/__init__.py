"""Shared domain types."""

from docnav.domain.types.model import DocumentationModel
from docnav.domain.types.registry import TypeRecord
from docnav.domain.types.search import (
    MEMBER_CATEGORIES,
    TYPE_CATEGORIES,
    FacetedResultSet,
    SearchCategory,
    SearchIndexEntry,
)
from docnav.domain.types.segments import SegmentKind, TokenKind, TypeSegment, TypeToken

__all__ = [
    "DocumentationModel",
    "TypeRecord",
    "SearchCategory",
    "SearchIndexEntry",
    "FacetedResultSet",
    "TYPE_CATEGORIES",
    "MEMBER_CATEGORIES",
    "TokenKind",
    "TypeToken",
    "SegmentKind",
    "TypeSegment",
]
