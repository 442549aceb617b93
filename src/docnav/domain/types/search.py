"""Search-related domain types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Mapping, Sequence

__all__ = [
    "SearchCategory",
    "SearchIndexEntry",
    "FacetedResultSet",
    "TYPE_CATEGORIES",
    "MEMBER_CATEGORIES",
]


class SearchCategory(Enum):
    """Category of a searchable documentation element.

    Declaration order is the display order of the faceted dropdown.
    """

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "annotation"
    METHOD = "method"
    FIELD = "field"

    @property
    def label(self) -> str:
        """Plural section header (e.g., "Classes")."""
        return _LABELS[self]

    @property
    def badge(self) -> str:
        """Single-letter badge shown next to a result."""
        return self.value[0].upper()

    @property
    def is_type(self) -> bool:
        return self in TYPE_CATEGORIES


_LABELS = {
    SearchCategory.CLASS: "Classes",
    SearchCategory.INTERFACE: "Interfaces",
    SearchCategory.ENUM: "Enums",
    SearchCategory.ANNOTATION: "Annotations",
    SearchCategory.METHOD: "Methods",
    SearchCategory.FIELD: "Fields",
}

TYPE_CATEGORIES = frozenset(
    {SearchCategory.CLASS, SearchCategory.INTERFACE, SearchCategory.ENUM, SearchCategory.ANNOTATION}
)
MEMBER_CATEGORIES = frozenset({SearchCategory.METHOD, SearchCategory.FIELD})


@dataclass(frozen=True, slots=True)
class SearchIndexEntry:
    """A single searchable element of the documentation index.

    Attributes:
        category: What kind of element this is
        name: Simple name (e.g., "UserService", "findById")
        qualified_name: Unique navigation key (e.g., "com.acme.UserService.findById")
        package_name: Package the element (or its owning type) lives in
        type_name: Owning type's simple name, for methods and fields
        signature: Pre-rendered ``name(ParamType, ...)``, for methods
        return_type: Return type for methods, declared type for fields
    """

    category: SearchCategory
    name: str
    qualified_name: str
    package_name: str
    type_name: str | None = None
    signature: str | None = None
    return_type: str | None = None

    def searchable_fields(self) -> tuple[str, ...]:
        """Fields matched against a query; absent fields are left out."""
        return tuple(value for value in (self.name, self.qualified_name, self.signature) if value)

    @property
    def display_name(self) -> str:
        """Text shown for the entry in a result list."""
        if self.category is SearchCategory.METHOD and self.signature:
            return self.signature
        return self.name

    @property
    def context(self) -> str:
        """Secondary line: ``package.Type`` for members, the package for types."""
        if self.category in MEMBER_CATEGORIES:
            return f"{self.package_name}.{self.type_name}"
        return self.package_name


@dataclass(frozen=True)
class FacetedResultSet:
    """Search results grouped by category.

    Every category key is always present; each bucket keeps index scan order.
    """

    buckets: Mapping[SearchCategory, Sequence[SearchIndexEntry]] = field(
        default_factory=lambda: {category: () for category in SearchCategory}
    )

    @classmethod
    def empty(cls) -> "FacetedResultSet":
        return cls()

    def __getitem__(self, category: SearchCategory) -> Sequence[SearchIndexEntry]:
        return self.buckets.get(category, ())

    def __iter__(self) -> Iterator[SearchCategory]:
        return iter(SearchCategory)

    @property
    def total(self) -> int:
        return sum(len(entries) for entries in self.buckets.values())

    def is_empty(self) -> bool:
        return self.total == 0

    def sections(self) -> list[tuple[SearchCategory, Sequence[SearchIndexEntry]]]:
        """Non-empty buckets in display order."""
        return [(category, self[category]) for category in SearchCategory if self[category]]

    def flatten(self) -> list[SearchIndexEntry]:
        """All entries in display order (classes first, fields last)."""
        return [entry for category in SearchCategory for entry in self[category]]
