"""The documentation model consumed by the query layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from docnav.domain.types.search import SearchIndexEntry

if TYPE_CHECKING:
    from docnav.domain.protocols.registry import TypeRegistry

__all__ = ["DocumentationModel"]


@dataclass(frozen=True)
class DocumentationModel:
    """Immutable, already-built documentation data.

    Attributes:
        search_index: Every searchable element, in generator order
        registry: Lookup of documented types
        package_names: Documented packages, in generator order
    """

    search_index: Sequence[SearchIndexEntry]
    registry: TypeRegistry
    package_names: Sequence[str] = field(default_factory=tuple)

    def members_of(self, type_qualified_name: str) -> list[SearchIndexEntry]:
        """Method and field entries whose qualified name is directly under the given type."""
        prefix = f"{type_qualified_name}."
        return [
            entry
            for entry in self.search_index
            if not entry.category.is_type
            and entry.qualified_name.startswith(prefix)
            and "." not in entry.qualified_name[len(prefix) :]
        ]
