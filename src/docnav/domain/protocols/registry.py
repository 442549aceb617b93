"""Type registry protocol."""

from typing import Protocol

from docnav.domain.types.registry import TypeRecord

__all__ = ["TypeRegistry"]


class TypeRegistry(Protocol):
    """Read-only lookup of documented types.

    Absence is reported as ``None``; lookups never raise.
    """

    def lookup_by_qualified_name(self, qualified_name: str) -> TypeRecord | None:
        """Return the record whose qualified name equals ``qualified_name``."""
        ...

    def lookup_by_simple_name(self, name: str) -> TypeRecord | None:
        """Return the first record, in iteration order, whose simple name is ``name``."""
        ...
