"""Type registry domain types."""

from dataclasses import dataclass

__all__ = ["TypeRecord"]


@dataclass(frozen=True, slots=True)
class TypeRecord:
    """A documented type as known to the registry.

    ``qualified_name`` is unique; ``name`` may be shared by types in
    different packages.
    """

    qualified_name: str
    name: str
    package_name: str
    kind: str
