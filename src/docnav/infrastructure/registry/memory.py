"""In-memory type registry implementation.

This module provides a registry that indexes type records in dictionaries.
It implements the TypeRegistry protocol.
"""

from typing import Iterable, Iterator

from docnav.domain.protocols import TypeRegistry
from docnav.domain.types import TypeRecord
from docnav.logger import get_logger

logger = get_logger("registry.memory")


class MemoryTypeRegistry(TypeRegistry):
    """Read-only registry backed by two dictionaries.

    Records keep the order they were given in. When several records share a
    simple name, ``lookup_by_simple_name`` returns the first one; later
    duplicates are still reachable by qualified name.

    Example:
        >>> registry = MemoryTypeRegistry([
        ...     TypeRecord("com.acme.User", "User", "com.acme", "class"),
        ...     TypeRecord("com.other.User", "User", "com.other", "class"),
        ... ])
        >>> registry.lookup_by_simple_name("User").package_name
        'com.acme'
        >>> registry.lookup_by_qualified_name("com.other.User").package_name
        'com.other'
    """

    def __init__(self, records: Iterable[TypeRecord] = ()) -> None:
        self._by_qualified_name: dict[str, TypeRecord] = {}
        self._by_simple_name: dict[str, TypeRecord] = {}

        for record in records:
            if record.qualified_name in self._by_qualified_name:
                logger.warning(f"Duplicate qualified name {record.qualified_name!r}; keeping the first record")
                continue
            self._by_qualified_name[record.qualified_name] = record
            self._by_simple_name.setdefault(record.name, record)

        logger.debug(f"Indexed {len(self._by_qualified_name)} type record(s)")

    def lookup_by_qualified_name(self, qualified_name: str) -> TypeRecord | None:
        """Return the record with this exact qualified name, or None."""
        return self._by_qualified_name.get(qualified_name)

    def lookup_by_simple_name(self, name: str) -> TypeRecord | None:
        """Return the first record whose simple name is ``name``, or None."""
        return self._by_simple_name.get(name)

    def __len__(self) -> int:
        return len(self._by_qualified_name)

    def __iter__(self) -> Iterator[TypeRecord]:
        return iter(self._by_qualified_name.values())

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._by_qualified_name
