"""Type registry implementations for docnav."""

from docnav.infrastructure.registry.memory import MemoryTypeRegistry

__all__ = [
    "MemoryTypeRegistry",
]
