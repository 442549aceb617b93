"""Infrastructure layer - implementations of domain protocols.

This layer contains:
- The in-memory type registry
- The asyncio-backed debounce scheduler
- The loader for serialized documentation models

The infrastructure layer implements domain protocols and has no dependencies
on the application or presentation layers.
"""
