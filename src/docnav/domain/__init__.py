"""Domain layer - pure rules and abstractions with zero external dependencies.

This layer contains:
- protocols: Interfaces for the type registry and the debounce scheduler
- types: Search entries, faceted results, type records and resolved segments
- events: Autocomplete events and the event bus

The domain layer has NO dependencies on application, infrastructure, or presentation layers.
All other layers depend on the domain layer.
"""
