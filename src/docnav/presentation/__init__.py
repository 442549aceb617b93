"""
docnav presentation layer - terminal UI for browsing documentation.

This package contains:
- TUI (Terminal User Interface) using Textual and Rich
- Widgets and formatters
- No search or linking logic of its own; it drives the application layer
"""

from .tui import DocBrowserApp

__all__ = ["DocBrowserApp"]
