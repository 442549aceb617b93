"""TUI (Terminal User Interface) application.

This module contains the documentation browser built with Textual.
"""

from docnav.presentation.tui.browser_app import DocBrowserApp

__all__ = ["DocBrowserApp"]
