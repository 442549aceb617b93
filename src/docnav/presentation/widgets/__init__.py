"""
docnav TUI Widgets - Custom Textual widgets for the documentation browser.
"""

from .search_dropdown import SearchDropdown
from .search_input import SearchInput
from .type_detail import TypeDetail

__all__ = [
    "SearchInput",
    "SearchDropdown",
    "TypeDetail",
]
