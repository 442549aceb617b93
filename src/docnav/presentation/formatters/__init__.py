"""
Reusable formatter utilities for the Textual presentation layer.
"""

from .results import (
    format_result_label,
    format_section_header,
    format_type_segments,
)

__all__ = [
    "format_result_label",
    "format_section_header",
    "format_type_segments",
]
