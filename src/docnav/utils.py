"""
Utility functions for docnav.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/docnav).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def simple_name(identifier: str) -> str:
    """
    Return the part of a dotted identifier after its last ``.``.

    Args:
        identifier: A simple or qualified name (e.g., "java.util.List")

    Returns:
        The trailing segment ("List"), or the whole identifier when it has no
        dot or ends with one
    """
    tail = identifier.rsplit(".", 1)[-1]
    return tail or identifier
