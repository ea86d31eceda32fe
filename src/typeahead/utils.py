"""
Utility functions for the typeahead package.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/typeahead).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def shorten(text: str, limit: int = 50) -> str:
    """
    Shorten text for log lines, appending an ellipsis when truncated.

    Args:
        text: Text to shorten
        limit: Maximum number of characters kept

    Returns:
        The text itself or its first ``limit`` characters followed by "..."
    """
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
