"""File filtering for example trees.

This module provides pathspec-based filtering of the files
scanned for API usage.
"""

from examples_metadata.filters.pathspec_filter import (
    PathspecFilter,
    DEFAULT_IGNORE_PATTERNS,
)

__all__ = [
    "PathspecFilter",
    "DEFAULT_IGNORE_PATTERNS",
]
