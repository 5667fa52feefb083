"""Domain model for the directory browser.

This package contains non-UI listing primitives:
- the ``DirectoryChild`` row datatype and its browser sort order
- filesystem scanning into sorted children
- the ``DirectoryView`` snapshot rebuilt after every change
"""

from __future__ import annotations

from .fs import list_directory_children, sort_directory_children
from .snapshot import DirectoryView, build_directory_view
from .types import DirectoryChild, directory_sort_key

__all__ = [
    "DirectoryChild",
    "directory_sort_key",
    "list_directory_children",
    "sort_directory_children",
    "DirectoryView",
    "build_directory_view",
]
