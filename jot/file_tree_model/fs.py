"""Filesystem scanning for the directory browser."""

from __future__ import annotations

import os
from pathlib import Path

from .types import DirectoryChild, directory_sort_key


def sort_directory_children(children: list[DirectoryChild]) -> list[DirectoryChild]:
    """Return ``children`` ordered directories-first, then by folded name."""
    return sorted(children, key=directory_sort_key)


def list_directory_children(
    directory: Path,
    show_hidden: bool,
) -> tuple[list[DirectoryChild], OSError | None]:
    """List visible children of ``directory`` in browser order.

    Returns ``(children, scan_error)``. ``scan_error`` is set, and
    ``children`` empty, when the directory cannot be scanned. Symlinks to
    directories list as directories so they can be descended into.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    # Broken or unreadable entries still list, as files.
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    return sort_directory_children(children), None


__all__ = [
    "list_directory_children",
    "sort_directory_children",
]
