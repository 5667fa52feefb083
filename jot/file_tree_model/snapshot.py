"""Directory snapshot backing the file-tree pane.

A ``DirectoryView`` is never patched in place: every change of directory or
filesystem mutation goes through ``refresh``/``build_directory_view``, which
re-reads the whole listing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .fs import list_directory_children
from .types import DirectoryChild


@dataclass
class DirectoryView:
    """Sorted listing of one directory plus its selection and scroll state."""

    path: Path
    entries: list[DirectoryChild] = field(default_factory=list)
    selected_index: int = 0
    scroll_offset: int = 0
    show_hidden: bool = True

    def refresh(self, path: Path | None = None, *, preferred_path: Path | None = None) -> None:
        """Re-read ``path`` (default: the current one) and replace the listing.

        Raises ``OSError`` when the directory cannot be listed; the snapshot is
        left untouched in that case. The selection stays on
        ``preferred_path`` when it is still listed, otherwise on the same index
        clamped into range (or 0 after a directory change).
        """
        target = (path if path is not None else self.path).resolve()
        children, scan_error = list_directory_children(target, self.show_hidden)
        if scan_error is not None:
            raise scan_error

        same_directory = target == self.path
        previous_index = self.selected_index
        self.path = target
        self.entries = children
        self.selected_index = previous_index if same_directory else 0
        if not same_directory:
            self.scroll_offset = 0
        if preferred_path is not None:
            self.select_path(preferred_path)
        self.clamp_selection()

    def clamp_selection(self) -> None:
        if not self.entries:
            self.selected_index = 0
            self.scroll_offset = 0
            return
        self.selected_index = max(0, min(self.selected_index, len(self.entries) - 1))
        self.scroll_offset = max(0, min(self.scroll_offset, len(self.entries) - 1))

    def selected_entry(self) -> DirectoryChild | None:
        if not self.entries:
            return None
        return self.entries[self.selected_index]

    def select_path(self, path: Path) -> bool:
        """Select the entry for ``path``; return whether it was found."""
        for idx, entry in enumerate(self.entries):
            if entry.path == path:
                self.selected_index = idx
                return True
        return False

    def select_index(self, index: int) -> bool:
        if not 0 <= index < len(self.entries):
            return False
        self.selected_index = index
        return True

    def move_up(self) -> bool:
        if not self.entries or self.selected_index == 0:
            return False
        self.selected_index -= 1
        return True

    def move_down(self) -> bool:
        if not self.entries or self.selected_index >= len(self.entries) - 1:
            return False
        self.selected_index += 1
        return True

    def move_first(self) -> bool:
        return self.select_index(0) if self.selected_index != 0 else False

    def move_last(self) -> bool:
        last = len(self.entries) - 1
        return self.select_index(last) if self.selected_index != last else False


def build_directory_view(path: Path, show_hidden: bool = True) -> DirectoryView:
    """Build a fresh snapshot for ``path``; raises ``OSError`` if unlistable."""
    target = path.resolve()
    children, scan_error = list_directory_children(target, show_hidden)
    if scan_error is not None:
        raise scan_error
    return DirectoryView(path=target, entries=children, show_hidden=show_hidden)


__all__ = ["DirectoryView", "build_directory_view"]
