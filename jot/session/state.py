"""Mutable editor session: open tabs, directory snapshot, focus and mode.

``Session`` is plain data plus tab bookkeeping. Input routing and all
feature behavior live in ``jot.session.app`` and its helper modules; the
renderer only reads this object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..editor import Page
from ..file_tree_model import DirectoryView
from ..logging_config import get_logger
from .modes import (
    PANE_EDITOR,
    PANE_FILE_TREE,
    CommandMode,
    ConfirmDeleteMode,
    EditMode,
    FileTreeMode,
    Mode,
    PromptRenameMode,
)

logger = get_logger("session")


@dataclass
class Session:
    directory_view: DirectoryView
    tabs: list[Page] = field(default_factory=list)
    active_tab_index: int = 0
    active_pane: str = PANE_FILE_TREE
    mode: Mode = field(default_factory=FileTreeMode)
    command_buffer: str = ""
    status_message: str = ""
    find_query: str = ""
    find_matches: list[tuple[int, int]] = field(default_factory=list)
    current_match_index: int = 0
    find_navigation_active: bool = False
    should_quit: bool = False
    reveal_cursor: bool = True
    last_click_index: int = -1
    last_click_time: float = 0.0

    @property
    def path_to_delete(self) -> Path | None:
        return self.mode.path if isinstance(self.mode, ConfirmDeleteMode) else None

    @property
    def path_to_rename(self) -> Path | None:
        return self.mode.path if isinstance(self.mode, PromptRenameMode) else None

    @property
    def current_directory(self) -> Path:
        return self.directory_view.path

    # Tabs

    def active_page(self) -> Page | None:
        if not self.tabs:
            return None
        return self.tabs[self.active_tab_index]

    def find_tab(self, path: Path) -> int | None:
        """Return the index of the first tab bound to ``path``."""
        for idx, page in enumerate(self.tabs):
            if page.file_path is not None and page.file_path == path:
                return idx
        return None

    def open_tab(self, page: Page) -> int:
        """Append ``page`` as a new tab and make it active."""
        self.tabs.append(page)
        self.active_tab_index = len(self.tabs) - 1
        self.reveal_cursor = True
        return self.active_tab_index

    def open_path(self, path: Path) -> int:
        """Focus the tab already showing ``path`` or open a new one for it."""
        existing = self.find_tab(path)
        if existing is not None:
            self.select_tab(existing)
            return existing
        logger.debug("opening %s", path)
        return self.open_tab(Page.from_file(path))

    def select_tab(self, index: int) -> bool:
        if not 0 <= index < len(self.tabs):
            return False
        self.active_tab_index = index
        self.reveal_cursor = True
        return True

    def close_tab(self, index: int | None = None) -> bool:
        """Close tab ``index`` (default: active) and clamp the active index."""
        if index is None:
            index = self.active_tab_index
        if not 0 <= index < len(self.tabs):
            return False
        del self.tabs[index]
        if index < self.active_tab_index:
            self.active_tab_index -= 1
        self.clamp_active_tab()
        return True

    def clamp_active_tab(self) -> None:
        if not self.tabs:
            self.active_tab_index = 0
            return
        self.active_tab_index = max(0, min(self.active_tab_index, len(self.tabs) - 1))
        self.reveal_cursor = True

    # Focus

    def focus_editor(self) -> None:
        """Move focus to the editor: Edit when a tab exists, else Command."""
        self.active_pane = PANE_EDITOR
        self.mode = EditMode() if self.tabs else CommandMode()
        self.command_buffer = ""

    def focus_command(self) -> None:
        self.active_pane = PANE_EDITOR
        self.mode = CommandMode()
        self.command_buffer = ""

    def focus_file_tree(self) -> None:
        self.active_pane = PANE_FILE_TREE
        self.mode = FileTreeMode()
        self.command_buffer = ""

    # Find

    def clear_find(self) -> None:
        self.find_query = ""
        self.find_matches = []
        self.current_match_index = 0
        self.find_navigation_active = False

    # Directory snapshot

    def refresh_directory(self, path: Path | None = None, *, preferred_path: Path | None = None) -> bool:
        """Rebuild the directory snapshot, keeping the old one on failure.

        Returns whether the rebuild succeeded. Failures set a status message
        only when none is already set, so an operation's own result message
        wins.
        """
        try:
            self.directory_view.refresh(path, preferred_path=preferred_path)
        except OSError as exc:
            logger.warning("cannot list %s: %s", path or self.directory_view.path, exc)
            if not self.status_message:
                self.status_message = f"Cannot list directory: {exc}"
            return False
        return True


__all__ = ["Session"]
