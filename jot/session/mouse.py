"""Mouse routing for the tree column, the tab bar and the editor text area."""

from __future__ import annotations

import time
from collections.abc import Callable

from ..layout import ScreenLayout
from .state import Session
from .tree_commands import open_selected

DOUBLE_CLICK_SECONDS = 0.35
EDITOR_WHEEL_ROWS = 3
EDITOR_WHEEL_COLUMNS = 4


def parse_mouse_token(key: str) -> tuple[str, int, int] | None:
    """Split ``MOUSE_<KIND>:<col>:<row>`` into ``(kind, x, y)`` with 0-based cells."""
    parts = key.split(":")
    if len(parts) != 3 or not parts[0].startswith("MOUSE_"):
        return None
    try:
        col = int(parts[1])
        row = int(parts[2])
    except ValueError:
        return None
    return parts[0][len("MOUSE_"):], col - 1, row - 1


def is_mouse_token(key: str) -> bool:
    return key == "MOUSE" or key.startswith("MOUSE_")


class MouseRouter:
    """Translate mouse tokens into selection, focus and scroll changes.

    Double clicks are detected on the tree column only: a second press on the
    same entry within ``double_click_seconds`` opens it like Enter would.
    """

    def __init__(
        self,
        session: Session,
        *,
        double_click_seconds: float = DOUBLE_CLICK_SECONDS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._session = session
        self._double_click_seconds = double_click_seconds
        self._monotonic = monotonic

    def handle(self, key: str, layout: ScreenLayout) -> bool:
        """Route one mouse token; returns whether anything was consumed."""
        parsed = parse_mouse_token(key)
        if parsed is None:
            return False
        kind, x, y = parsed
        if kind == "LEFT_DOWN":
            return self._handle_left_down(layout, x, y)
        if kind.startswith("WHEEL_"):
            return self._handle_wheel(layout, kind[len("WHEEL_"):], x, y)
        return False

    def _handle_left_down(self, layout: ScreenLayout, x: int, y: int) -> bool:
        if layout.in_tree_pane(x, y):
            return self._click_tree(layout, y)
        if layout.in_tab_bar(x, y):
            return self._click_tab(layout, x)
        if layout.in_text_area(x, y):
            return self._click_text(layout, x, y)
        return False

    def _click_tree(self, layout: ScreenLayout, y: int) -> bool:
        session = self._session
        view = session.directory_view
        index = layout.tree_index_at(view.scroll_offset, y)
        if y < 1 or not 0 <= index < len(view.entries):
            return False
        session.focus_file_tree()
        view.select_index(index)

        now = self._monotonic()
        is_double = index == session.last_click_index and (now - session.last_click_time) <= self._double_click_seconds
        session.last_click_index = index
        session.last_click_time = now
        if is_double:
            session.last_click_index = -1
            session.last_click_time = 0.0
            open_selected(session)
        return True

    def _click_tab(self, layout: ScreenLayout, x: int) -> bool:
        session = self._session
        index = layout.tab_at(session.tabs, x)
        if index is None:
            return False
        session.select_tab(index)
        session.clear_find()
        session.focus_editor()
        return True

    def _click_text(self, layout: ScreenLayout, x: int, y: int) -> bool:
        session = self._session
        page = session.active_page()
        session.clear_find()
        session.focus_editor()
        if page is None:
            return True
        row, column = layout.document_position(page, x, y)
        page.move_cursor_to(row, column)
        session.reveal_cursor = True
        return True

    def _handle_wheel(self, layout: ScreenLayout, direction: str, x: int, y: int) -> bool:
        session = self._session
        if layout.in_tree_pane(x, y):
            if direction == "UP":
                session.directory_view.move_up()
            elif direction == "DOWN":
                session.directory_view.move_down()
            return True
        page = session.active_page()
        if page is None or x < layout.editor_x:
            return False
        if direction == "UP":
            page.scroll_offset = max(0, page.scroll_offset - EDITOR_WHEEL_ROWS)
        elif direction == "DOWN":
            page.scroll_offset += EDITOR_WHEEL_ROWS
        elif direction == "LEFT":
            page.horizontal_scroll_offset = max(0, page.horizontal_scroll_offset - EDITOR_WHEEL_COLUMNS)
        else:
            page.horizontal_scroll_offset += EDITOR_WHEEL_COLUMNS
        return True


__all__ = [
    "DOUBLE_CLICK_SECONDS",
    "MouseRouter",
    "is_mouse_token",
    "parse_mouse_token",
]
