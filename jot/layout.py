"""Screen geometry shared by the renderer and mouse routing.

All coordinates here are 0-based terminal cells. The last row is the status
bar; the left column holds the directory pane (a header row plus entries);
after a one-column divider comes the editor area (a tab bar row plus text
rows, with a line-number gutter on the left).

``sync_viewport`` is the only mutating helper: the main loop calls it before
drawing so scroll offsets follow the cursor/selection and stay in range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .ansi import column_at_cell, rendered_char_width, rendered_width, sanitize_terminal_text
from .editor import Page

if TYPE_CHECKING:
    from .session.state import Session

TREE_PANE_DEFAULT_PERCENT = 25.0
TREE_PANE_MIN_WIDTH = 12
EDITOR_MIN_WIDTH = 12
GUTTER_MIN_DIGITS = 3
TAB_BAR_ROWS = 1
TREE_HEADER_ROWS = 1
STATUS_ROWS = 1


def clamp_left_width(total_width: int, desired_left: int) -> int:
    """Clamp the tree pane width so both panes keep a usable minimum."""
    max_possible = max(1, total_width - 2)
    min_left = min(TREE_PANE_MIN_WIDTH, max_possible)
    max_left = max(min_left, min(total_width - EDITOR_MIN_WIDTH, max_possible))
    return max(min_left, min(desired_left, max_left))


def compute_left_width(total_width: int, percent: float | None = None) -> int:
    """Tree pane width for ``total_width`` columns at ``percent`` (default 25%)."""
    share = TREE_PANE_DEFAULT_PERCENT if percent is None else percent
    return clamp_left_width(total_width, int(total_width * share / 100.0))


def gutter_width(line_count: int) -> int:
    """Line-number gutter: right-aligned digits plus one separating space."""
    return max(GUTTER_MIN_DIGITS, len(str(max(1, line_count)))) + 1


def tab_label(page: Page) -> str:
    marker = "+" if page.modified else ""
    return f" {sanitize_terminal_text(page.display_name())}{marker} "


@dataclass(frozen=True)
class ScreenLayout:
    columns: int
    rows: int
    left_width: int

    @property
    def body_rows(self) -> int:
        return max(0, self.rows - STATUS_ROWS)

    @property
    def status_row(self) -> int:
        return max(0, self.rows - STATUS_ROWS)

    @property
    def tree_rows(self) -> int:
        return max(1, self.body_rows - TREE_HEADER_ROWS)

    @property
    def editor_x(self) -> int:
        return self.left_width + 1

    @property
    def editor_width(self) -> int:
        return max(1, self.columns - self.editor_x)

    @property
    def text_rows(self) -> int:
        return max(1, self.body_rows - TAB_BAR_ROWS)

    def text_width(self, line_count: int) -> int:
        return max(1, self.editor_width - gutter_width(line_count))

    def in_tree_pane(self, x: int, y: int) -> bool:
        return 0 <= x < self.left_width and 0 <= y < self.body_rows

    def in_tab_bar(self, x: int, y: int) -> bool:
        return x >= self.editor_x and y == 0

    def in_text_area(self, x: int, y: int) -> bool:
        return x >= self.editor_x and TAB_BAR_ROWS <= y < self.body_rows

    def tree_index_at(self, view_scroll_offset: int, y: int) -> int:
        return view_scroll_offset + y - TREE_HEADER_ROWS

    def tab_spans(self, tabs: list[Page]) -> list[tuple[int, int]]:
        """Absolute ``[start, end)`` columns of each tab label, clipped to the bar."""
        spans: list[tuple[int, int]] = []
        x = self.editor_x
        for page in tabs:
            end = min(self.columns, x + rendered_width(tab_label(page)))
            spans.append((x, end))
            x = end
        return spans

    def tab_at(self, tabs: list[Page], x: int) -> int | None:
        for idx, (start, end) in enumerate(self.tab_spans(tabs)):
            if start <= x < end:
                return idx
        return None

    def document_position(self, page: Page, x: int, y: int) -> tuple[int, int]:
        """Map a text-area cell to a ``(row, column)`` in ``page``.

        Cells are walked with the same widths the renderer draws, so tabs,
        wide characters and escaped control characters resolve to the
        character under the pointer. Clicks in the gutter map to the first
        visible column and clicks below the last line land on it.
        """
        lines = page.all_lines()
        row = max(0, min(page.scroll_offset + y - TAB_BAR_ROWS, len(lines) - 1))
        text_x = x - self.editor_x - gutter_width(page.line_count())
        hscroll = page.horizontal_scroll_offset
        visible = lines[row][hscroll:]
        return row, hscroll + column_at_cell(visible, max(0, text_x))


def build_layout(columns: int, rows: int, tree_pane_percent: float | None = None) -> ScreenLayout:
    return ScreenLayout(
        columns=max(1, columns),
        rows=max(1, rows),
        left_width=compute_left_width(max(1, columns), tree_pane_percent),
    )


def _follow_cells(line: str, offset: int, column: int, visible: int) -> int:
    """Horizontal counterpart of ``_follow`` measured in drawn cells.

    The cells before ``column`` must leave room for the cursor cell.
    """
    if column < offset:
        return column
    # skip ahead using one cell per tab as a lower bound before the exact walk
    start, cells = column, 0
    while start > offset and cells < visible:
        start -= 1
        cells += 1 if line[start] == "\t" else rendered_char_width(line[start], 0)
    if cells >= visible:
        offset = start + 1
    while offset < column and rendered_width(line[offset:column]) >= visible:
        offset += 1
    return offset


def _follow(offset: int, target: int, visible: int) -> int:
    if target < offset:
        return target
    if target >= offset + visible:
        return target - visible + 1
    return offset


def sync_viewport(session: Session, layout: ScreenLayout) -> None:
    """Scroll the directory view and active page so their cursors are visible.

    The page follows the cursor only when ``session.reveal_cursor`` is set
    (after a keyboard move, a click or a jump), so wheel scrolling can move the
    view away from the cursor. Offsets are always clamped into range.
    """
    view = session.directory_view
    view.clamp_selection()
    view.scroll_offset = _follow(view.scroll_offset, view.selected_index, layout.tree_rows)
    view.scroll_offset = max(0, min(view.scroll_offset, max(0, len(view.entries) - layout.tree_rows)))

    page = session.active_page()
    if page is None:
        session.reveal_cursor = False
        return
    visible_rows = layout.text_rows
    visible_cols = layout.text_width(page.line_count())
    if session.reveal_cursor:
        page.scroll_offset = _follow(page.scroll_offset, page.cursor_row(), visible_rows)
        page.horizontal_scroll_offset = _follow_cells(
            page.current.text(),
            page.horizontal_scroll_offset,
            page.cursor_column(),
            visible_cols,
        )
        session.reveal_cursor = False
    page.scroll_offset = max(0, min(page.scroll_offset, max(0, page.line_count() - visible_rows)))
    page.horizontal_scroll_offset = max(0, page.horizontal_scroll_offset)


__all__ = [
    "ScreenLayout",
    "build_layout",
    "clamp_left_width",
    "compute_left_width",
    "gutter_width",
    "sync_viewport",
    "tab_label",
]
