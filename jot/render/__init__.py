"""Rendering engine for the split directory/editor terminal view.

``build_frame`` composes one full ANSI frame from a read-only session
snapshot; ``draw_frame`` writes it to the terminal. Neither mutates the
session: viewport scrolling is settled beforehand by ``jot.layout.sync_viewport``.
"""

from __future__ import annotations

import os
import sys

from ..ansi import (
    clip_ansi_line,
    escape_control_char,
    fit_ansi_line,
    rendered_char_width,
    rendered_width,
    sanitize_terminal_text,
)
from ..editor import Page
from ..layout import ScreenLayout, build_layout, gutter_width, tab_label
from ..session.modes import PANE_EDITOR, PANE_FILE_TREE, EditMode, FindMode
from ..session.state import Session
from ..ui_theme import DEFAULT_THEME, UITheme
from .status import status_prompt

DIVIDER = "│"


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace(theme.reset, theme.reset + theme.reverse) + theme.reset


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def _tree_row(session: Session, layout: ScreenLayout, y: int, theme: UITheme) -> str:
    view = session.directory_view
    focused = session.active_pane == PANE_FILE_TREE
    width = layout.left_width
    if y == 0:
        header = sanitize_terminal_text(str(view.path))
        title = _styled(header, theme.pane_title if focused else theme.dim, theme)
        return fit_ansi_line(title, width)

    index = layout.tree_index_at(view.scroll_offset, y)
    if not view.entries:
        text = _styled("(empty)", theme.dim, theme) if y == 1 else ""
        return fit_ansi_line(text, width)
    if not 0 <= index < len(view.entries):
        return " " * width

    entry = view.entries[index]
    if focused:
        style = theme.tree_dir if entry.is_dir else theme.tree_file
    else:
        style = theme.dim
    text = fit_ansi_line(_styled(sanitize_terminal_text(entry.label()), style, theme), width)
    if index == view.selected_index:
        text = selected_with_ansi(text, theme)
    return text


def _tab_bar(session: Session, layout: ScreenLayout, theme: UITheme) -> str:
    if not session.tabs:
        return clip_ansi_line(_styled(" (no open files) ", theme.dim, theme), layout.editor_width)
    parts: list[str] = []
    for idx, page in enumerate(session.tabs):
        label = tab_label(page)
        if idx == session.active_tab_index:
            parts.append(selected_with_ansi(label, theme) if theme.reverse else f"[{label.strip()}]")
        else:
            parts.append(_styled(label, theme.tab_modified if page.modified else theme.tab_inactive, theme))
    return clip_ansi_line("".join(parts), layout.editor_width)


def _match_spans(session: Session, row: int) -> list[tuple[int, int, bool]]:
    """``(start, end, is_current)`` column spans of find matches on ``row``."""
    if not isinstance(session.mode, FindMode) or not session.find_query:
        return []
    length = len(session.find_query)
    spans: list[tuple[int, int, bool]] = []
    for idx, (match_row, column) in enumerate(session.find_matches):
        if match_row == row:
            spans.append((column, column + length, idx == session.current_match_index))
    return spans


def _span_style(spans: list[tuple[int, int, bool]], column: int, theme: UITheme) -> str:
    for start, end, is_current in spans:
        if start <= column < end:
            return theme.find_current if is_current else theme.find_match
    return ""


def render_text_line(
    line: str,
    start: int,
    width: int,
    theme: UITheme,
    spans: list[tuple[int, int, bool]] | None = None,
) -> str:
    """Render ``line`` from code-point ``start`` into at most ``width`` cells.

    Tabs expand to spaces; other control characters are drawn escaped.
    """
    spans = spans or []
    out: list[str] = []
    col = 0
    active = ""
    for idx in range(max(0, start), len(line)):
        ch = line[idx]
        w = rendered_char_width(ch, col)
        if col + w > width:
            break
        style = _span_style(spans, idx, theme)
        if style != active:
            if active:
                out.append(theme.reset)
            out.append(style)
            active = style
        out.append(" " * w if ch == "\t" else escape_control_char(ch))
        col += w
    if active:
        out.append(theme.reset)
    return "".join(out)


def _gutter(number: int, width: int, is_current: bool, theme: UITheme) -> str:
    label = str(number).rjust(width - 1) + " "
    return _styled(label, theme.gutter_current if is_current else theme.gutter, theme)


def _text_row(
    session: Session,
    page: Page | None,
    lines: list[str],
    layout: ScreenLayout,
    y: int,
    theme: UITheme,
) -> str:
    if page is None:
        return ""
    row = page.scroll_offset + y - 1
    if not 0 <= row < len(lines):
        return ""
    gutter = gutter_width(len(lines))
    text = render_text_line(
        lines[row],
        page.horizontal_scroll_offset,
        layout.text_width(len(lines)),
        theme,
        _match_spans(session, row),
    )
    return clip_ansi_line(_gutter(row + 1, gutter, row == page.cursor_row(), theme), gutter) + text


def cursor_position(session: Session, layout: ScreenLayout) -> tuple[int, int] | None:
    """0-based screen cell of the text cursor, or ``None`` when it is hidden.

    The cursor shows only while editing and only when it lies in the viewport.
    """
    page = session.active_page()
    if page is None or session.active_pane != PANE_EDITOR or not isinstance(session.mode, EditMode):
        return None
    row = page.cursor_row()
    visible_row = row - page.scroll_offset
    if not 0 <= visible_row < layout.text_rows:
        return None
    column = page.cursor_column()
    if column < page.horizontal_scroll_offset:
        return None
    line = page.current.text()
    col = rendered_width(line[page.horizontal_scroll_offset:column])
    if col >= layout.text_width(page.line_count()):
        return None
    x = layout.editor_x + gutter_width(page.line_count()) + col
    if x >= layout.columns:
        return None
    return x, visible_row + 1


def build_frame(
    session: Session,
    columns: int,
    rows: int,
    theme: UITheme = DEFAULT_THEME,
    tree_pane_percent: float | None = None,
) -> str:
    """Compose the full frame for a ``columns`` x ``rows`` terminal."""
    layout = build_layout(columns, rows, tree_pane_percent)
    page = session.active_page()
    lines = page.all_lines() if page is not None else []
    divider = _styled(DIVIDER, theme.divider, theme)

    out: list[str] = ["\033[H\033[J"]
    for y in range(layout.body_rows):
        out.append(_tree_row(session, layout, y, theme))
        out.append(divider)
        if y == 0:
            out.append(_tab_bar(session, layout, theme))
        else:
            out.append(_text_row(session, page, lines, layout, y, theme))
        out.append("\r\n")

    if session.status_message:
        status_text, status_style = session.status_message, theme.status
    else:
        status_text, status_style = status_prompt(session), theme.status_prompt
    status = _styled(fit_ansi_line(sanitize_terminal_text(status_text), layout.columns - 1), status_style, theme)
    out.append(status)

    cursor = cursor_position(session, layout)
    if cursor is None:
        out.append("\033[?25l")
    else:
        x, y = cursor
        out.append(f"\033[{y + 1};{x + 1}H\033[?25h")
    return "".join(out)


def draw_frame(
    session: Session,
    columns: int,
    rows: int,
    theme: UITheme = DEFAULT_THEME,
    tree_pane_percent: float | None = None,
) -> None:
    frame = build_frame(session, columns, rows, theme, tree_pane_percent)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = [
    "build_frame",
    "cursor_position",
    "draw_frame",
    "render_text_line",
    "selected_with_ansi",
    "status_prompt",
]
