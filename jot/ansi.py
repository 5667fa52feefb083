"""ANSI-aware text measurement and clipping.

Keeps rendered rows aligned to the terminal grid when style escapes, tabs and
wide characters are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def escape_control_char(ch: str) -> str:
    """Return ``ch``, or a visible ``\\xNN`` escape for C0, DEL and C1 controls."""
    code = ord(ch)
    if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
        return f"\\x{code:02x}"
    return ch


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control characters to avoid side effects (bell, cursor moves, etc.).

    Unlike document rendering, labels have no tab expansion, so tabs and
    newlines are escaped too.
    """
    if _CONTROL_RE.search(source) is None:
        return source
    return "".join(escape_control_char(ch) for ch in source)


def rendered_char_width(ch: str, col: int) -> int:
    """Cells a document character occupies once drawn at visual column ``col``.

    Tabs expand to the next stop; other control characters are drawn as their
    ``\\xNN`` escape.
    """
    if ch != "\t" and _CONTROL_RE.match(ch):
        return len(escape_control_char(ch))
    return char_display_width(ch, col)


def rendered_width(text: str) -> int:
    """Cells ``text`` occupies when drawn from visual column 0."""
    col = 0
    for ch in text:
        col += rendered_char_width(ch, col)
    return col


def column_at_cell(text: str, cell: int) -> int:
    """Index of the character in ``text`` whose drawn span contains ``cell``.

    Cells past the end map to ``len(text)``.
    """
    col = 0
    for idx, ch in enumerate(text):
        width = rendered_char_width(ch, col)
        if cell < col + width:
            return idx
        col += width
    return len(text)


def display_width(text: str) -> int:
    """Visible width of ``text`` starting at column 0, ignoring escapes."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and pad it with spaces to fill them."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "clip_ansi_line",
    "column_at_cell",
    "display_width",
    "escape_control_char",
    "fit_ansi_line",
    "rendered_char_width",
    "rendered_width",
    "sanitize_terminal_text",
]
