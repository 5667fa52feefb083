"""Document buffer built as a zipper of lines.

``Page`` keeps completed lines above and below the cursor row in plain lists
and the cursor row itself in a ``LineZipper``. Whole-document views
(``all_lines``/``text``) are reconstructed on demand for save, search and
rendering. File helpers load, save and revert against ``file_path``.
"""

from __future__ import annotations

from pathlib import Path

from ..logging_config import get_logger
from .zipper import LineZipper

logger = get_logger("editor")


def read_document(path: Path) -> str:
    """Read ``path`` as UTF-8 text.

    Raises ``OSError`` when the file is missing or unreadable; undecodable
    bytes surface as ``UnicodeDecodeError`` (a ``ValueError``), which callers
    treat like any other unreadable file.
    """
    return path.read_text(encoding="utf-8")


def write_document(path: Path, lines: list[str]) -> None:
    """Write ``lines`` joined by ``\\n`` without adding a trailing newline."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write("\n".join(lines))


class Page:
    """One open document plus its cursor and viewport state."""

    def __init__(self, file_path: Path | None = None) -> None:
        self.before: list[str] = []
        self.current = LineZipper()
        self.after: list[str] = []
        self.file_path = file_path
        self.scroll_offset = 0
        self.horizontal_scroll_offset = 0
        self.modified = False

    @classmethod
    def from_file(cls, path: Path | None) -> Page:
        """Open ``path`` into a new page.

        Missing or unreadable files yield an empty page that is still bound to
        ``path``, so a later write creates the file.
        """
        page = cls(path)
        if path is None:
            return page
        try:
            contents = read_document(path)
        except (OSError, ValueError) as exc:
            logger.info("opening %s as an empty buffer: %s", path, exc)
            return page
        page.load_from_text(contents)
        return page

    @classmethod
    def from_text(cls, text: str, file_path: Path | None = None) -> Page:
        page = cls(file_path)
        page.load_from_text(text)
        return page

    def load_from_text(self, text: str) -> None:
        """Replace the whole document with ``text``; the cursor goes to (0, 0)."""
        lines = text.split("\n")
        self.before = []
        self.current = LineZipper(lines[0])
        self.after = lines[1:]
        self.scroll_offset = 0
        self.horizontal_scroll_offset = 0
        self.modified = False

    def is_empty(self) -> bool:
        return not self.before and not self.after and len(self.current) == 0

    def cursor_row(self) -> int:
        return len(self.before)

    def cursor_column(self) -> int:
        return self.current.cursor_column()

    def line_count(self) -> int:
        return len(self.before) + 1 + len(self.after)

    def all_lines(self) -> list[str]:
        return [*self.before, self.current.text(), *self.after]

    def text(self) -> str:
        return "\n".join(self.all_lines())

    # Cursor movement

    def move_left(self) -> None:
        self.current.move_left()

    def move_right(self) -> None:
        self.current.move_right()

    def move_up(self) -> None:
        """Move to the previous line, keeping the column where it fits."""
        if not self.before:
            return
        column = self.current.cursor_column()
        self.after.insert(0, self.current.text())
        self.current = LineZipper(self.before.pop(), column)

    def move_down(self) -> None:
        """Move to the next line, keeping the column where it fits."""
        if not self.after:
            return
        column = self.current.cursor_column()
        self.before.append(self.current.text())
        self.current = LineZipper(self.after.pop(0), column)

    def move_line_start(self) -> None:
        self.current.set_cursor_column(0)

    def move_line_end(self) -> None:
        self.current.set_cursor_column(len(self.current))

    def move_cursor_to(self, row: int, column: int) -> None:
        """Re-partition the document around ``row`` and place the cursor.

        ``row`` is clamped to the last line and ``column`` to that line's
        length; negative values clamp to zero.
        """
        lines = self.all_lines()
        target_row = max(0, min(row, len(lines) - 1))
        self.before = lines[:target_row]
        self.after = lines[target_row + 1 :]
        self.current = LineZipper(lines[target_row], max(0, column))

    # Editing

    def insert(self, ch: str) -> None:
        self.current.insert(ch)
        self.modified = True

    def insert_newline(self) -> None:
        """Split the line at the cursor and move to the start of the new line."""
        line = self.current.text()
        column = self.current.cursor_column()
        self.current = LineZipper(line[:column])
        self.after.insert(0, line[column:])
        self.move_down()
        self.current.set_cursor_column(0)
        self.modified = True

    def delete(self) -> None:
        """Backspace: at column 0 join with the previous line, else delete left."""
        if self.current.cursor_column() == 0:
            if not self.before:
                return
            previous = self.before.pop()
            self.current = LineZipper(previous + self.current.text(), len(previous))
        else:
            self.current.delete()
        self.modified = True

    def delete_forward(self) -> None:
        """Delete key: at end of line pull the next line up, else delete right."""
        if self.current.at_end():
            if not self.after:
                return
            column = self.current.cursor_column()
            self.current = LineZipper(self.current.text() + self.after.pop(0), column)
        else:
            self.current.delete_forward()
        self.modified = True

    # Persistence

    def save(self, path: Path | None = None) -> Path:
        """Write the document to ``path`` (or ``file_path``) and adopt that path.

        Raises ``ValueError`` when no path is known and ``OSError`` on write
        failure; on failure ``file_path`` is left unchanged.
        """
        target = path if path is not None else self.file_path
        if target is None:
            raise ValueError("page has no file path")
        write_document(target, self.all_lines())
        self.file_path = target
        self.modified = False
        return target

    def revert(self) -> None:
        """Reload from ``file_path``, discarding unsaved edits.

        Raises ``ValueError`` without a path and ``OSError``/``ValueError`` when
        the file cannot be read; the document is untouched on failure.
        """
        if self.file_path is None:
            raise ValueError("page has no file path")
        contents = read_document(self.file_path)
        self.load_from_text(contents)

    def display_name(self) -> str:
        if self.file_path is None:
            return "[No Name]"
        return self.file_path.name or str(self.file_path)


__all__ = ["Page", "read_document", "write_document"]
