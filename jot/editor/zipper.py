"""Cursor-addressable single-line text storage.

A line is kept as two character stacks split at the cursor so typing and
backspacing at the cursor never shift the rest of the line.
"""

from __future__ import annotations


class LineZipper:
    """One line of text split at the cursor.

    ``before`` holds the characters left of the cursor in document order.
    ``after`` holds the characters right of the cursor nearest-first, so
    ``before + reversed(after)`` is always the full line.
    """

    __slots__ = ("before", "after")

    def __init__(self, text: str = "", column: int = 0) -> None:
        self.before: list[str] = []
        self.after: list[str] = list(reversed(text))
        if column:
            self.set_cursor_column(column)

    def __repr__(self) -> str:
        return f"LineZipper({self.text()!r}, column={self.cursor_column()})"

    def __len__(self) -> int:
        return len(self.before) + len(self.after)

    def insert(self, ch: str) -> None:
        """Insert ``ch`` left of the cursor and advance past it."""
        self.before.extend(ch)

    def delete(self) -> None:
        """Remove the character left of the cursor (no-op at column 0)."""
        if self.before:
            self.before.pop()

    def delete_forward(self) -> None:
        """Remove the character right of the cursor (no-op at end of line)."""
        if self.after:
            self.after.pop()

    def move_left(self) -> None:
        if self.before:
            self.after.append(self.before.pop())

    def move_right(self) -> None:
        if self.after:
            self.before.append(self.after.pop())

    def cursor_column(self) -> int:
        return len(self.before)

    def at_end(self) -> bool:
        return not self.after

    def set_cursor_column(self, column: int) -> None:
        """Re-split the line at ``column``, clamped into ``[0, len]``."""
        content = self.text()
        split = max(0, min(column, len(content)))
        self.before = list(content[:split])
        self.after = list(reversed(content[split:]))

    def text(self) -> str:
        return "".join(self.before) + "".join(reversed(self.after))


__all__ = ["LineZipper"]
