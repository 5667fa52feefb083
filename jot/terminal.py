"""Raw-mode and screen bracketing for the editor session.

``TerminalController.raw_mode`` switches the tty to raw input, moves to the
alternate screen with the cursor hidden and, unless disabled, turns on SGR
mouse reporting. Everything is undone on exit, including after errors.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ALT_SCREEN_ON = b"\x1b[?1049h"
ALT_SCREEN_OFF = b"\x1b[?1049l"
CURSOR_HIDE = b"\x1b[?25l"
CURSOR_SHOW = b"\x1b[?25h"
# press/release, drag motion, SGR extended coordinates
MOUSE_ON = b"\x1b[?1000h\x1b[?1002h\x1b[?1006h"
MOUSE_OFF = b"\x1b[?1000l\x1b[?1002l\x1b[?1006l"


class TerminalController:
    """Enter and leave the full-screen editor state on one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int, *, capture_mouse: bool = True) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.capture_mouse = capture_mouse
        self._saved_tty_state: list | None = None
        self._mouse_reporting_enabled = False

    @property
    def mouse_reporting_enabled(self) -> bool:
        return self._mouse_reporting_enabled

    def enter_sequence(self) -> bytes:
        return ALT_SCREEN_ON + CURSOR_HIDE + (MOUSE_ON if self.capture_mouse else b"")

    def leave_sequence(self) -> bytes:
        return (MOUSE_OFF if self._mouse_reporting_enabled else b"") + CURSOR_SHOW + ALT_SCREEN_OFF

    def enable_tui_mode(self) -> None:
        self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, self.enter_sequence())
        self._mouse_reporting_enabled = self.capture_mouse

    def disable_tui_mode(self) -> None:
        """Restore the main screen and the tty attributes saved on entry."""
        os.write(self.stdout_fd, self.leave_sequence())
        self._mouse_reporting_enabled = False
        if self._saved_tty_state is not None:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            self._saved_tty_state = None

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()


__all__ = [
    "ALT_SCREEN_OFF",
    "ALT_SCREEN_ON",
    "CURSOR_HIDE",
    "CURSOR_SHOW",
    "MOUSE_OFF",
    "MOUSE_ON",
    "TerminalController",
]
