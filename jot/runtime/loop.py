"""Main interactive event loop for the terminal UI.

Each iteration settles the viewport, redraws when something changed, reads
one key token and hands it to ``App.handle_event``. Feature logic lives in
``jot.session``; this loop is only wiring.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable

from ..input import read_key
from ..layout import sync_viewport
from ..logging_config import get_logger
from ..render import draw_frame
from ..session import App
from ..terminal import TerminalController
from ..ui_theme import DEFAULT_THEME, UITheme

logger = get_logger("loop")

KEY_POLL_TIMEOUT_MS = 120


def fold_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF and CR+LF into one ``ENTER`` token.

    Returns ``(key, skip_next_lf)``; ``key`` is ``None`` for an LF that only
    completes a CR already reported.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    app: App,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme = DEFAULT_THEME,
    *,
    read: Callable[..., str] = read_key,
    draw: Callable[..., None] = draw_frame,
    terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run the editor until the session asks to quit."""
    session = app.session
    skip_next_lf = False
    dirty = True
    last_size: tuple[int, int] | None = None
    logger.info("main loop started in %s", session.current_directory)
    with terminal.raw_mode():
        while not session.should_quit:
            term = terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                dirty = True
            if dirty:
                sync_viewport(session, app.layout(*size))
                draw(session, term.columns, term.lines, theme, app.tree_pane_percent)
                dirty = False

            try:
                key = read(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                # Ignore SIGINT-style interrupts so only explicit commands quit.
                continue
            if key == "":
                continue
            folded, skip_next_lf = fold_enter(key, skip_next_lf)
            if folded is None:
                continue
            app.handle_event(folded, term.columns, term.lines)
            dirty = True
    logger.info("main loop stopped")


__all__ = ["KEY_POLL_TIMEOUT_MS", "fold_enter", "run_main_loop"]
