"""Runtime composition layer for jot.

Builds the startup session, resolves the theme and the persisted
preferences, and runs the main loop on the controlling terminal.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from ..config import load_show_hidden, load_tree_pane_percent, save_show_hidden
from ..logging_config import get_logger
from ..session import App
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import run_main_loop

logger = get_logger("runtime")


def build_app(
    file_path: Path | None,
    directory: Path,
    *,
    show_hidden: bool,
    tree_pane_percent: float | None,
) -> App:
    """Create the startup ``App``; an unlistable ``directory`` ends the process."""
    try:
        return App.start(
            directory,
            file_path,
            show_hidden=show_hidden,
            tree_pane_percent=tree_pane_percent,
        )
    except OSError as exc:
        logger.error("cannot list %s: %s", directory, exc)
        raise SystemExit(f"Cannot list directory: {exc}") from exc


def run_editor(
    file_path: Path | None,
    *,
    directory: Path | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
    show_hidden: bool | None = None,
    tree_pane_percent: float | None = None,
    capture_mouse: bool = True,
) -> None:
    """Run the interactive editor on the controlling terminal.

    ``show_hidden`` and ``tree_pane_percent`` default to the persisted config.
    A hidden-file preference changed during the session is saved on exit.
    """
    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(sys.stdout.fileno()):
        raise SystemExit("jot needs an interactive terminal.")

    initial_show_hidden = load_show_hidden() if show_hidden is None else show_hidden
    if tree_pane_percent is None:
        tree_pane_percent = load_tree_pane_percent()
    app = build_app(
        file_path,
        directory if directory is not None else Path.cwd(),
        show_hidden=initial_show_hidden,
        tree_pane_percent=tree_pane_percent,
    )
    theme = resolve_theme(theme_name, no_color=no_color)
    logger.info("starting jot with %s", file_path if file_path is not None else "no file")

    terminal = TerminalController(stdin_fd, sys.stdout.fileno(), capture_mouse=capture_mouse)
    run_main_loop(app, terminal, stdin_fd, theme)

    final_show_hidden = app.session.directory_view.show_hidden
    if final_show_hidden != initial_show_hidden:
        save_show_hidden(final_show_hidden)


__all__ = ["build_app", "run_editor"]
