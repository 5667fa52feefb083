"""Command-line front door for jot.

Parses CLI options, configures file logging, resolves the file to open and
dispatches into the interactive editor runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import load_theme_name
from .logging_config import setup_logging, teardown_logging
from .runtime import run_editor
from .ui_theme import available_theme_names

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jot",
        description="Edit files in the terminal next to a directory browser.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to open in the first tab.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--hide-hidden",
        action="store_true",
        help="Omit dotfiles from the directory pane for this run.",
    )
    parser.add_argument(
        "--no-mouse",
        action="store_true",
        help="Leave mouse events to the terminal (native text selection).",
    )
    parser.add_argument("--log-file", default=None, help="Write the log to this file.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Minimum level written to the log file.",
    )
    return parser


def resolve_file_argument(raw: str | None) -> Path | None:
    """Return the absolute file to open; directories are rejected."""
    if raw is None:
        return None
    path = Path(raw).expanduser()
    if path.is_dir():
        raise SystemExit(f"Not a file: {path}")
    return path.resolve()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch jot, optionally on one file.

    A missing file opens as an empty buffer bound to that path, so the first
    write creates it.
    """
    args = build_parser().parse_args(argv)
    file_path = resolve_file_argument(args.path)
    setup_logging(
        Path(args.log_file).expanduser() if args.log_file else None,
        level=getattr(logging, args.log_level),
    )
    try:
        run_editor(
            file_path,
            theme_name=args.theme if args.theme is not None else load_theme_name(),
            no_color=args.no_color,
            show_hidden=False if args.hide_hidden else None,
            capture_mouse=not args.no_mouse,
        )
    finally:
        teardown_logging()


if __name__ == "__main__":
    main()
