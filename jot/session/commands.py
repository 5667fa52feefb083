"""Command-line grammar for the editor pane and the save prompts.

Commands are typed in Command mode as ``command [arg]`` (an optional leading
``:`` is accepted) and executed on Enter. Every handler guards against an
empty tab set and reports I/O failures through ``session.status_message``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..logging_config import get_logger
from .modes import (
    PANE_EDITOR,
    FindMode,
    PromptSaveAndQuitMode,
    PromptSaveMode,
)
from .state import Session

logger = get_logger("commands")

HELP_MESSAGE = (
    "Commands: q(uit), x/exit, h(elp), w(rite) [path], wq [path], wx, r(evert), f(ind)"
    " | Tree: d, nf, nd, rn"
)
NO_BUFFER_MESSAGE = "No open buffer."


def parse_command(text: str) -> tuple[str, str | None]:
    """Split ``text`` into ``(command, arg)``; one leading ``:`` is ignored."""
    stripped = text.strip()
    if stripped.startswith(":"):
        stripped = stripped[1:]
    parts = stripped.split()
    if not parts:
        return "", None
    return parts[0], parts[1] if len(parts) > 1 else None


def resolve_user_path(session: Session, raw: str) -> Path:
    """Resolve a typed path against the browsed directory."""
    return (session.current_directory / Path(raw).expanduser()).resolve()


def display_path(session: Session, path: Path) -> str:
    """Show ``path`` relative to the browsed directory when it lies under it."""
    try:
        return str(path.relative_to(session.current_directory))
    except ValueError:
        return str(path)


def write_active_page(session: Session, target: Path) -> bool:
    """Save the active buffer to ``target`` and report the outcome in the status bar."""
    page = session.active_page()
    if page is None:
        session.status_message = NO_BUFFER_MESSAGE
        return False
    try:
        saved = page.save(target)
    except OSError as exc:
        logger.warning("save to %s failed: %s", target, exc)
        session.status_message = f"Error: {exc}"
        return False
    logger.info("saved %s", saved)
    session.status_message = f"Saved to {display_path(session, saved)}"
    return True


def save_active(session: Session, arg: str | None, *, then_quit: bool = False) -> bool:
    """Write the active buffer, prompting for a name when none is known.

    Returns whether a file was written. A pathless buffer without ``arg``
    switches to ``PromptSave``/``PromptSaveAndQuit`` instead of failing.
    """
    page = session.active_page()
    if page is None:
        session.status_message = NO_BUFFER_MESSAGE
        return False
    if arg is not None:
        target = resolve_user_path(session, arg)
    elif page.file_path is not None:
        target = page.file_path
    else:
        session.active_pane = PANE_EDITOR
        session.mode = PromptSaveAndQuitMode() if then_quit else PromptSaveMode()
        session.command_buffer = ""
        return False
    return write_active_page(session, target)


def close_active_tab(session: Session) -> None:
    """Close the active tab; with no tabs left fall back to Command mode."""
    if not session.close_tab():
        session.status_message = NO_BUFFER_MESSAGE
        return
    if not session.tabs:
        session.focus_command()


def save_all_and_quit(session: Session) -> None:
    """Write every tab that has a path, then quit regardless of errors."""
    errors: list[str] = []
    saved = 0
    for page in session.tabs:
        if page.file_path is None:
            continue
        try:
            page.save()
        except OSError as exc:
            logger.warning("save to %s failed: %s", page.file_path, exc)
            errors.append(f"Error saving {page.display_name()}: {exc}")
            continue
        saved += 1
    session.status_message = "; ".join(errors) if errors else f"Saved {saved} file(s)."
    session.should_quit = True


def revert_active(session: Session) -> None:
    page = session.active_page()
    if page is None:
        session.status_message = NO_BUFFER_MESSAGE
        return
    if page.file_path is None:
        session.status_message = "No file to revert from."
        return
    try:
        page.revert()
    except (OSError, ValueError) as exc:
        logger.warning("revert of %s failed: %s", page.file_path, exc)
        session.status_message = f"Error reading file: {page.file_path}"
        return
    session.reveal_cursor = True
    session.status_message = "Reverted to saved version."


def start_find(session: Session) -> None:
    if session.active_page() is None:
        session.status_message = NO_BUFFER_MESSAGE
        return
    session.mode = FindMode()
    session.clear_find()


def _quit(session: Session, _arg: str | None) -> None:
    close_active_tab(session)


def _exit(session: Session, _arg: str | None) -> None:
    session.should_quit = True


def _help(session: Session, _arg: str | None) -> None:
    session.status_message = HELP_MESSAGE


def _revert(session: Session, _arg: str | None) -> None:
    revert_active(session)


def _find(session: Session, _arg: str | None) -> None:
    start_find(session)


def _write(session: Session, arg: str | None) -> None:
    save_active(session, arg)


def _write_quit(session: Session, arg: str | None) -> None:
    if save_active(session, arg, then_quit=True):
        close_active_tab(session)


def _write_all_exit(session: Session, _arg: str | None) -> None:
    save_all_and_quit(session)


EDITOR_COMMANDS: dict[str, Callable[[Session, str | None], None]] = {
    "f": _find,
    "find": _find,
    "q": _quit,
    "quit": _quit,
    "x": _exit,
    "exit": _exit,
    "wx": _write_all_exit,
    "h": _help,
    "help": _help,
    "r": _revert,
    "revert": _revert,
    "w": _write,
    "write": _write,
    "wq": _write_quit,
}


def execute_command(session: Session) -> None:
    """Run the command typed into ``session.command_buffer`` and clear it."""
    raw = session.command_buffer
    session.command_buffer = ""
    command, arg = parse_command(raw)
    if not command:
        return
    handler = EDITOR_COMMANDS.get(command)
    if handler is None:
        logger.debug("unknown command %r", raw)
        session.status_message = f"Unknown command: {raw}"
        return
    handler(session, arg)


def submit_save_prompt(session: Session) -> None:
    """Enter in a save prompt: write to the typed name, resolved locally.

    On failure the prompt stays open with its text so the name can be fixed.
    """
    name = session.command_buffer.strip()
    if not name:
        return
    page = session.active_page()
    if page is None:
        session.status_message = NO_BUFFER_MESSAGE
        session.focus_command()
        return
    quit_after = isinstance(session.mode, PromptSaveAndQuitMode)
    if not write_active_page(session, resolve_user_path(session, name)):
        return
    session.focus_command()
    if quit_after:
        session.should_quit = True


def cancel_save_prompt(session: Session) -> None:
    session.status_message = "Save cancelled."
    session.focus_command()


__all__ = [
    "EDITOR_COMMANDS",
    "HELP_MESSAGE",
    "NO_BUFFER_MESSAGE",
    "cancel_save_prompt",
    "close_active_tab",
    "display_path",
    "execute_command",
    "parse_command",
    "resolve_user_path",
    "revert_active",
    "save_active",
    "save_all_and_quit",
    "start_find",
    "submit_save_prompt",
    "write_active_page",
]
