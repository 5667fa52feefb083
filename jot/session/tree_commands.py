"""Directory-pane commands and filesystem mutations.

The tree command buffer understands ``d`` (delete with confirmation), ``nf``
and ``nd`` (create file/directory), ``rn`` (rename) and ``.`` (show or hide
dotfiles); an empty buffer opens the selected entry. Every mutation rebuilds
the directory snapshot afterwards, whether the OS call succeeded or not.
"""

from __future__ import annotations

import errno
import os
import shutil
from pathlib import Path

from ..logging_config import get_logger
from .modes import (
    PANE_EDITOR,
    ConfirmDeleteMode,
    EditMode,
    PromptNewDirectoryMode,
    PromptNewFileMode,
    PromptRenameMode,
)
from .state import Session

logger = get_logger("tree")

NOTHING_SELECTED_MESSAGE = "Nothing selected."


def is_same_or_under(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def open_selected(session: Session) -> None:
    """Descend into the selected directory or open the selected file in a tab."""
    entry = session.directory_view.selected_entry()
    if entry is None:
        return
    if entry.is_dir:
        try:
            session.directory_view.refresh(entry.path)
        except OSError as exc:
            logger.warning("cannot open directory %s: %s", entry.path, exc)
            session.status_message = f"Cannot open directory {entry.name}: {exc}"
        return
    session.open_path(entry.path)
    session.active_pane = PANE_EDITOR
    session.mode = EditMode()
    session.command_buffer = ""


def go_to_parent(session: Session) -> None:
    """Browse the parent directory, selecting the directory just left."""
    current = session.current_directory
    parent = current.parent
    if parent == current:
        return
    session.refresh_directory(parent, preferred_path=current)


def execute_tree_command(session: Session) -> None:
    """Run the directory-pane command in the scratch buffer and clear it."""
    raw = session.command_buffer
    session.command_buffer = ""
    command = raw.strip()
    if not command:
        open_selected(session)
        return
    if command == ".":
        toggle_hidden(session)
        return
    if command in {"nf", "nd"}:
        session.mode = PromptNewFileMode() if command == "nf" else PromptNewDirectoryMode()
        return
    if command not in {"d", "rn"}:
        logger.debug("unknown tree command %r", raw)
        session.status_message = f"Unknown command: {raw}"
        return
    entry = session.directory_view.selected_entry()
    if entry is None:
        session.status_message = NOTHING_SELECTED_MESSAGE
        return
    if command == "d":
        session.mode = ConfirmDeleteMode(entry.path)
    else:
        session.mode = PromptRenameMode(entry.path)


def toggle_hidden(session: Session) -> None:
    """Show or hide dotfiles in the listing, keeping the selection if still listed."""
    view = session.directory_view
    selected = view.selected_entry()
    view.show_hidden = not view.show_hidden
    session.status_message = "Showing hidden files." if view.show_hidden else "Hiding hidden files."
    session.refresh_directory(preferred_path=selected.path if selected is not None else None)


def _finish_tree_operation(session: Session, preferred_path: Path | None = None) -> None:
    """Return to FileTree mode and rebuild the listing unconditionally."""
    session.focus_file_tree()
    session.refresh_directory(preferred_path=preferred_path)


def delete_path(session: Session, path: Path) -> bool:
    """Remove ``path`` (recursively for directories) and close its tabs."""
    name = path.name
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        logger.warning("delete of %s failed: %s", path, exc)
        session.status_message = f"Error deleting {name}: {exc}"
        _finish_tree_operation(session)
        return False

    logger.info("deleted %s", path)
    for idx in reversed(range(len(session.tabs))):
        file_path = session.tabs[idx].file_path
        if file_path is not None and is_same_or_under(file_path, path):
            session.close_tab(idx)
    session.clamp_active_tab()
    session.status_message = f"Deleted {name}"
    _finish_tree_operation(session)
    return True


def cancel_delete(session: Session) -> None:
    session.status_message = "Delete cancelled."
    session.focus_file_tree()


def create_file(session: Session, name: str) -> bool:
    """Create an empty file and open it in a new tab focused for editing."""
    target = (session.current_directory / name).resolve()
    try:
        target.touch(exist_ok=False)
    except OSError as exc:
        logger.warning("create of %s failed: %s", target, exc)
        session.status_message = f"Error creating {name}: {exc}"
        _finish_tree_operation(session)
        return False

    logger.info("created file %s", target)
    session.status_message = f"Created file {name}"
    _finish_tree_operation(session, preferred_path=target)
    session.open_path(target)
    session.active_pane = PANE_EDITOR
    session.mode = EditMode()
    return True


def create_directory(session: Session, name: str) -> bool:
    target = (session.current_directory / name).resolve()
    try:
        target.mkdir()
    except OSError as exc:
        logger.warning("mkdir of %s failed: %s", target, exc)
        session.status_message = f"Error creating {name}: {exc}"
        _finish_tree_operation(session)
        return False

    logger.info("created directory %s", target)
    session.status_message = f"Created directory {name}"
    _finish_tree_operation(session, preferred_path=target)
    return True


def rename_path(session: Session, old_path: Path, new_name: str) -> bool:
    """Rename ``old_path`` within its directory and repoint affected tabs.

    Refuses to replace an existing path. Tabs are never closed by a rename.
    """
    new_path = (old_path.parent / new_name).resolve()
    try:
        if new_path.exists() or new_path.is_symlink():
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(new_path))
        old_path.rename(new_path)
    except OSError as exc:
        logger.warning("rename of %s failed: %s", old_path, exc)
        session.status_message = f"Error renaming {old_path.name}: {exc}"
        _finish_tree_operation(session)
        return False

    logger.info("renamed %s to %s", old_path, new_path)
    for page in session.tabs:
        file_path = page.file_path
        if file_path is None or not is_same_or_under(file_path, old_path):
            continue
        page.file_path = new_path / file_path.relative_to(old_path) if file_path != old_path else new_path
    session.status_message = f"Renamed {old_path.name} to {new_path.name}"
    _finish_tree_operation(session, preferred_path=new_path)
    return True


def submit_tree_prompt(session: Session) -> None:
    """Enter in a New File/New Directory/Rename prompt."""
    name = session.command_buffer.strip()
    if not name:
        return
    mode = session.mode
    session.command_buffer = ""
    if isinstance(mode, PromptNewFileMode):
        create_file(session, name)
    elif isinstance(mode, PromptNewDirectoryMode):
        create_directory(session, name)
    elif isinstance(mode, PromptRenameMode):
        rename_path(session, mode.path, name)


def cancel_tree_prompt(session: Session) -> None:
    session.focus_file_tree()


__all__ = [
    "cancel_delete",
    "cancel_tree_prompt",
    "create_directory",
    "create_file",
    "delete_path",
    "execute_tree_command",
    "go_to_parent",
    "is_same_or_under",
    "open_selected",
    "rename_path",
    "submit_tree_prompt",
    "toggle_hidden",
]
