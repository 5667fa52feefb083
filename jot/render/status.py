"""Status-bar prompt strings for each mode."""

from __future__ import annotations

from ..session.modes import (
    CommandMode,
    ConfirmDeleteMode,
    EditMode,
    FileTreeMode,
    FindMode,
    PromptNewDirectoryMode,
    PromptNewFileMode,
    PromptRenameMode,
    PromptSaveAndQuitMode,
    PromptSaveMode,
)
from ..session.state import Session


def _find_prompt(session: Session) -> str:
    text = f"Find: {session.find_query}"
    if session.find_matches:
        text += f"  [{session.current_match_index + 1}/{len(session.find_matches)}]"
    if session.find_navigation_active:
        text += "  (n: next, N: previous, Esc: done)"
    return text


def _edit_prompt(session: Session) -> str:
    page = session.active_page()
    if page is None:
        return "-- EDIT --"
    return (
        f"-- EDIT -- {page.display_name()}"
        f"  Ln {page.cursor_row() + 1}, Col {page.cursor_column() + 1}"
        "  (Esc: command line)"
    )


def status_prompt(session: Session) -> str:
    """Prompt shown in the status bar when no status message is pending."""
    mode = session.mode
    buffer = session.command_buffer
    if isinstance(mode, EditMode):
        return _edit_prompt(session)
    if isinstance(mode, CommandMode):
        return f":{buffer}"
    if isinstance(mode, FileTreeMode):
        if buffer:
            return f"Tree: {buffer}"
        return "Tree: Enter open, Left parent, d delete, nf new file, nd new dir, rn rename, . hidden"
    if isinstance(mode, FindMode):
        return _find_prompt(session)
    if isinstance(mode, ConfirmDeleteMode):
        return f"Delete {mode.path.name}? (y/n)"
    if isinstance(mode, PromptSaveAndQuitMode):
        return f"Save as (then quit): {buffer}"
    if isinstance(mode, PromptSaveMode):
        return f"Save as: {buffer}"
    if isinstance(mode, PromptNewFileMode):
        return f"New file: {buffer}"
    if isinstance(mode, PromptNewDirectoryMode):
        return f"New directory: {buffer}"
    if isinstance(mode, PromptRenameMode):
        return f"Rename {mode.path.name} to: {buffer}"
    return ""


__all__ = ["status_prompt"]
