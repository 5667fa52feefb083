"""Input modes and focus panes for the editor session.

``Mode`` is a closed union of frozen dataclass variants. Dialog modes that
act on a filesystem path carry that path on the variant itself, so a pending
delete or rename cannot outlive its dialog.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PANE_EDITOR = "editor"
PANE_FILE_TREE = "file_tree"


@dataclass(frozen=True)
class CommandMode:
    """Typing into the ``:`` command line."""


@dataclass(frozen=True)
class EditMode:
    """Typing edits the active buffer."""


@dataclass(frozen=True)
class FileTreeMode:
    """Navigating the directory pane; typing fills the tree command buffer."""


@dataclass(frozen=True)
class FindMode:
    """Incremental search in the active buffer."""


@dataclass(frozen=True)
class ConfirmDeleteMode:
    """Waiting for y/n before removing ``path``."""

    path: Path


@dataclass(frozen=True)
class PromptSaveMode:
    """Collecting a file name for a pathless buffer."""


@dataclass(frozen=True)
class PromptSaveAndQuitMode:
    """Collecting a file name, then quitting after a successful write."""


@dataclass(frozen=True)
class PromptNewFileMode:
    """Collecting a name for a new file in the browsed directory."""


@dataclass(frozen=True)
class PromptNewDirectoryMode:
    """Collecting a name for a new directory in the browsed directory."""


@dataclass(frozen=True)
class PromptRenameMode:
    """Collecting the new name for ``path``."""

    path: Path


Mode = (
    CommandMode
    | EditMode
    | FileTreeMode
    | FindMode
    | ConfirmDeleteMode
    | PromptSaveMode
    | PromptSaveAndQuitMode
    | PromptNewFileMode
    | PromptNewDirectoryMode
    | PromptRenameMode
)

# Dialogs that take over input regardless of the focused pane.
MODAL_DIALOG_MODES = (
    ConfirmDeleteMode,
    PromptNewFileMode,
    PromptNewDirectoryMode,
    PromptRenameMode,
)

SAVE_PROMPT_MODES = (PromptSaveMode, PromptSaveAndQuitMode)


def is_modal_dialog(mode: Mode) -> bool:
    return isinstance(mode, MODAL_DIALOG_MODES)


def is_save_prompt(mode: Mode) -> bool:
    return isinstance(mode, SAVE_PROMPT_MODES)


def mode_name(mode: Mode) -> str:
    """Short display name, e.g. ``"PromptRename"`` for ``PromptRenameMode``."""
    name = type(mode).__name__
    return name[: -len("Mode")] if name.endswith("Mode") else name


__all__ = [
    "PANE_EDITOR",
    "PANE_FILE_TREE",
    "CommandMode",
    "EditMode",
    "FileTreeMode",
    "FindMode",
    "ConfirmDeleteMode",
    "PromptSaveMode",
    "PromptSaveAndQuitMode",
    "PromptNewFileMode",
    "PromptNewDirectoryMode",
    "PromptRenameMode",
    "Mode",
    "MODAL_DIALOG_MODES",
    "SAVE_PROMPT_MODES",
    "is_modal_dialog",
    "is_save_prompt",
    "mode_name",
]
