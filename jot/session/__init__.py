"""Editor session: state, modes, command grammars and the input dispatcher."""

from .app import App
from .modes import (
    PANE_EDITOR,
    PANE_FILE_TREE,
    CommandMode,
    ConfirmDeleteMode,
    EditMode,
    FileTreeMode,
    FindMode,
    Mode,
    PromptNewDirectoryMode,
    PromptNewFileMode,
    PromptRenameMode,
    PromptSaveAndQuitMode,
    PromptSaveMode,
    mode_name,
)
from .state import Session

__all__ = [
    "App",
    "CommandMode",
    "ConfirmDeleteMode",
    "EditMode",
    "FileTreeMode",
    "FindMode",
    "Mode",
    "PANE_EDITOR",
    "PANE_FILE_TREE",
    "PromptNewDirectoryMode",
    "PromptNewFileMode",
    "PromptRenameMode",
    "PromptSaveAndQuitMode",
    "PromptSaveMode",
    "Session",
    "mode_name",
]
