"""Tests for session tab bookkeeping, focus helpers and directory refresh."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from jot.editor import Page
from jot.file_tree_model import build_directory_view
from jot.session import (
    PANE_EDITOR,
    PANE_FILE_TREE,
    CommandMode,
    ConfirmDeleteMode,
    EditMode,
    FileTreeMode,
    PromptRenameMode,
    Session,
    mode_name,
)


def _session(root: Path) -> Session:
    return Session(directory_view=build_directory_view(root))


class SessionTabTests(unittest.TestCase):
    def test_new_session_starts_in_file_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = _session(Path(tmp))
            self.assertEqual(session.tabs, [])
            self.assertEqual(session.active_pane, PANE_FILE_TREE)
            self.assertIsInstance(session.mode, FileTreeMode)
            self.assertIsNone(session.active_page())

    def test_open_path_reuses_existing_tab(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            session = _session(root)
            first = session.open_path(root / "a.txt")
            session.open_path(root / "b.txt")
            again = session.open_path(root / "a.txt")

            self.assertEqual(first, again)
            self.assertEqual(len(session.tabs), 2)
            self.assertEqual(session.active_tab_index, 0)

    def test_close_tab_before_active_shifts_active_index(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = _session(Path(tmp))
            for name in ("a", "b", "c"):
                session.open_tab(Page(Path(tmp) / name))
            session.select_tab(2)

            self.assertTrue(session.close_tab(0))

            self.assertEqual(session.active_tab_index, 1)
            self.assertEqual(session.active_page().display_name(), "c")

    def test_close_last_tab_clamps_active_index(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = _session(Path(tmp))
            for name in ("a", "b"):
                session.open_tab(Page(Path(tmp) / name))

            session.close_tab()
            self.assertEqual(session.active_tab_index, 0)
            session.close_tab()
            self.assertEqual(session.tabs, [])
            self.assertEqual(session.active_tab_index, 0)
            self.assertFalse(session.close_tab())

    def test_pending_paths_derive_from_mode(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = _session(Path(tmp))
            target = Path(tmp) / "x"
            self.assertIsNone(session.path_to_delete)
            session.mode = ConfirmDeleteMode(target)
            self.assertEqual(session.path_to_delete, target)
            self.assertIsNone(session.path_to_rename)
            session.mode = PromptRenameMode(target)
            self.assertEqual(session.path_to_rename, target)
            self.assertIsNone(session.path_to_delete)
            self.assertEqual(mode_name(session.mode), "PromptRename")


class SessionFocusTests(unittest.TestCase):
    def test_focus_editor_picks_edit_only_with_tabs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = _session(Path(tmp))
            session.command_buffer = "junk"
            session.focus_editor()
            self.assertEqual(session.active_pane, PANE_EDITOR)
            self.assertIsInstance(session.mode, CommandMode)
            self.assertEqual(session.command_buffer, "")

            session.open_tab(Page())
            session.focus_editor()
            self.assertIsInstance(session.mode, EditMode)

    def test_refresh_directory_failure_keeps_snapshot_and_reports(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            session = _session(root)

            self.assertFalse(session.refresh_directory(root / "missing"))

            self.assertEqual(session.current_directory, root)
            self.assertTrue(session.status_message.startswith("Cannot list directory: "))

    def test_refresh_directory_failure_keeps_existing_status(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            session = _session(root)
            session.status_message = "Deleted x"

            session.refresh_directory(root / "missing")

            self.assertEqual(session.status_message, "Deleted x")


if __name__ == "__main__":
    unittest.main()
