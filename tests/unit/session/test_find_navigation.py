"""Tests for incremental find and match navigation."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from jot.editor import Page
from jot.file_tree_model import build_directory_view
from jot.session import FindMode, Session
from jot.session.find import (
    append_to_query,
    backspace_query,
    commit_query,
    find_matches,
    step_match,
)


class FindMatchesTests(unittest.TestCase):
    def test_matches_are_row_major_and_left_to_right(self) -> None:
        self.assertEqual(find_matches(["foobar", "xfoo"], "foo"), [(0, 0), (1, 1)])

    def test_matches_do_not_overlap(self) -> None:
        self.assertEqual(find_matches(["aaaa"], "aa"), [(0, 0), (0, 2)])

    def test_empty_query_has_no_matches(self) -> None:
        self.assertEqual(find_matches(["abc"], ""), [])


class FindSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.session = Session(directory_view=build_directory_view(Path(self._tmp.name)))
        self.page = Page.from_text("foobar\nxfoo\nnone")
        self.session.open_tab(self.page)
        self.session.mode = FindMode()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _type(self, text: str) -> None:
        for ch in text:
            append_to_query(self.session, ch)

    def test_typing_jumps_to_first_match(self) -> None:
        self.page.move_cursor_to(2, 3)
        self._type("foo")
        self.assertEqual(self.session.find_matches, [(0, 0), (1, 1)])
        self.assertEqual((self.page.cursor_row(), self.page.cursor_column()), (0, 0))

    def test_step_wraps_in_both_directions(self) -> None:
        self._type("foo")
        commit_query(self.session)
        self.assertTrue(self.session.find_navigation_active)

        step_match(self.session, 1)
        self.assertEqual((self.page.cursor_row(), self.page.cursor_column()), (1, 1))
        step_match(self.session, 1)
        self.assertEqual((self.page.cursor_row(), self.page.cursor_column()), (0, 0))
        step_match(self.session, -1)
        self.assertEqual((self.page.cursor_row(), self.page.cursor_column()), (1, 1))

    def test_backspace_to_empty_clears_matches_and_keeps_cursor(self) -> None:
        self._type("x")
        self.assertEqual((self.page.cursor_row(), self.page.cursor_column()), (1, 0))
        backspace_query(self.session)
        self.assertEqual(self.session.find_query, "")
        self.assertEqual(self.session.find_matches, [])
        self.assertEqual((self.page.cursor_row(), self.page.cursor_column()), (1, 0))

    def test_no_matches_sets_status(self) -> None:
        self._type("zzz")
        self.assertEqual(self.session.find_matches, [])
        self.assertEqual(self.session.status_message, 'No matches for "zzz"')

    def test_typing_after_commit_leaves_navigation(self) -> None:
        self._type("fo")
        commit_query(self.session)
        append_to_query(self.session, "o")
        self.assertFalse(self.session.find_navigation_active)
        self.assertEqual(self.session.find_query, "foo")


if __name__ == "__main__":
    unittest.main()
