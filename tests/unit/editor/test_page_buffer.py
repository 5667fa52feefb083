"""Tests for the page buffer: navigation, split/merge and file persistence."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from jot.editor import Page


def _type(page: Page, text: str) -> None:
    for ch in text:
        page.insert(ch)


class PageNavigationTests(unittest.TestCase):
    def test_empty_page_has_one_empty_line(self) -> None:
        page = Page()
        self.assertTrue(page.is_empty())
        self.assertEqual(page.all_lines(), [""])
        self.assertEqual(page.cursor_row(), 0)

    def test_load_from_text_splits_on_newlines_and_keeps_trailing_line(self) -> None:
        page = Page.from_text("one\ntwo\n")
        self.assertEqual(page.all_lines(), ["one", "two", ""])
        self.assertEqual(page.text(), "one\ntwo\n")
        self.assertEqual((page.cursor_row(), page.cursor_column()), (0, 0))

    def test_load_from_text_replaces_previous_document(self) -> None:
        page = Page.from_text("a\nb\nc")
        page.move_down()
        page.load_from_text("x\ny")
        self.assertEqual(page.all_lines(), ["x", "y"])
        self.assertEqual(page.cursor_row(), 0)
        self.assertFalse(page.modified)

    def test_vertical_moves_preserve_column_clamped_to_line(self) -> None:
        page = Page.from_text("long line\nab\nanother long")
        page.move_cursor_to(0, 6)
        page.move_down()
        self.assertEqual((page.cursor_row(), page.cursor_column()), (1, 2))
        page.move_down()
        self.assertEqual((page.cursor_row(), page.cursor_column()), (2, 2))
        page.move_up()
        page.move_up()
        self.assertEqual((page.cursor_row(), page.cursor_column()), (0, 2))
        page.move_up()
        self.assertEqual(page.cursor_row(), 0)

    def test_move_cursor_to_clamps_row_and_column(self) -> None:
        page = Page.from_text("abc\nde")
        page.move_cursor_to(10, 10)
        self.assertEqual((page.cursor_row(), page.cursor_column()), (1, 2))
        page.move_cursor_to(-3, -3)
        self.assertEqual((page.cursor_row(), page.cursor_column()), (0, 0))

    def test_move_cursor_to_keeps_document_intact(self) -> None:
        lines = ["first", "", "third line", "4"]
        page = Page.from_text("\n".join(lines))
        for row, line in enumerate(lines):
            for column in range(len(line) + 1):
                page.move_cursor_to(row, column)
                self.assertEqual(page.all_lines(), lines)
                self.assertEqual(page.cursor_row(), row)
                self.assertEqual(page.cursor_column(), column)

    def test_line_start_and_end(self) -> None:
        page = Page.from_text("hello")
        page.move_line_end()
        self.assertEqual(page.cursor_column(), 5)
        page.move_line_start()
        self.assertEqual(page.cursor_column(), 0)


class PageEditingTests(unittest.TestCase):
    def test_insert_newline_splits_line_and_moves_to_next_line_start(self) -> None:
        page = Page.from_text("helloworld\nnext")
        page.move_cursor_to(0, 5)
        page.insert_newline()

        self.assertEqual(page.all_lines(), ["hello", "world", "next"])
        self.assertEqual((page.cursor_row(), page.cursor_column()), (1, 0))
        self.assertTrue(page.modified)

    def test_newline_then_backspace_restores_original_line(self) -> None:
        original = "split me here"
        for column in range(len(original) + 1):
            page = Page.from_text(original)
            page.move_cursor_to(0, column)
            page.insert_newline()
            page.delete()
            self.assertEqual(page.all_lines(), [original])
            self.assertEqual(page.cursor_column(), column)

    def test_backspace_at_column_zero_merges_with_previous_line(self) -> None:
        page = Page.from_text("abc\ndef")
        page.move_cursor_to(1, 0)
        page.delete()
        self.assertEqual(page.all_lines(), ["abcdef"])
        self.assertEqual((page.cursor_row(), page.cursor_column()), (0, 3))

    def test_backspace_at_document_start_is_noop(self) -> None:
        page = Page.from_text("abc")
        page.delete()
        self.assertEqual(page.all_lines(), ["abc"])
        self.assertFalse(page.modified)

    def test_delete_forward_joins_next_line_at_end_of_line(self) -> None:
        page = Page.from_text("abc\ndef")
        page.move_line_end()
        page.delete_forward()
        self.assertEqual(page.all_lines(), ["abcdef"])
        self.assertEqual(page.cursor_column(), 3)

    def test_typing_sets_modified(self) -> None:
        page = Page()
        _type(page, "hi")
        self.assertEqual(page.all_lines(), ["hi"])
        self.assertTrue(page.modified)


class PagePersistenceTests(unittest.TestCase):
    def test_save_then_load_round_trips_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "doc.txt"
            page = Page.from_text("alpha\n\nbeta\n")
            saved = page.save(target)

            self.assertEqual(saved, target)
            self.assertEqual(page.file_path, target)
            self.assertFalse(page.modified)
            self.assertEqual(target.read_text(encoding="utf-8"), "alpha\n\nbeta\n")
            self.assertEqual(Page.from_file(target).all_lines(), page.all_lines())

    def test_save_without_path_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Page().save()

    def test_save_failure_keeps_previous_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            page = Page.from_text("x", Path(tmp) / "keep.txt")
            with self.assertRaises(OSError):
                page.save(Path(tmp) / "missing" / "dir" / "file.txt")
            self.assertEqual(page.file_path, Path(tmp) / "keep.txt")

    def test_missing_file_opens_empty_buffer_bound_to_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "new.txt"
            page = Page.from_file(target)
            self.assertTrue(page.is_empty())
            self.assertEqual(page.file_path, target)

    def test_undecodable_file_opens_empty_buffer(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "binary.bin"
            target.write_bytes(b"\xff\xfe\x00bad")
            page = Page.from_file(target)
            self.assertTrue(page.is_empty())

    def test_revert_discards_unsaved_edits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "doc.txt"
            target.write_text("saved", encoding="utf-8")
            page = Page.from_file(target)
            _type(page, "junk ")
            page.revert()
            self.assertEqual(page.all_lines(), ["saved"])
            self.assertFalse(page.modified)

    def test_revert_without_path_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Page.from_text("x").revert()

    def test_display_name(self) -> None:
        self.assertEqual(Page().display_name(), "[No Name]")
        self.assertEqual(Page(Path("/tmp/notes.txt")).display_name(), "notes.txt")


if __name__ == "__main__":
    unittest.main()
