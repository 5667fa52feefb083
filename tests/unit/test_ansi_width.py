"""Tests for ANSI-aware width measurement and clipping."""

from __future__ import annotations

import unittest

from jot.ansi import (
    char_display_width,
    clip_ansi_line,
    column_at_cell,
    display_width,
    fit_ansi_line,
    rendered_char_width,
    rendered_width,
    sanitize_terminal_text,
)


class DisplayWidthTests(unittest.TestCase):
    def test_tabs_advance_to_next_stop(self) -> None:
        self.assertEqual(char_display_width("\t", 0), 8)
        self.assertEqual(char_display_width("\t", 5), 3)

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(char_display_width("日", 0), 2)
        self.assertEqual(char_display_width("\u0301", 0), 0)

    def test_escapes_do_not_count(self) -> None:
        self.assertEqual(display_width("\033[1mab\033[0m"), 2)


class ClipTests(unittest.TestCase):
    def test_clip_keeps_escapes(self) -> None:
        self.assertEqual(clip_ansi_line("\033[1mabcdef\033[0m", 3), "\033[1mabc")

    def test_clip_stops_before_partial_wide_character(self) -> None:
        self.assertEqual(clip_ansi_line("a日b", 2), "a")

    def test_fit_pads_to_width(self) -> None:
        self.assertEqual(fit_ansi_line("ab", 5), "ab   ")
        self.assertEqual(fit_ansi_line("abcdef", 3), "abc")

    def test_zero_width(self) -> None:
        self.assertEqual(clip_ansi_line("abc", 0), "")
        self.assertEqual(fit_ansi_line("abc", 0), "")


class ControlCharacterTests(unittest.TestCase):
    def test_sanitize_escapes_c0_del_and_c1(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x1b[2Jb"), "a\\x1b[2Jb")
        self.assertEqual(sanitize_terminal_text("x\x07\x7f\x9b"), "x\\x07\\x7f\\x9b")
        self.assertEqual(sanitize_terminal_text("tab\there\n"), "tab\\x09here\\x0a")

    def test_sanitize_leaves_printable_text_alone(self) -> None:
        self.assertEqual(sanitize_terminal_text("notes 日本.txt"), "notes 日本.txt")

    def test_rendered_width_counts_escapes_and_tab_stops(self) -> None:
        self.assertEqual(rendered_char_width("\x1b", 3), 4)
        self.assertEqual(rendered_char_width("\t", 3), 5)
        self.assertEqual(rendered_width("\tfoo"), 11)
        self.assertEqual(rendered_width("日本"), 4)


class ColumnAtCellTests(unittest.TestCase):
    def test_cells_inside_a_tab_map_to_the_tab(self) -> None:
        self.assertEqual(column_at_cell("\tfoo", 0), 0)
        self.assertEqual(column_at_cell("\tfoo", 7), 0)
        self.assertEqual(column_at_cell("\tfoo", 8), 1)
        self.assertEqual(column_at_cell("\tfoo", 10), 3)

    def test_both_cells_of_a_wide_character_map_to_it(self) -> None:
        self.assertEqual(column_at_cell("日本語", 2), 1)
        self.assertEqual(column_at_cell("日本語", 3), 1)
        self.assertEqual(column_at_cell("日本語", 4), 2)

    def test_cells_past_the_end_map_to_line_length(self) -> None:
        self.assertEqual(column_at_cell("ab", 9), 2)
        self.assertEqual(column_at_cell("", 0), 0)


if __name__ == "__main__":
    unittest.main()
