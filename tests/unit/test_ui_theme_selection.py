"""Tests for theme lookup and the no-color fallback."""

from __future__ import annotations

import unittest

from jot.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_names_are_case_insensitive(self) -> None:
        self.assertEqual(normalize_theme_name("  Ocean "), "ocean")

    def test_unknown_or_missing_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name("neon"), "default")
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertIs(resolve_theme("neon"), DEFAULT_THEME)

    def test_no_color_wins_over_name(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)

    def test_plain_theme_is_not_selectable_by_name(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))


if __name__ == "__main__":
    unittest.main()
