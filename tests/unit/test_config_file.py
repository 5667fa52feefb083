"""Tests for config persistence and input sanitization.

Malformed or out-of-range values must fall back to defaults rather than
break startup.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from jot import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("jot.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write(self, text: str) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(text, encoding="utf-8")

    def test_missing_file_gives_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_tree_pane_percent())
        self.assertTrue(config.load_show_hidden())

    def test_malformed_json_gives_defaults(self) -> None:
        self.write("{not json")
        self.assertEqual(config.load_config(), {})

    def test_non_object_json_gives_defaults(self) -> None:
        self.write("[1, 2]")
        self.assertEqual(config.load_config(), {})

    def test_values_are_validated(self) -> None:
        self.write('{"theme": "", "tree_pane_percent": true, "show_hidden": "no"}')
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_tree_pane_percent())
        self.assertTrue(config.load_show_hidden())

    def test_tree_pane_percent_must_be_inside_open_interval(self) -> None:
        for raw, expected in (("0", None), ("100", None), ("33.5", 33.5), ("12", 12.0)):
            with self.subTest(raw=raw):
                self.write(f'{{"tree_pane_percent": {raw}}}')
                self.assertEqual(config.load_tree_pane_percent(), expected)

    def test_save_show_hidden_keeps_other_keys(self) -> None:
        self.write('{"theme": "ocean"}')
        config.save_show_hidden(False)
        self.assertFalse(config.load_show_hidden())
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_save_creates_parent_directory(self) -> None:
        config.save_config({"theme": "default"})
        self.assertTrue(self.config_path.is_file())

    def test_unwritable_location_is_logged_not_raised(self) -> None:
        blocker = Path(self._tmp.name) / "file"
        blocker.write_text("", encoding="utf-8")
        with mock.patch.object(config.logger, "warning") as warning:
            config.save_config({"theme": "x"}, blocker / "config.json")
        warning.assert_called_once()


if __name__ == "__main__":
    unittest.main()
