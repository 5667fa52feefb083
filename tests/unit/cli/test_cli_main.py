"""CLI argument handling tests.

Verifies how ``jot.cli.main`` resolves the file argument and forwards
options to the editor runtime, and that logging is always torn down.
"""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from jot import cli


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        for target, name in (
            ("jot.cli.setup_logging", "setup_logging"),
            ("jot.cli.teardown_logging", "teardown_logging"),
            ("jot.cli.load_theme_name", "load_theme_name"),
        ):
            patcher = mock.patch(target)
            setattr(self, name, patcher.start())
            self.addCleanup(patcher.stop)
        self.load_theme_name.return_value = None

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_no_path_starts_without_file(self) -> None:
        with mock.patch("jot.cli.run_editor") as run_editor:
            cli.main([])

        run_editor.assert_called_once_with(
            None,
            theme_name=None,
            no_color=False,
            show_hidden=None,
            capture_mouse=True,
        )
        self.teardown_logging.assert_called_once()

    def test_file_argument_is_resolved(self) -> None:
        target = self.root / "new.txt"
        with mock.patch("jot.cli.run_editor") as run_editor:
            cli.main([str(target)])
        self.assertEqual(run_editor.call_args.args[0], target)

    def test_directory_argument_is_rejected(self) -> None:
        with mock.patch("jot.cli.run_editor") as run_editor:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(self.root)])
        run_editor.assert_not_called()
        self.assertEqual(str(ctx.exception), f"Not a file: {self.root}")

    def test_options_are_forwarded(self) -> None:
        with mock.patch("jot.cli.run_editor") as run_editor:
            cli.main(["--theme", "ocean", "--no-color", "--hide-hidden", "--no-mouse"])
        kwargs = run_editor.call_args.kwargs
        self.assertEqual(kwargs["theme_name"], "ocean")
        self.assertTrue(kwargs["no_color"])
        self.assertIs(kwargs["show_hidden"], False)
        self.assertIs(kwargs["capture_mouse"], False)
        self.load_theme_name.assert_not_called()

    def test_theme_falls_back_to_config(self) -> None:
        self.load_theme_name.return_value = "ocean"
        with mock.patch("jot.cli.run_editor") as run_editor:
            cli.main([])
        self.assertEqual(run_editor.call_args.kwargs["theme_name"], "ocean")

    def test_log_options_configure_logging(self) -> None:
        log_file = self.root / "jot.log"
        with mock.patch("jot.cli.run_editor"):
            cli.main(["--log-file", str(log_file), "--log-level", "debug"])
        self.setup_logging.assert_called_once_with(log_file, level=logging.DEBUG)

    def test_logging_is_torn_down_when_editor_fails(self) -> None:
        with mock.patch("jot.cli.run_editor", side_effect=SystemExit("jot needs an interactive terminal.")):
            with self.assertRaises(SystemExit):
                cli.main([])
        self.teardown_logging.assert_called_once()


if __name__ == "__main__":
    unittest.main()
