"""Tests for exact-token key dispatch tables."""

from __future__ import annotations

import unittest

from jot.input import KeyComboBinding, KeyComboRegistry


class KeyComboRegistryTests(unittest.TestCase):
    def test_unbound_key_dispatches_to_none(self) -> None:
        registry = KeyComboRegistry()
        self.assertIsNone(registry.dispatch("UP"))
        self.assertNotIn("UP", registry)

    def test_handler_returning_none_counts_as_handled(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry().register_binding(
            KeyComboBinding(("ENTER", "TAB"), lambda: calls.append("hit")),
        )
        self.assertTrue(registry.dispatch("ENTER"))
        self.assertTrue(registry.dispatch("TAB"))
        self.assertEqual(calls, ["hit", "hit"])

    def test_handler_result_is_passed_through(self) -> None:
        registry = KeyComboRegistry().register_binding(KeyComboBinding(("UP",), lambda: False))
        self.assertIs(registry.dispatch("UP"), False)

    def test_later_binding_overrides(self) -> None:
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("ESC",), lambda: "first"),
            KeyComboBinding(("ESC",), lambda: "second"),
        )
        self.assertEqual(registry.dispatch("ESC"), "second")


if __name__ == "__main__":
    unittest.main()
