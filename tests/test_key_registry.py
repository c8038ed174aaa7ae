"""Tests for the key-event dispatch table."""

from __future__ import annotations

import unittest

from lazyedit.input.key_registry import KeyBinding, KeyRegistry
from lazyedit.input.keys import ARROW_UP, HOME, KeyEvent, ctrl_key


class KeyRegistryTests(unittest.TestCase):
    def test_dispatch_passes_key_and_returns_result(self) -> None:
        seen: list[KeyEvent] = []

        def handler(key: KeyEvent) -> bool:
            seen.append(key)
            return True

        registry = KeyRegistry().register_bindings(KeyBinding((ARROW_UP, HOME), handler))
        self.assertTrue(registry.dispatch(HOME))
        self.assertEqual(seen, [HOME])
        self.assertIn(ARROW_UP, registry)

    def test_unbound_key_returns_none(self) -> None:
        registry = KeyRegistry()
        self.assertNotIn(ctrl_key("x"), registry)
        self.assertIsNone(registry.dispatch(ctrl_key("x")))

    def test_later_binding_overrides(self) -> None:
        registry = KeyRegistry()
        registry.register_binding(KeyBinding((HOME,), lambda key: False))
        registry.register_binding(KeyBinding((HOME,), lambda key: True))
        self.assertTrue(registry.dispatch(HOME))


if __name__ == "__main__":
    unittest.main()
