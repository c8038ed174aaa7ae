"""Reusable key-event dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .keys import KeyEvent


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key events to a single action callback."""

    keys: tuple[KeyEvent, ...]
    handler: Callable[[KeyEvent], bool | None]


class KeyRegistry:
    """Small key-dispatch table keyed by exact ``KeyEvent`` equality."""

    def __init__(self) -> None:
        self._handlers: dict[KeyEvent, Callable[[KeyEvent], bool | None]] = {}

    def register_binding(self, binding: KeyBinding) -> KeyRegistry:
        """Register one binding, overwriting existing handlers for same keys."""
        for key in binding.keys:
            self._handlers[key] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def __contains__(self, key: KeyEvent) -> bool:
        return key in self._handlers

    def dispatch(self, key: KeyEvent) -> bool | None:
        """Invoke bound handler for ``key`` and return its result.

        Returns ``None`` both for unbound keys and for handlers that return
        nothing; use ``in`` to tell the two apart.
        """
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler(key)
