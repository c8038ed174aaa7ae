"""Typed key events produced by the raw-input decoder.

Plain bytes (including control bytes) travel as ``Key.CHAR`` events; every
named key gets its own variant, so there is no overlapping integer range.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ESC_BYTE = 0x1B
BACKSPACE_BYTE = 0x7F


class Key(Enum):
    """Variants of a decoded key event."""

    CHAR = "char"
    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    DELETE = "delete"
    BACKSPACE = "backspace"
    ESCAPE = "escape"


@dataclass(frozen=True)
class KeyEvent:
    """One logical key press; ``byte`` is only meaningful for ``Key.CHAR``."""

    key: Key
    byte: int = 0

    @classmethod
    def char(cls, value: int) -> KeyEvent:
        return cls(Key.CHAR, value & 0xFF)

    @property
    def is_char(self) -> bool:
        return self.key is Key.CHAR

    @property
    def is_control(self) -> bool:
        """True for C0 control bytes (Ctrl+letter, Enter, Tab, ...)."""
        return self.key is Key.CHAR and self.byte < 0x20

    @property
    def is_printable_ascii(self) -> bool:
        return self.key is Key.CHAR and 0x20 <= self.byte < BACKSPACE_BYTE


def ctrl_key(letter: str) -> KeyEvent:
    """Return the event a terminal sends for Ctrl+``letter``."""
    return KeyEvent.char(ord(letter) & 0x1F)


ENTER = KeyEvent.char(ord("\r"))
TAB = KeyEvent.char(ord("\t"))
ESCAPE = KeyEvent(Key.ESCAPE)
BACKSPACE = KeyEvent(Key.BACKSPACE)
DELETE = KeyEvent(Key.DELETE)
ARROW_UP = KeyEvent(Key.ARROW_UP)
ARROW_DOWN = KeyEvent(Key.ARROW_DOWN)
ARROW_LEFT = KeyEvent(Key.ARROW_LEFT)
ARROW_RIGHT = KeyEvent(Key.ARROW_RIGHT)
HOME = KeyEvent(Key.HOME)
END = KeyEvent(Key.END)
PAGE_UP = KeyEvent(Key.PAGE_UP)
PAGE_DOWN = KeyEvent(Key.PAGE_DOWN)
