"""Low-level terminal input decoding.

Reads raw bytes from the tty and translates them into ``KeyEvent`` values.
Escape sequences are resolved with the bytes available within a short
timeout; nothing is carried over between calls.
"""

from __future__ import annotations

import logging
import os
import select

from ..runtime.terminal import TerminalError
from .keys import BACKSPACE_BYTE, ESC_BYTE, Key, KeyEvent

logger = logging.getLogger(__name__)

ESC_SEQUENCE_TIMEOUT_MS = 25
POLL_TIMEOUT_MS = 100

_CSI_LETTER_KEYS = {
    b"A": Key.ARROW_UP,
    b"B": Key.ARROW_DOWN,
    b"C": Key.ARROW_RIGHT,
    b"D": Key.ARROW_LEFT,
    b"H": Key.HOME,
    b"F": Key.END,
}

_CSI_TILDE_KEYS = {
    b"1": Key.HOME,
    b"3": Key.DELETE,
    b"4": Key.END,
    b"5": Key.PAGE_UP,
    b"6": Key.PAGE_DOWN,
    b"7": Key.HOME,
    b"8": Key.END,
}

_SS3_KEYS = {
    b"H": Key.HOME,
    b"F": Key.END,
}


class KeyDecoder:
    """Turn a raw byte stream on ``fd`` into typed key events."""

    def __init__(
        self,
        fd: int,
        poll_timeout_ms: int = POLL_TIMEOUT_MS,
        escape_timeout_ms: int = ESC_SEQUENCE_TIMEOUT_MS,
    ) -> None:
        self.fd = fd
        self.poll_timeout_ms = poll_timeout_ms
        self.escape_timeout_ms = escape_timeout_ms

    def _read_ready_byte(self, timeout_ms: int) -> bytes | None:
        """Read one byte if it arrives within ``timeout_ms``, else ``None``."""
        try:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None
            ch = os.read(self.fd, 1)
        except BlockingIOError:
            return None
        except OSError as exc:
            raise TerminalError(f"read: {exc}") from exc
        if not ch:
            return None
        return ch

    def next_key(self) -> KeyEvent | None:
        """Decode one key, or return ``None`` when no byte arrived in time.

        A zero-byte read is not an error: the caller simply polls again.
        """
        ch = self._read_ready_byte(self.poll_timeout_ms)
        if ch is None:
            return None
        value = ch[0]
        if value == BACKSPACE_BYTE:
            return KeyEvent(Key.BACKSPACE)
        if value != ESC_BYTE:
            return KeyEvent.char(value)
        return self._decode_escape()

    def _decode_escape(self) -> KeyEvent:
        """Resolve the bytes following ESC; anything unknown is a plain Escape."""
        first = self._read_ready_byte(self.escape_timeout_ms)
        if first is None:
            return KeyEvent(Key.ESCAPE)
        second = self._read_ready_byte(self.escape_timeout_ms)
        if second is None:
            logger.debug("incomplete escape sequence: %r", first)
            return KeyEvent(Key.ESCAPE)

        if first == b"[":
            if second.isdigit():
                third = self._read_ready_byte(self.escape_timeout_ms)
                if third == b"~" and second in _CSI_TILDE_KEYS:
                    return KeyEvent(_CSI_TILDE_KEYS[second])
            elif second in _CSI_LETTER_KEYS:
                return KeyEvent(_CSI_LETTER_KEYS[second])
        elif first == b"O" and second in _SS3_KEYS:
            return KeyEvent(_SS3_KEYS[second])

        logger.debug("unrecognized escape sequence after %r %r", first, second)
        return KeyEvent(Key.ESCAPE)
