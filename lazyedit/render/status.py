"""Status bar and message bar composition.

Both bars are built as raw bytes clipped to the screen width; the frame
builder in ``viewport`` only concatenates them.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from .escapes import ERASE_LINE, REVERSE_OFF, REVERSE_ON

DEFAULT_MESSAGE_TIMEOUT_SECONDS = 5.0
NO_NAME = "[No Name]"
FILENAME_DISPLAY_LIMIT = 20


@dataclass
class StatusMessage:
    """Most recent message-bar text and the time it was set."""

    text: str = ""
    set_at: float = 0.0
    timeout_seconds: float = DEFAULT_MESSAGE_TIMEOUT_SECONDS

    def set(self, text: str, now: float | None = None) -> None:
        self.text = text
        self.set_at = time.time() if now is None else now

    def visible_text(self, now: float | None = None) -> str:
        """Return the message while it is still fresh, otherwise ``""``."""
        if not self.text:
            return ""
        current = time.time() if now is None else now
        if current - self.set_at < self.timeout_seconds:
            return self.text
        return ""


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="replace")


def status_bar(
    filename: str | None,
    num_rows: int,
    dirty: bool,
    cy: int,
    screen_cols: int,
) -> bytes:
    """Reverse-video bar: name/line count/modified on the left, ``row/total`` right."""
    name = (filename or NO_NAME)[:FILENAME_DISPLAY_LIMIT]
    left = _encode(f"{name} - {num_rows} lines {'(modified)' if dirty else ''}")
    right = _encode(f"{cy + 1}/{num_rows}")
    left = left[: max(0, screen_cols)]

    out = bytearray(REVERSE_ON)
    out += left
    length = len(left)
    while length < screen_cols:
        if screen_cols - length == len(right):
            out += right
            break
        out += b" "
        length += 1
    out += REVERSE_OFF
    return bytes(out)


def message_bar(message: str, screen_cols: int) -> bytes:
    return ERASE_LINE + _encode(message)[: max(0, screen_cols)]
