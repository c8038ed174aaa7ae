"""VT100 escape sequences written to the terminal."""

from __future__ import annotations

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
ERASE_LINE = b"\x1b[K"
REVERSE_ON = b"\x1b[7m"
REVERSE_OFF = b"\x1b[m"
CLEAR_SCREEN = b"\x1b[2J"
CRLF = b"\r\n"


def cursor_position(row: int, col: int) -> bytes:
    """Move the cursor to 1-based ``row``/``col``."""
    return f"\x1b[{row};{col}H".encode("ascii")
