"""Terminal control helpers for the editor session.

Owns raw-mode lifecycle, alternate-screen switching, window-size queries,
and frame output. Failures here mean the tty is unusable and are fatal.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
import select
import termios
import tty

logger = logging.getLogger(__name__)

# Read returns after 100 ms even with no input (VTIME is in deciseconds).
READ_TIMEOUT_DECISECONDS = 1
CURSOR_REPORT_TIMEOUT_SECONDS = 0.5
_CURSOR_REPORT_RE = re.compile(rb"\x1b\[(\d+);(\d+)R")


class TerminalError(RuntimeError):
    """The controlling terminal could not be queried or configured."""


class TerminalController:
    """Manage terminal mode transitions and raw byte output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"tcgetattr: {exc}") from exc
        self._last_size: tuple[int, int] | None = None

    def enable_raw_mode(self) -> None:
        """Enter raw alternate-screen mode with a short polling read timeout."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            attrs = termios.tcgetattr(self.stdin_fd)
            attrs[6][termios.VMIN] = 0
            attrs[6][termios.VTIME] = READ_TIMEOUT_DECISECONDS
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, attrs)
        except termios.error as exc:
            raise TerminalError(f"tcsetattr: {exc}") from exc
        # Enter alternate screen.
        os.write(self.stdout_fd, b"\x1b[?1049h")

    def disable_raw_mode(self) -> None:
        """Restore the main screen buffer and the saved tty attributes."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            logger.warning("could not restore terminal attributes: %s", exc)

    def write(self, data: bytes) -> None:
        """Write ``data`` fully, looping over partial writes."""
        view = memoryview(data)
        while view:
            try:
                written = os.write(self.stdout_fd, view)
            except OSError as exc:
                raise TerminalError(f"write: {exc}") from exc
            view = view[written:]

    def clear_screen(self) -> None:
        self.write(b"\x1b[2J\x1b[H")

    def window_size(self) -> tuple[int, int]:
        """Return ``(rows, cols)`` of the terminal window.

        The cursor-report fallback runs only until a size is known; later
        ioctl failures reuse that size so typed keys are never consumed.
        """
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = None
        if size is not None and size.columns > 0:
            self._last_size = (size.lines, size.columns)
            return self._last_size
        if self._last_size is not None:
            return self._last_size
        logger.debug("terminal size ioctl failed, probing cursor position")
        self.write(b"\x1b[999C\x1b[999B")
        self._last_size = self.cursor_position()
        return self._last_size

    def cursor_position(self) -> tuple[int, int]:
        """Ask the terminal where the cursor is and parse the ``ESC[r;cR`` reply."""
        self.write(b"\x1b[6n")
        buf = bytearray()
        while len(buf) < 32:
            ready, _, _ = select.select([self.stdin_fd], [], [], CURSOR_REPORT_TIMEOUT_SECONDS)
            if not ready:
                break
            try:
                ch = os.read(self.stdin_fd, 1)
            except OSError as exc:
                raise TerminalError(f"read: {exc}") from exc
            if not ch:
                break
            buf += ch
            if ch == b"R":
                break
        match = _CURSOR_REPORT_RE.search(bytes(buf))
        if match is None:
            raise TerminalError("getWindowSize: no cursor position report")
        return int(match.group(1)), int(match.group(2))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/exit calls."""
        try:
            self.enable_raw_mode()
            yield
        finally:
            self.disable_raw_mode()
