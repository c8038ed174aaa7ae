"""Viewport scrolling and full-frame composition.

Every frame is rebuilt from scratch and written in one go: hide cursor,
home, text rows, status bar, message bar, cursor placement, show cursor.
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import __version__
from ..document.cursor import Cursor
from ..document.store import RowStore
from .escapes import (
    CRLF,
    CURSOR_HOME,
    ERASE_LINE,
    HIDE_CURSOR,
    SHOW_CURSOR,
    cursor_position,
)
from .status import message_bar, status_bar

EMPTY_ROW_MARKER = b"~"
WELCOME_TEMPLATE = "Lazyedit editor -- version {version}"

# Status bar and message bar sit below the text area.
RESERVED_BAR_ROWS = 2


@dataclass
class Viewport:
    """Screen size of the text area and the top-left visible render cell."""

    screen_rows: int
    screen_cols: int
    row_offset: int = 0
    col_offset: int = 0

    @classmethod
    def for_window(cls, window_rows: int, window_cols: int) -> Viewport:
        return cls(max(1, window_rows - RESERVED_BAR_ROWS), max(1, window_cols))

    def resize(self, window_rows: int, window_cols: int) -> None:
        self.screen_rows = max(1, window_rows - RESERVED_BAR_ROWS)
        self.screen_cols = max(1, window_cols)

    def scroll(self, document: RowStore, cursor: Cursor) -> None:
        """Recompute ``cursor.rx`` and snap offsets so the cursor is visible."""
        cursor.rx = 0
        if cursor.cy < document.num_rows:
            cursor.rx = document.cx_to_rx(cursor.cy, cursor.cx)

        self.row_offset = min(self.row_offset, cursor.cy)
        self.row_offset = max(self.row_offset, cursor.cy - self.screen_rows + 1)
        self.col_offset = min(self.col_offset, cursor.rx)
        self.col_offset = max(self.col_offset, cursor.rx - self.screen_cols + 1)

    def _welcome_line(self) -> bytes:
        welcome = WELCOME_TEMPLATE.format(version=__version__).encode("ascii")
        welcome = welcome[: self.screen_cols]
        padding = (self.screen_cols - len(welcome)) // 2
        out = bytearray()
        if padding:
            out += EMPTY_ROW_MARKER
            padding -= 1
        out += b" " * padding
        out += welcome
        return bytes(out)

    def draw_rows(self, document: RowStore) -> bytes:
        out = bytearray()
        for y in range(self.screen_rows):
            file_row = y + self.row_offset
            row = document.row(file_row)
            if row is None:
                if document.num_rows == 0 and y == self.screen_rows // 3:
                    out += self._welcome_line()
                else:
                    out += EMPTY_ROW_MARKER
            else:
                out += row.render[self.col_offset : self.col_offset + self.screen_cols]
            out += ERASE_LINE
            out += CRLF
        return bytes(out)

    def render(
        self,
        document: RowStore,
        cursor: Cursor,
        filename: str | None = None,
        message: str = "",
    ) -> bytes:
        """Scroll to the cursor and return the complete frame as bytes."""
        self.scroll(document, cursor)

        out = bytearray()
        out += HIDE_CURSOR
        out += CURSOR_HOME
        out += self.draw_rows(document)
        out += status_bar(
            filename,
            document.num_rows,
            bool(document.dirty),
            cursor.cy,
            self.screen_cols,
        )
        out += CRLF
        out += message_bar(message, self.screen_cols)
        out += cursor_position(
            cursor.cy - self.row_offset + 1,
            cursor.rx - self.col_offset + 1,
        )
        out += SHOW_CURSOR
        return bytes(out)
