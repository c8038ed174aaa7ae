"""Incremental find over the document's render rows.

The controller is fed the current query after every prompt keystroke. Arrow
keys step to the next/previous match; any other key restarts the scan from
the top with the edited query.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..document.cursor import Cursor
from ..document.store import RowStore
from ..input.keys import ENTER, Key, KeyEvent
from ..render.viewport import Viewport

FORWARD = 1
BACKWARD = -1

_FORWARD_KEYS = (Key.ARROW_RIGHT, Key.ARROW_DOWN)
_BACKWARD_KEYS = (Key.ARROW_LEFT, Key.ARROW_UP)


@dataclass(frozen=True)
class SearchSnapshot:
    """Cursor and viewport offsets captured when a search starts."""

    cx: int
    cy: int
    row_offset: int
    col_offset: int


class SearchController:
    """Stateful replacement for a per-keystroke search callback."""

    def __init__(self, document: RowStore, cursor: Cursor, viewport: Viewport) -> None:
        self.document = document
        self.cursor = cursor
        self.viewport = viewport
        self.last_match: int | None = None
        self.direction = FORWARD
        self.snapshot: SearchSnapshot | None = None

    def reset(self) -> None:
        self.last_match = None
        self.direction = FORWARD

    def begin(self) -> None:
        """Start a session, remembering where to go back to on cancel."""
        self.reset()
        self.snapshot = SearchSnapshot(
            cx=self.cursor.cx,
            cy=self.cursor.cy,
            row_offset=self.viewport.row_offset,
            col_offset=self.viewport.col_offset,
        )

    def cancel(self) -> None:
        """Restore the cursor and offsets captured by ``begin``."""
        snap = self.snapshot
        if snap is not None:
            self.cursor.cx = snap.cx
            self.cursor.cy = snap.cy
            self.viewport.row_offset = snap.row_offset
            self.viewport.col_offset = snap.col_offset
        self.snapshot = None
        self.reset()

    def on_keystroke(self, query: bytes, key: KeyEvent) -> bool:
        """Advance the search for ``query`` after ``key``.

        Returns ``True`` when the cursor moved to a match.
        """
        if key == ENTER or key.key is Key.ESCAPE:
            self.reset()
            return False
        if key.key in _FORWARD_KEYS:
            self.direction = FORWARD
        elif key.key in _BACKWARD_KEYS:
            self.direction = BACKWARD
        else:
            self.reset()

        if self.last_match is None:
            self.direction = FORWARD
        if not query:
            return False

        num_rows = self.document.num_rows
        current = self.last_match if self.last_match is not None else -1
        for _ in range(num_rows):
            current += self.direction
            if current == -1:
                current = num_rows - 1
            elif current == num_rows:
                current = 0

            row = self.document.rows[current]
            offset = row.render.find(query)
            if offset != -1:
                self.last_match = current
                self.cursor.cy = current
                self.cursor.cx = row.rx_to_cx(offset)
                # Past-the-end offset makes the next scroll put the match on top.
                self.viewport.row_offset = num_rows
                return True
        return False
