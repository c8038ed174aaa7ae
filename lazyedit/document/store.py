"""Ordered row storage for the document being edited.

All operations treat out-of-range rows and columns as no-ops or clamp them;
the interactive loop never sees an exception from here.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .row import DEFAULT_TAB_STOP, Row

LINE_TERMINATOR = b"\n"


class RowStore:
    """The document: a list of ``Row`` objects plus an unsaved-change counter."""

    def __init__(self, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.tab_stop = tab_stop
        self.rows: list[Row] = []
        self.dirty = 0

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def row(self, at: int) -> Row | None:
        if 0 <= at < len(self.rows):
            return self.rows[at]
        return None

    def row_length(self, at: int) -> int:
        """Length of row ``at``; the virtual trailing line has length 0."""
        row = self.row(at)
        return len(row) if row is not None else 0

    def mark_clean(self) -> None:
        self.dirty = 0

    def load(self, lines: Iterable[bytes]) -> None:
        """Replace the contents with ``lines`` and reset ``dirty``."""
        self.rows = []
        for line in lines:
            self.insert_row(len(self.rows), line)
        self.mark_clean()

    def insert_row(self, at: int, text: bytes = b"") -> None:
        if at < 0 or at > len(self.rows):
            return
        self.rows.insert(at, Row(text, self.tab_stop))
        self.dirty += 1

    def delete_row(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty += 1

    def insert_char(self, row_idx: int, at: int, value: int) -> None:
        row = self.row(row_idx)
        if row is None:
            return
        row.insert(at, value)
        self.dirty += 1

    def delete_char(self, row_idx: int, at: int) -> None:
        row = self.row(row_idx)
        if row is None:
            return
        if row.delete(at):
            self.dirty += 1

    def append_string(self, row_idx: int, suffix: bytes) -> None:
        row = self.row(row_idx)
        if row is None:
            return
        row.append(suffix)
        self.dirty += 1

    def split_line(self, cy: int, cx: int) -> None:
        """Break row ``cy`` at ``cx`` the way Enter does.

        At column 0 an empty row is inserted above; otherwise the tail after
        ``cx`` moves to a new row below.
        """
        if cx <= 0:
            self.insert_row(cy, b"")
            return
        row = self.row(cy)
        if row is None:
            return
        tail = row.truncate(cx)
        self.insert_row(cy + 1, tail)

    def join_with_previous(self, cy: int) -> int | None:
        """Append row ``cy`` onto row ``cy - 1`` and drop row ``cy``.

        Returns the column in the previous row where the joined text starts,
        or ``None`` when there is no previous row to join onto.
        """
        if cy <= 0 or cy >= len(self.rows):
            return None
        join_at = len(self.rows[cy - 1])
        self.append_string(cy - 1, bytes(self.rows[cy].text))
        self.delete_row(cy)
        return join_at

    def cx_to_rx(self, row_idx: int, cx: int) -> int:
        row = self.row(row_idx)
        return row.cx_to_rx(cx) if row is not None else 0

    def rx_to_cx(self, row_idx: int, rx: int) -> int:
        row = self.row(row_idx)
        return row.rx_to_cx(rx) if row is not None else 0

    def to_persistable_text(self) -> bytes:
        """Return every row followed by a line terminator, ready for saving."""
        out = bytearray()
        for row in self.rows:
            out += row.text
            out += LINE_TERMINATOR
        return bytes(out)
