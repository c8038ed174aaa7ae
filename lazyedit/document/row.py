"""Single text row with its tab-expanded render form.

``text`` is what gets saved; ``render`` is what gets drawn. Every mutator
rebuilds ``render`` before returning so the two never drift apart.
"""

from __future__ import annotations

TAB = 0x09
DEFAULT_TAB_STOP = 8


def expand_tabs(text: bytes, tab_stop: int = DEFAULT_TAB_STOP) -> bytes:
    """Replace each tab with spaces up to the next multiple of ``tab_stop``.

    A tab always produces at least one space. Unlike ``bytes.expandtabs`` the
    column count is never reset by carriage returns.
    """
    if TAB not in text:
        return bytes(text)
    out = bytearray()
    for value in text:
        if value == TAB:
            out.append(0x20)
            while len(out) % tab_stop:
                out.append(0x20)
        else:
            out.append(value)
    return bytes(out)


def cx_to_rx(text: bytes, cx: int, tab_stop: int = DEFAULT_TAB_STOP) -> int:
    """Map logical column ``cx`` to its render column."""
    rx = 0
    for value in text[: max(0, cx)]:
        if value == TAB:
            rx += (tab_stop - 1) - (rx % tab_stop)
        rx += 1
    return rx


def rx_to_cx(text: bytes, rx: int, tab_stop: int = DEFAULT_TAB_STOP) -> int:
    """Map render column ``rx`` back to the logical column covering it.

    Returns the first ``cx`` whose cell span reaches past ``rx``, or the text
    length when ``rx`` lies beyond the rendered row.
    """
    cur_rx = 0
    for cx, value in enumerate(text):
        if value == TAB:
            cur_rx += (tab_stop - 1) - (cur_rx % tab_stop)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return len(text)


class Row:
    """Mutable row of bytes plus its derived render bytes."""

    __slots__ = ("text", "render", "tab_stop")

    def __init__(self, text: bytes = b"", tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.text = bytearray(text)
        self.tab_stop = tab_stop
        self.render = b""
        self.update()

    def __repr__(self) -> str:
        return f"Row({bytes(self.text)!r})"

    def __len__(self) -> int:
        return len(self.text)

    def update(self) -> None:
        self.render = expand_tabs(self.text, self.tab_stop)

    def cx_to_rx(self, cx: int) -> int:
        return cx_to_rx(self.text, min(cx, len(self.text)), self.tab_stop)

    def rx_to_cx(self, rx: int) -> int:
        return rx_to_cx(self.text, rx, self.tab_stop)

    def insert(self, at: int, value: int) -> None:
        if at < 0 or at > len(self.text):
            at = len(self.text)
        self.text.insert(at, value)
        self.update()

    def delete(self, at: int) -> bool:
        if at < 0 or at >= len(self.text):
            return False
        del self.text[at]
        self.update()
        return True

    def append(self, suffix: bytes) -> None:
        self.text.extend(suffix)
        self.update()

    def truncate(self, length: int) -> bytes:
        """Cut the row at ``length`` and return the removed tail."""
        length = max(0, min(length, len(self.text)))
        tail = bytes(self.text[length:])
        del self.text[length:]
        self.update()
        return tail
