"""Modal one-line input shown in the message bar.

While a prompt is open every key goes to it. ``on_key`` sees each key
after the buffer has been updated (including the final Enter/Escape) and
``on_done`` receives the accepted text, or ``None`` when cancelled.
"""

from __future__ import annotations

from collections.abc import Callable

from ..input.keys import ENTER, Key, KeyEvent, ctrl_key

_ERASE_KEYS = (KeyEvent(Key.BACKSPACE), KeyEvent(Key.DELETE), ctrl_key("h"))


class Prompt:
    """Line editor for ``Save as`` and ``Search`` style questions."""

    def __init__(
        self,
        template: str,
        on_done: Callable[[bytes | None], None],
        on_key: Callable[[bytes, KeyEvent], object] | None = None,
    ) -> None:
        self.template = template
        self.on_done = on_done
        self.on_key = on_key
        self.buffer = bytearray()

    def message(self) -> str:
        return self.template % self.buffer.decode("utf-8", errors="replace")

    def handle_key(self, key: KeyEvent) -> bool:
        """Feed one key; return ``True`` once the prompt has finished."""
        result: bytes | None = None
        finished = False

        if key in _ERASE_KEYS:
            if self.buffer:
                del self.buffer[-1]
        elif key.key is Key.ESCAPE:
            finished = True
        elif key == ENTER:
            if self.buffer:
                result = bytes(self.buffer)
                finished = True
        elif key.is_printable_ascii:
            self.buffer.append(key.byte)

        if self.on_key is not None:
            self.on_key(bytes(self.buffer), key)
        if finished:
            self.on_done(result)
        return finished
