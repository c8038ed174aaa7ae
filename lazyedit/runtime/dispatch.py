"""Key-to-command dispatch for the editor.

One ``CommandDispatcher`` owns the bindings for a session. While a prompt
is open it receives every key; otherwise keys go through the registry and
unbound bytes are typed into the document.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from ..document.fileio import write_file
from ..input.key_registry import KeyBinding, KeyRegistry
from ..input.keys import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    BACKSPACE,
    DELETE,
    END,
    ENTER,
    ESCAPE,
    HOME,
    PAGE_DOWN,
    PAGE_UP,
    TAB,
    Key,
    KeyEvent,
    ctrl_key,
)
from ..search.incremental import SearchController
from .prompt import Prompt
from .state import EditorState

logger = logging.getLogger(__name__)

QUIT_KEY = ctrl_key("q")
SAVE_KEY = ctrl_key("s")
FIND_KEY = ctrl_key("f")
REFRESH_KEY = ctrl_key("l")
CTRL_H = ctrl_key("h")

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"
SAVE_AS_PROMPT = "Save as: %s (ESC to cancel)"
SEARCH_PROMPT = "Search: %s (Use ESC/Arrows/Enter)"


class CommandDispatcher:
    """Apply decoded keys to the document, cursor, and prompts."""

    def __init__(
        self,
        state: EditorState,
        save_file: Callable[[Path, bytes], int] = write_file,
    ) -> None:
        self.state = state
        self.save_file = save_file
        self.search = SearchController(state.document, state.cursor, state.viewport)
        self.registry = KeyRegistry().register_bindings(
            KeyBinding((ENTER,), self._insert_newline),
            KeyBinding((QUIT_KEY,), self._quit),
            KeyBinding((SAVE_KEY,), self._save),
            KeyBinding((FIND_KEY,), self._find),
            KeyBinding((HOME,), self._home),
            KeyBinding((END,), self._end),
            KeyBinding((BACKSPACE, CTRL_H, DELETE), self._delete),
            KeyBinding((PAGE_UP, PAGE_DOWN), self._page),
            KeyBinding((ARROW_UP, ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT), self._arrow),
            KeyBinding((REFRESH_KEY, ESCAPE), self._ignore),
        )

    def handle(self, key: KeyEvent) -> bool:
        """Handle one key and return ``True`` when the editor should exit."""
        state = self.state
        if state.prompt is not None:
            prompt = state.prompt
            if prompt.handle_key(key) and state.prompt is prompt:
                state.prompt = None
            state.quit_times_left = state.config.quit_times
            return False

        if key in self.registry:
            should_quit = bool(self.registry.dispatch(key))
        else:
            self._insert_key(key)
            should_quit = False

        if key != QUIT_KEY:
            state.quit_times_left = state.config.quit_times
        return should_quit

    def open_prompt(self, prompt: Prompt) -> None:
        self.state.prompt = prompt

    # Cursor motion.

    def move_cursor(self, key: Key) -> None:
        """Move one cell, wrapping across line ends and clamping ``cx``."""
        cursor = self.state.cursor
        document = self.state.document
        if key is Key.ARROW_UP:
            if cursor.cy > 0:
                cursor.cy -= 1
        elif key is Key.ARROW_DOWN:
            if cursor.cy < document.num_rows:
                cursor.cy += 1
        elif key is Key.ARROW_LEFT:
            if cursor.cx > 0:
                cursor.cx -= 1
            elif cursor.cy > 0:
                cursor.cy -= 1
                cursor.cx = document.row_length(cursor.cy)
        elif key is Key.ARROW_RIGHT:
            row = document.row(cursor.cy)
            if row is not None:
                if cursor.cx < len(row):
                    cursor.cx += 1
                else:
                    cursor.cy += 1
                    cursor.cx = 0

        cursor.cx = min(cursor.cx, document.row_length(cursor.cy))

    def _arrow(self, key: KeyEvent) -> None:
        self.move_cursor(key.key)

    def _home(self, key: KeyEvent) -> None:
        self.state.cursor.cx = 0

    def _end(self, key: KeyEvent) -> None:
        cursor = self.state.cursor
        cursor.cx = self.state.document.row_length(cursor.cy)

    def _page(self, key: KeyEvent) -> None:
        cursor = self.state.cursor
        viewport = self.state.viewport
        if key == PAGE_UP:
            cursor.cy = viewport.row_offset
            step = Key.ARROW_UP
        else:
            cursor.cy = min(
                viewport.row_offset + viewport.screen_rows - 1,
                self.state.document.num_rows,
            )
            step = Key.ARROW_DOWN
        for _ in range(viewport.screen_rows):
            self.move_cursor(step)

    def _ignore(self, key: KeyEvent) -> None:
        return None

    # Editing.

    def _insert_key(self, key: KeyEvent) -> None:
        if not key.is_char or (key.is_control and key != TAB):
            logger.debug("ignoring unbound key %r", key)
            return
        self.insert_char(key.byte)

    def insert_char(self, value: int) -> None:
        cursor = self.state.cursor
        document = self.state.document
        if cursor.cy == document.num_rows:
            document.insert_row(document.num_rows, b"")
        document.insert_char(cursor.cy, cursor.cx, value)
        cursor.cx += 1

    def _insert_newline(self, key: KeyEvent) -> None:
        cursor = self.state.cursor
        self.state.document.split_line(cursor.cy, cursor.cx)
        cursor.cy += 1
        cursor.cx = 0

    def _delete(self, key: KeyEvent) -> None:
        if key == DELETE:
            self.move_cursor(Key.ARROW_RIGHT)
        self.delete_before_cursor()

    def delete_before_cursor(self) -> None:
        """Backspace: remove the previous byte or join with the previous row."""
        cursor = self.state.cursor
        document = self.state.document
        if cursor.cy == document.num_rows:
            return
        if cursor.cx == 0 and cursor.cy == 0:
            return
        if cursor.cx > 0:
            document.delete_char(cursor.cy, cursor.cx - 1)
            cursor.cx -= 1
            return
        join_at = document.join_with_previous(cursor.cy)
        if join_at is not None:
            cursor.cy -= 1
            cursor.cx = join_at

    # Commands.

    def _quit(self, key: KeyEvent) -> bool:
        state = self.state
        if state.document.dirty and state.quit_times_left > 0:
            state.status.set(
                "WARNING!!! File has unsaved changes. "
                f"Press Ctrl-Q {state.quit_times_left} more time(s) to quit."
            )
            state.quit_times_left -= 1
            return False
        return True

    def _save(self, key: KeyEvent) -> None:
        if self.state.filename is None:
            self.open_prompt(Prompt(SAVE_AS_PROMPT, on_done=self._finish_save_as))
            return
        self.write_document()

    def _finish_save_as(self, result: bytes | None) -> None:
        if result is None:
            self.state.status.set("Save canceled")
            return
        self.state.filename = Path(os.fsdecode(result))
        self.write_document()

    def write_document(self) -> bool:
        """Save to ``state.filename``; report the outcome on the message bar."""
        state = self.state
        if state.filename is None:
            return False
        data = state.document.to_persistable_text()
        try:
            written = self.save_file(state.filename, data)
        except OSError as exc:
            logger.warning("save to %s failed: %s", state.filename, exc)
            state.status.set(f"Can't save! I/O error: {exc.strerror or exc}")
            return False
        state.document.mark_clean()
        state.status.set(f"{written} bytes written to disk")
        return True

    def _find(self, key: KeyEvent) -> None:
        self.search.begin()
        self.open_prompt(
            Prompt(
                SEARCH_PROMPT,
                on_done=self._finish_find,
                on_key=self.search.on_keystroke,
            )
        )

    def _finish_find(self, result: bytes | None) -> None:
        if result is None:
            self.search.cancel()
        self.state.status.set("")
