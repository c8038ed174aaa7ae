"""Main interactive event loop.

Each iteration re-reads the window size, redraws the whole frame when
something visible changed, then polls for one key. A poll that times out
just loops again.
"""

from __future__ import annotations

from ..input.reader import KeyDecoder
from .dispatch import CommandDispatcher
from .state import EditorState
from .terminal import TerminalController


def compose_frame(state: EditorState, now: float | None = None) -> bytes:
    """Return the bytes of one full frame for ``state``."""
    return state.viewport.render(
        state.document,
        state.cursor,
        filename=state.display_filename,
        message=state.message_text(now),
    )


def run_main_loop(
    state: EditorState,
    terminal: TerminalController,
    decoder: KeyDecoder,
    dispatcher: CommandDispatcher,
) -> None:
    """Run until the dispatcher reports a quit; the caller owns raw mode."""
    viewport = state.viewport
    needs_redraw = True
    shown_message: str | None = None
    while True:
        size_before = (viewport.screen_rows, viewport.screen_cols)
        viewport.resize(*terminal.window_size())
        if (viewport.screen_rows, viewport.screen_cols) != size_before:
            needs_redraw = True
        # Idle frames still need a redraw once the message bar expires.
        if state.message_text() != shown_message:
            needs_redraw = True

        if needs_redraw:
            shown_message = state.message_text()
            terminal.write(compose_frame(state))
            needs_redraw = False

        key = decoder.next_key()
        if key is None:
            continue
        if dispatcher.handle(key):
            return
        needs_redraw = True
