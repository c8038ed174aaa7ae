"""Editor bootstrap and shutdown.

Builds the session state, loads the file, and runs the main loop inside
raw mode. Terminal failures propagate as ``TerminalError`` after the
screen has been cleared and the tty restored.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..document.fileio import load_lines
from ..input.reader import KeyDecoder
from .config import EditorConfig
from .dispatch import HELP_MESSAGE, CommandDispatcher
from .loop import run_main_loop
from .state import EditorState
from .terminal import TerminalController, TerminalError

logger = logging.getLogger(__name__)


def read_initial_lines(path: Path | None) -> list[bytes] | None:
    """Return the lines of ``path``, or ``None`` when it does not exist yet.

    Other ``OSError``s propagate so they surface before raw mode starts.
    """
    if path is None:
        return None
    try:
        return load_lines(path)
    except FileNotFoundError:
        logger.info("%s does not exist yet, starting empty", path)
        return None


def build_state(
    window_rows: int,
    window_cols: int,
    config: EditorConfig,
    path: Path | None = None,
    lines: list[bytes] | None = None,
) -> EditorState:
    """Create session state with ``lines`` loaded and the help message shown."""
    state = EditorState.create(window_rows, window_cols, config)
    state.filename = path
    if lines is not None:
        state.document.load(lines)
    state.status.set(HELP_MESSAGE)
    return state


def run_editor(path: Path | None, config: EditorConfig) -> None:
    """Edit ``path`` (or an unnamed buffer) until the user quits."""
    lines = read_initial_lines(path)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    with terminal.raw_mode():
        try:
            state = build_state(*terminal.window_size(), config, path, lines)
            run_main_loop(state, terminal, KeyDecoder(stdin_fd), CommandDispatcher(state))
        except TerminalError:
            logger.exception("terminal failure")
            terminal.clear_screen()
            raise
        terminal.clear_screen()
