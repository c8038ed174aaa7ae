"""Persistent JSON config helpers.

Stores tab stop, quit confirmation count, and message-bar timeout.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..document.row import DEFAULT_TAB_STOP
from ..render.status import DEFAULT_MESSAGE_TIMEOUT_SECONDS

APP_NAME = "lazyedit"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_QUIT_TIMES = 1
MAX_TAB_STOP = 64


@dataclass(frozen=True)
class EditorConfig:
    """Tunable editor settings; every field has a safe default."""

    tab_stop: int = DEFAULT_TAB_STOP
    quit_times: int = DEFAULT_QUIT_TIMES
    message_timeout_seconds: float = DEFAULT_MESSAGE_TIMEOUT_SECONDS


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_int(value: object, minimum: int, maximum: int) -> int | None:
    """Accept plain ints inside ``[minimum, maximum]``; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < minimum or value > maximum:
        return None
    return value


def _coerce_seconds(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0:
        return None
    return float(value)


def load_editor_config() -> EditorConfig:
    """Build an ``EditorConfig`` from the config file, dropping invalid keys."""
    data = load_config()
    defaults = EditorConfig()
    tab_stop = _coerce_int(data.get("tab_stop"), 1, MAX_TAB_STOP)
    quit_times = _coerce_int(data.get("quit_times"), 0, 100)
    timeout = _coerce_seconds(data.get("message_timeout_seconds"))
    return EditorConfig(
        tab_stop=tab_stop if tab_stop is not None else defaults.tab_stop,
        quit_times=quit_times if quit_times is not None else defaults.quit_times,
        message_timeout_seconds=timeout if timeout is not None else defaults.message_timeout_seconds,
    )
