"""Input-layer public API for key decoding and dispatch."""

from .key_registry import KeyBinding, KeyRegistry
from .keys import Key, KeyEvent, ctrl_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, POLL_TIMEOUT_MS, KeyDecoder

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "POLL_TIMEOUT_MS",
    "Key",
    "KeyBinding",
    "KeyDecoder",
    "KeyEvent",
    "KeyRegistry",
    "ctrl_key",
]
