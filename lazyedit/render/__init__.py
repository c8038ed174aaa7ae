"""Rendering: viewport scrolling, frame composition, and bars."""

from .status import StatusMessage, message_bar, status_bar
from .viewport import RESERVED_BAR_ROWS, Viewport

__all__ = [
    "RESERVED_BAR_ROWS",
    "StatusMessage",
    "Viewport",
    "message_bar",
    "status_bar",
]
