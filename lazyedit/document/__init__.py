"""Document model: rows, row storage, and file collaborators."""

from .cursor import Cursor
from .fileio import load_lines, split_lines, write_file
from .row import DEFAULT_TAB_STOP, Row, cx_to_rx, expand_tabs, rx_to_cx
from .store import LINE_TERMINATOR, RowStore

__all__ = [
    "Cursor",
    "DEFAULT_TAB_STOP",
    "LINE_TERMINATOR",
    "Row",
    "RowStore",
    "cx_to_rx",
    "expand_tabs",
    "load_lines",
    "rx_to_cx",
    "split_lines",
    "write_file",
]
