from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cursor:
    """Logical cursor (``cx``, ``cy``) plus the render column ``rx``.

    ``rx`` is derived from ``cx`` whenever a frame is scrolled and drawn.
    ``cy == num_rows`` is the virtual empty line after the last row.
    """

    cx: int = 0
    cy: int = 0
    rx: int = 0
