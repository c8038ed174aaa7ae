"""File collaborators: path -> list of lines, and bytes -> file on disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


def split_lines(data: bytes) -> list[bytes]:
    """Split file content on ``\\n`` and strip trailing CR/LF from each line."""
    if not data:
        return []
    pieces = data.split(b"\n")
    if pieces[-1] == b"":
        pieces.pop()
    return [piece.rstrip(b"\r\n") for piece in pieces]


def load_lines(path: Path) -> list[bytes]:
    """Read ``path`` and return its lines without terminators."""
    data = Path(path).read_bytes()
    lines = split_lines(data)
    logger.info("loaded %s: %d lines, %d bytes", path, len(lines), len(data))
    return lines


def write_file(path: Path, data: bytes) -> int:
    """Write ``data`` to ``path``, truncating it to exactly ``len(data)`` bytes.

    Raises ``OSError`` on any failure, including a short write.
    """
    fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
    try:
        os.ftruncate(fd, len(data))
        written = os.write(fd, data)
        if written != len(data):
            raise OSError(f"short write ({written} of {len(data)} bytes)")
    finally:
        os.close(fd)
    logger.info("saved %s: %d bytes", path, len(data))
    return len(data)
