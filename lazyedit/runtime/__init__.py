"""Runtime public API.

Kept lazy so that ``lazyedit.input`` can import the terminal error type
without pulling in the whole runtime.
"""

from __future__ import annotations


def run_editor(*args, **kwargs):
    """Lazily import and run the editor session."""
    from .app import run_editor as _run_editor

    return _run_editor(*args, **kwargs)


__all__ = ["run_editor"]
