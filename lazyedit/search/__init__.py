"""Incremental search public API."""

from .incremental import BACKWARD, FORWARD, SearchController, SearchSnapshot

__all__ = ["BACKWARD", "FORWARD", "SearchController", "SearchSnapshot"]
