from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..document.cursor import Cursor
from ..document.store import RowStore
from ..render.status import StatusMessage
from ..render.viewport import Viewport
from .config import EditorConfig
from .prompt import Prompt


@dataclass
class EditorState:
    """Everything one editing session owns, passed explicitly to each layer."""

    document: RowStore
    viewport: Viewport
    config: EditorConfig = field(default_factory=EditorConfig)
    cursor: Cursor = field(default_factory=Cursor)
    filename: Path | None = None
    status: StatusMessage = field(default_factory=StatusMessage)
    prompt: Prompt | None = None
    quit_times_left: int = 0

    @classmethod
    def create(
        cls,
        window_rows: int,
        window_cols: int,
        config: EditorConfig | None = None,
    ) -> EditorState:
        config = config if config is not None else EditorConfig()
        return cls(
            document=RowStore(tab_stop=config.tab_stop),
            viewport=Viewport.for_window(window_rows, window_cols),
            config=config,
            status=StatusMessage(timeout_seconds=config.message_timeout_seconds),
            quit_times_left=config.quit_times,
        )

    @property
    def display_filename(self) -> str | None:
        return str(self.filename) if self.filename is not None else None

    def message_text(self, now: float | None = None) -> str:
        """Message-bar text: the open prompt, else the fresh status message."""
        if self.prompt is not None:
            return self.prompt.message()
        return self.status.visible_text(now)
