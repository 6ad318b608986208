from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from .rows import Line, RowStore


@dataclass
class Document:
    rows: RowStore = field(default_factory=RowStore)
    cx: int = 0
    cy: int = 0
    rx: int = 0
    row_offset: int = 0
    col_offset: int = 0
    screen_rows: int = 22
    screen_cols: int = 80
    filename: Path | None = None
    status_message: str = ""
    status_time: float = 0.0
    quit_times: int = 1

    @property
    def dirty(self) -> int:
        return self.rows.dirty

    @property
    def current_line(self) -> Line | None:
        if self.cy < len(self.rows):
            return self.rows[self.cy]
        return None

    def set_status(self, message: str, now: float | None = None) -> None:
        self.status_message = message
        self.status_time = time.monotonic() if now is None else now

    def clamp_cursor(self) -> None:
        """Pull ``cx`` back inside the current row after a vertical move."""
        self.cx = max(0, min(self.cx, self.rows.row_length(self.cy)))
