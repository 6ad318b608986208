"""Viewport scrolling that keeps the cursor on screen."""

from __future__ import annotations

from .state import Document


def recompute_scroll(document: Document, screen_rows: int | None = None, screen_cols: int | None = None) -> None:
    """Refresh ``rx`` and move the viewport offsets until the cursor is visible.

    Extents default to the document's text area. After the call
    ``row_offset <= cy < row_offset + rows`` and the same holds for ``rx``
    against ``col_offset`` and the column count.
    """
    rows = document.screen_rows if screen_rows is None else screen_rows
    cols = document.screen_cols if screen_cols is None else screen_cols
    line = document.current_line
    document.rx = line.cx_to_rx(document.cx) if line is not None else 0

    if document.cy < document.row_offset:
        document.row_offset = document.cy
    if document.cy >= document.row_offset + rows:
        document.row_offset = document.cy - rows + 1
    if document.rx < document.col_offset:
        document.col_offset = document.rx
    if document.rx >= document.col_offset + cols:
        document.col_offset = document.rx - cols + 1
