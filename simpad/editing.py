"""Cursor movement and text editing operations on a ``Document``.

Each function applies one editor action and leaves the cursor clamped to
the current row. The row store is the only place text is changed.
"""

from __future__ import annotations

from .input import Key
from .state import Document


def move_cursor(document: Document, key: Key) -> None:
    """Single-step cursor move; Left/Right wrap across line boundaries."""
    rows = document.rows
    line = document.current_line
    if key is Key.ARROW_LEFT:
        if document.cx != 0:
            document.cx -= 1
        elif document.cy > 0:
            document.cy -= 1
            document.cx = len(rows[document.cy])
    elif key is Key.ARROW_RIGHT:
        if line is not None and document.cx < len(line):
            document.cx += 1
        elif line is not None and document.cx == len(line):
            document.cy += 1
            document.cx = 0
    elif key is Key.ARROW_UP:
        if document.cy != 0:
            document.cy -= 1
    elif key is Key.ARROW_DOWN:
        if document.cy < len(rows):
            document.cy += 1
    document.clamp_cursor()


def page_move(document: Document, key: Key) -> None:
    """Jump to the viewport edge, then step a full screen in that direction."""
    if key is Key.PAGE_UP:
        document.cy = document.row_offset
        step = Key.ARROW_UP
    else:
        document.cy = min(document.row_offset + document.screen_rows - 1, len(document.rows))
        step = Key.ARROW_DOWN
    for _ in range(document.screen_rows):
        move_cursor(document, step)


def move_home(document: Document) -> None:
    document.cx = 0


def move_end(document: Document) -> None:
    line = document.current_line
    if line is not None:
        document.cx = len(line)


def insert_char(document: Document, ch: int) -> None:
    rows = document.rows
    if document.cy == len(rows):
        rows.insert_line(len(rows), b"")
    rows.insert_char(document.cy, document.cx, ch)
    document.cx += 1


def insert_newline(document: Document) -> None:
    """Split the current line at the cursor; the tail becomes the next line."""
    rows = document.rows
    if document.cx == 0:
        rows.insert_line(document.cy, b"")
    else:
        line = rows[document.cy]
        rows.insert_line(document.cy + 1, line.chars[document.cx :])
        rows.truncate_line(document.cy, document.cx)
    document.cy += 1
    document.cx = 0


def delete_char(document: Document) -> None:
    """Delete the byte before the cursor, joining with the previous line at column 0."""
    rows = document.rows
    if document.cy == len(rows):
        return
    if document.cx == 0 and document.cy == 0:
        return
    if document.cx > 0:
        rows.delete_char(document.cy, document.cx - 1)
        document.cx -= 1
    else:
        previous = rows[document.cy - 1]
        document.cx = len(previous)
        rows.append_text(document.cy - 1, rows[document.cy].chars)
        rows.delete_line(document.cy)
        document.cy -= 1
