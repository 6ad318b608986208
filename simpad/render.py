"""Frame rendering for the editor screen.

A frame is the text area, an inverted status bar and a message bar, built
into one byte buffer so the terminal never shows a half-drawn screen.
Color escapes are emitted only where the highlight tag changes.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from . import __version__
from .config import DEFAULT_MESSAGE_SECONDS
from .highlight import Highlight
from .rows import Line
from .scroll import recompute_scroll
from .state import Document
from .ui_theme import DEFAULT_THEME, UITheme

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_LINE = b"\x1b[K"
CRLF = b"\r\n"
NO_NAME = "[No Name]"


def _sgr(sequence: str) -> bytes:
    return sequence.encode("ascii")


def welcome_banner() -> str:
    return f"simpad editor -- version {__version__}"


def _draw_welcome(out: bytearray, cols: int) -> None:
    welcome = welcome_banner()[:cols]
    padding = (cols - len(welcome)) // 2
    if padding:
        out += b"~"
        padding -= 1
    out += b" " * padding
    out += welcome.encode("ascii")


def _draw_line(out: bytearray, line: Line, col_offset: int, cols: int, theme: UITheme) -> None:
    """Append the visible slice of ``line`` with minimal color switching."""
    render = line.render[col_offset : col_offset + cols]
    tags = line.highlight[col_offset : col_offset + cols]
    current: str | None = None
    for byte, tag in zip(render, tags):
        if byte < 0x20 or byte == 0x7F:
            symbol = 0x40 + byte if byte <= 26 else ord("?")
            out += _sgr(theme.control)
            out.append(symbol)
            out += _sgr(theme.reset)
            if current is not None:
                out += _sgr(current)
        elif tag is Highlight.NORMAL:
            if current is not None:
                out += _sgr(theme.default_fg)
                current = None
            out.append(byte)
        else:
            color = theme.color_for(tag)
            if color != current:
                current = color
                out += _sgr(color or theme.default_fg)
            out.append(byte)
    if current is not None:
        out += _sgr(theme.default_fg)


def draw_rows(out: bytearray, document: Document, theme: UITheme = DEFAULT_THEME) -> None:
    rows = document.rows
    for y in range(document.screen_rows):
        filerow = y + document.row_offset
        if filerow >= len(rows):
            if len(rows) == 0 and y == document.screen_rows // 3:
                _draw_welcome(out, document.screen_cols)
            else:
                out += b"~"
        else:
            _draw_line(out, rows[filerow], document.col_offset, document.screen_cols, theme)
        out += CLEAR_LINE
        out += CRLF


def build_status_line(document: Document, width: int) -> bytes:
    """Compose the left/right status text padded to ``width`` columns."""
    name = str(document.filename) if document.filename is not None else NO_NAME
    modified = " (modified)" if document.dirty else ""
    total = len(document.rows)
    left = f"{name[:20]} - {total} lines{modified}".encode("utf-8", errors="replace")[:width]
    right = f"{document.cy + 1}/{total}".encode("ascii")
    line = bytearray(left)
    while len(line) < width:
        if width - len(line) == len(right):
            line += right
            break
        line += b" "
    return bytes(line)


def draw_status_bar(out: bytearray, document: Document, theme: UITheme = DEFAULT_THEME) -> None:
    out += _sgr(theme.reverse)
    out += build_status_line(document, document.screen_cols)
    out += _sgr(theme.reset)
    out += CRLF


def draw_message_bar(
    out: bytearray,
    document: Document,
    now: float,
    message_seconds: float = DEFAULT_MESSAGE_SECONDS,
) -> None:
    out += CLEAR_LINE
    if document.status_message and now - document.status_time < message_seconds:
        out += document.status_message.encode("utf-8", errors="replace")[: document.screen_cols]


def cursor_position(document: Document) -> bytes:
    row = document.cy - document.row_offset + 1
    col = document.rx - document.col_offset + 1
    return f"\x1b[{row};{col}H".encode("ascii")


def render_frame(
    document: Document,
    *,
    theme: UITheme = DEFAULT_THEME,
    message_seconds: float = DEFAULT_MESSAGE_SECONDS,
    now: float | None = None,
) -> bytes:
    """Build the complete frame for ``document`` as it is currently scrolled."""
    if now is None:
        now = time.monotonic()
    out = bytearray()
    out += HIDE_CURSOR
    out += CURSOR_HOME
    draw_rows(out, document, theme)
    draw_status_bar(out, document, theme)
    draw_message_bar(out, document, now, message_seconds)
    out += cursor_position(document)
    out += SHOW_CURSOR
    return bytes(out)


def refresh_screen(
    document: Document,
    write: Callable[[bytes], None],
    *,
    theme: UITheme = DEFAULT_THEME,
    message_seconds: float = DEFAULT_MESSAGE_SECONDS,
    now: float | None = None,
) -> None:
    """Scroll to the cursor, render, and hand the frame to ``write`` once."""
    recompute_scroll(document)
    write(render_frame(document, theme=theme, message_seconds=message_seconds, now=now))
