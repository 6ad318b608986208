"""Main interactive loop for the editor.

Each iteration re-reads the window size, renders one full frame, decodes a
single command and dispatches it. The loop ends when a quit is confirmed.
"""

from __future__ import annotations

import logging

from .config import EditorSettings
from .dispatch import HELP_MESSAGE, CommandDispatcher
from .input import KeyDecoder
from .render import refresh_screen
from .state import Document
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

STATUS_BAR_ROWS = 2


def apply_window_size(document: Document, rows: int, cols: int) -> None:
    """Size the text area, leaving room for the status and message bars."""
    document.screen_rows = max(1, rows - STATUS_BAR_ROWS)
    document.screen_cols = max(1, cols)


def run_editor(
    document: Document,
    terminal: TerminalController,
    settings: EditorSettings | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Run the read-decode-dispatch-render loop until the user quits."""
    if settings is None:
        settings = EditorSettings()
    decoder = KeyDecoder(terminal.stdin_fd, settings.key_timeout_ms)

    def refresh() -> None:
        rows, cols = terminal.window_size()
        apply_window_size(document, rows, cols)
        refresh_screen(document, terminal.write, theme=theme, message_seconds=settings.message_seconds)

    dispatcher = CommandDispatcher(document, decoder.decode_next, refresh, settings.quit_times)
    document.set_status(HELP_MESSAGE)
    logger.info("Editor started on %s", document.filename or "[No Name]")

    with terminal.raw_mode():
        while True:
            refresh()
            if not dispatcher.dispatch(decoder.decode_next()):
                break
    logger.info("Editor exited")
