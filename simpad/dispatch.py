"""Map decoded commands onto document edits, saves, searches and quitting."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from . import editing
from .config import DEFAULT_QUIT_TIMES
from .fileio import save_document
from .input import BACKSPACE, ENTER, TAB, Command, Key, ctrl
from .prompt import QueryListener, run_prompt
from .search import find
from .state import Document

logger = logging.getLogger(__name__)

CTRL_F = ctrl("f")
CTRL_H = ctrl("h")
CTRL_L = ctrl("l")
CTRL_Q = ctrl("q")
CTRL_S = ctrl("s")

SAVE_AS_PROMPT = "Save as: {query} (ESC to cancel)"
HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


class CommandDispatcher:
    """Apply one ``Command`` at a time to ``document``.

    ``read_command`` and ``refresh`` are only used by the modal prompts
    (Save-As and search), which run their own small read/render loop.
    """

    def __init__(
        self,
        document: Document,
        read_command: Callable[[], Command],
        refresh: Callable[[], None],
        quit_times: int = DEFAULT_QUIT_TIMES,
    ) -> None:
        self.document = document
        self.read_command = read_command
        self.refresh = refresh
        self.quit_times = quit_times
        document.quit_times = quit_times
        self._key_handlers: dict[Key, Callable[[], None]] = {
            Key.ARROW_UP: lambda: editing.move_cursor(document, Key.ARROW_UP),
            Key.ARROW_DOWN: lambda: editing.move_cursor(document, Key.ARROW_DOWN),
            Key.ARROW_LEFT: lambda: editing.move_cursor(document, Key.ARROW_LEFT),
            Key.ARROW_RIGHT: lambda: editing.move_cursor(document, Key.ARROW_RIGHT),
            Key.HOME: lambda: editing.move_home(document),
            Key.END: lambda: editing.move_end(document),
            Key.PAGE_UP: lambda: editing.page_move(document, Key.PAGE_UP),
            Key.PAGE_DOWN: lambda: editing.page_move(document, Key.PAGE_DOWN),
            Key.DELETE: self._delete_forward,
            Key.ESCAPE: lambda: None,
        }
        self._control_handlers: dict[int, Callable[[], None]] = {
            ENTER: lambda: editing.insert_newline(document),
            BACKSPACE: lambda: editing.delete_char(document),
            CTRL_H: lambda: editing.delete_char(document),
            CTRL_S: self.save,
            CTRL_F: self.find,
            CTRL_L: lambda: None,
            TAB: lambda: editing.insert_char(document, TAB),
        }

    def prompt(self, template: str, listener: QueryListener | None = None) -> bytes | None:
        return run_prompt(self.document, template, self.read_command, self.refresh, listener)

    def dispatch(self, command: Command) -> bool:
        """Handle ``command``; return ``False`` once the editor should exit."""
        if command.key is Key.NONE:
            return True
        if command.is_control(CTRL_Q):
            return self._confirm_quit()

        if command.key is Key.CHAR and command.byte is not None:
            editing.insert_char(self.document, command.byte)
        elif command.key is Key.CONTROL and command.byte is not None:
            handler = self._control_handlers.get(command.byte)
            if handler is not None:
                handler()
        else:
            handler = self._key_handlers.get(command.key)
            if handler is not None:
                handler()

        self.document.quit_times = self.quit_times
        return True

    def _confirm_quit(self) -> bool:
        document = self.document
        if document.dirty and document.quit_times > 0:
            document.set_status(
                "WARNING!!! File has unsaved changes. "
                f"Press Ctrl-Q {document.quit_times} more times to quit."
            )
            document.quit_times -= 1
            return True
        logger.info("Quit requested with %d unsaved changes", document.dirty)
        return False

    def _delete_forward(self) -> None:
        editing.move_cursor(self.document, Key.ARROW_RIGHT)
        editing.delete_char(self.document)

    def save(self) -> None:
        document = self.document
        if document.filename is None:
            name = self.prompt(SAVE_AS_PROMPT)
            if name is None:
                document.set_status("Save aborted")
                return
            document.filename = Path(os.fsdecode(name))
        save_document(document)

    def find(self) -> None:
        find(self.document, self.prompt)
