"""Modal one-line input shown in the message bar.

Used by Save-As (no listener) and incremental search (with a listener that
reacts to every keystroke).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .input import BACKSPACE, ENTER, Command, Key, ctrl
from .state import Document


class QueryListener(Protocol):
    def on_query_change(self, query: bytes, command: Command) -> None:
        """Observe the current input after ``command`` was applied."""


def _is_erase(command: Command) -> bool:
    return command.key is Key.DELETE or command.is_control(BACKSPACE) or command.is_control(ctrl("h"))


def run_prompt(
    document: Document,
    template: str,
    read_command: Callable[[], Command],
    refresh: Callable[[], None],
    listener: QueryListener | None = None,
) -> bytes | None:
    """Collect input until Enter (returns it) or Escape (returns ``None``).

    ``template`` is formatted with ``query`` set to the text typed so far.
    Enter on empty input is ignored.
    """
    buffer = bytearray()
    while True:
        document.set_status(template.format(query=buffer.decode("utf-8", errors="replace")))
        refresh()
        command = read_command()
        if command.key is Key.NONE:
            continue

        if _is_erase(command):
            if buffer:
                del buffer[-1]
        elif command.key is Key.ESCAPE:
            document.set_status("")
            if listener is not None:
                listener.on_query_change(bytes(buffer), command)
            return None
        elif command.is_control(ENTER):
            if buffer:
                document.set_status("")
                if listener is not None:
                    listener.on_query_change(bytes(buffer), command)
                return bytes(buffer)
        elif command.key is Key.CHAR and command.byte is not None:
            buffer.append(command.byte)

        if listener is not None:
            listener.on_query_change(bytes(buffer), command)
