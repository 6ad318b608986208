"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``Command`` tokens.
Handles ESC-sequence lookahead for arrows, Home/End, Delete and paging keys.
"""

from __future__ import annotations

import os
import select
from dataclasses import dataclass
from enum import Enum

from .logging_config import KEY_LOGGER

DEFAULT_TIMEOUT_MS = 100

ESC = 0x1B
ENTER = 0x0D
TAB = 0x09
BACKSPACE = 0x7F


def ctrl(letter: str) -> int:
    """Return the byte produced by Ctrl plus ``letter``."""
    return ord(letter.upper()) & 0x1F


class Key(Enum):
    NONE = "none"
    CHAR = "char"
    CONTROL = "control"
    ESCAPE = "escape"
    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True)
class Command:
    """One decoded keypress. ``byte`` is set for ``CHAR`` and ``CONTROL``."""

    key: Key
    byte: int | None = None

    def is_control(self, byte: int) -> bool:
        return self.key is Key.CONTROL and self.byte == byte


NO_COMMAND = Command(Key.NONE)
ESCAPE_COMMAND = Command(Key.ESCAPE)

_CSI_TILDE_KEYS = {
    ord("1"): Key.HOME,
    ord("3"): Key.DELETE,
    ord("4"): Key.END,
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("7"): Key.HOME,
    ord("8"): Key.END,
}
_CSI_LETTER_KEYS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}
_SS3_KEYS = {
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}


def command_for_byte(byte: int) -> Command:
    """Classify a single non-escape byte."""
    if byte < 0x20 or byte == BACKSPACE:
        return Command(Key.CONTROL, byte)
    return Command(Key.CHAR, byte)


class KeyDecoder:
    """Blocking key reader with a bounded wait per byte."""

    def __init__(self, fd: int, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
        self.fd = fd
        self.timeout_ms = timeout_ms

    def _read_byte(self) -> int | None:
        """Return one byte, or ``None`` if nothing arrives before the timeout."""
        try:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, self.timeout_ms / 1000.0))
            if not ready:
                return None
            data = os.read(self.fd, 1)
        except (InterruptedError, BlockingIOError):
            return None
        if not data:
            return None
        return data[0]

    def decode_next(self) -> Command:
        first = self._read_byte()
        if first is None:
            return NO_COMMAND
        if first != ESC:
            command = command_for_byte(first)
        else:
            command = self._decode_escape()
        KEY_LOGGER.debug("key %s byte=%r", command.key.value, command.byte)
        return command

    def _decode_escape(self) -> Command:
        seq0 = self._read_byte()
        if seq0 is None:
            return ESCAPE_COMMAND
        seq1 = self._read_byte()
        if seq1 is None:
            return ESCAPE_COMMAND

        if seq0 == ord("["):
            if ord("0") <= seq1 <= ord("9"):
                seq2 = self._read_byte()
                if seq2 != ord("~"):
                    return ESCAPE_COMMAND
                key = _CSI_TILDE_KEYS.get(seq1)
            else:
                key = _CSI_LETTER_KEYS.get(seq1)
        elif seq0 == ord("O"):
            key = _SS3_KEYS.get(seq1)
        else:
            key = None
        return Command(key) if key is not None else ESCAPE_COMMAND
