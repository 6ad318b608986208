"""Per-column highlight tags and the numeric-literal scanner.

Tags are computed from a line's rendered bytes in one left-to-right pass.
Search matches are overlaid on top of this baseline by the search engine.
"""

from __future__ import annotations

from enum import Enum

SEPARATOR_BYTES = frozenset(b",.()+-/*=~%<>[];")
_WHITESPACE_BYTES = frozenset(b" \t\n\r\x0b\x0c")


class Highlight(Enum):
    NORMAL = 0
    NUMBER = 1
    MATCH = 2


def is_separator(byte: int) -> bool:
    """Return whether ``byte`` ends a token for numeric-literal detection."""
    return byte == 0 or byte in _WHITESPACE_BYTES or byte in SEPARATOR_BYTES


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def highlight_numbers(render: bytes) -> list[Highlight]:
    """Tag digits (and decimal points inside them) that start after a separator."""
    tags: list[Highlight] = []
    prev_sep = True
    prev_tag = Highlight.NORMAL
    for byte in render:
        if (_is_digit(byte) and (prev_sep or prev_tag is Highlight.NUMBER)) or (
            byte == 0x2E and prev_tag is Highlight.NUMBER
        ):
            tags.append(Highlight.NUMBER)
            prev_sep = False
        else:
            tags.append(Highlight.NORMAL)
            prev_sep = is_separator(byte)
        prev_tag = tags[-1]
    return tags
