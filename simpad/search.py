"""Incremental search over rendered rows.

``SearchEngine`` reacts to each prompt keystroke: arrows step to the next or
previous match, any edit restarts from the top. The matched span is tagged
``Highlight.MATCH`` until the next keystroke restores the line's baseline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .highlight import Highlight
from .input import ENTER, Command, Key
from .prompt import QueryListener
from .state import Document

logger = logging.getLogger(__name__)

SEARCH_PROMPT = "Search: {query} (Use ESC/Arrows/Enter)"

_FORWARD_KEYS = frozenset({Key.ARROW_RIGHT, Key.ARROW_DOWN})
_BACKWARD_KEYS = frozenset({Key.ARROW_LEFT, Key.ARROW_UP})


class SearchEngine:
    def __init__(self, document: Document) -> None:
        self.document = document
        self.last_match = -1
        self.direction = 1
        self._saved_row: int | None = None
        self._saved_highlight: list[Highlight] | None = None

    def restore_highlight(self) -> None:
        if self._saved_row is None or self._saved_highlight is None:
            return
        if self._saved_row < len(self.document.rows):
            self.document.rows[self._saved_row].restore_highlight(self._saved_highlight)
        self._saved_row = None
        self._saved_highlight = None

    def on_query_change(self, query: bytes, command: Command) -> None:
        self.restore_highlight()
        if command.key is Key.ESCAPE or command.is_control(ENTER):
            self.last_match = -1
            self.direction = 1
            return
        if command.key in _FORWARD_KEYS:
            self.direction = 1
        elif command.key in _BACKWARD_KEYS:
            self.direction = -1
        else:
            self.last_match = -1
            self.direction = 1
        if query:
            self.search(query)

    def search(self, query: bytes) -> bool:
        """Scan every row once, starting one step past the last match."""
        document = self.document
        rows = document.rows
        if self.last_match == -1:
            self.direction = 1
        current = self.last_match
        for _ in range(len(rows)):
            current += self.direction
            if current == -1:
                current = len(rows) - 1
            elif current == len(rows):
                current = 0
            line = rows[current]
            offset = line.render.find(query)
            if offset == -1:
                continue
            self.last_match = current
            document.cy = current
            document.cx = line.rx_to_cx(offset)
            # Past-the-end offset makes the next scroll put the match on the top row.
            document.row_offset = len(rows)
            self._saved_row = current
            self._saved_highlight = line.mark_match(offset, len(query))
            return True
        return False


def find(document: Document, prompt: Callable[[str, QueryListener | None], bytes | None]) -> bytes | None:
    """Run an interactive search; cancelling restores cursor and viewport."""
    saved = (document.cx, document.cy, document.col_offset, document.row_offset)
    engine = SearchEngine(document)
    query = prompt(SEARCH_PROMPT, engine)
    if query is None:
        document.cx, document.cy, document.col_offset, document.row_offset = saved
    else:
        logger.debug("Search accepted for %r at row %d", query, document.cy)
    return query
