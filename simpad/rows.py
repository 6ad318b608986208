"""Line storage with derived render and highlight arrays.

Each ``Line`` owns its raw bytes plus the tab-expanded form that is drawn
on screen and one highlight tag per rendered byte. ``RowStore`` holds the
ordered lines of a document and counts mutations for the dirty flag.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .highlight import Highlight, highlight_numbers

TAB_STOP = 8
_TAB = 0x09


def expand_tabs(chars: bytes) -> bytes:
    """Expand tabs with spaces so each following byte lands on an 8-column stop."""
    out = bytearray()
    for byte in chars:
        if byte == _TAB:
            out.append(0x20)
            while len(out) % TAB_STOP:
                out.append(0x20)
        else:
            out.append(byte)
    return bytes(out)


class Line:
    """One logical line and its render/highlight derivations.

    ``render`` and ``highlight`` are read-only views; every change to
    ``chars`` goes through a mutation method that rebuilds both.
    """

    __slots__ = ("_chars", "_render", "_highlight")

    def __init__(self, chars: bytes = b"") -> None:
        self._chars = bytearray(chars)
        self._render = b""
        self._highlight: list[Highlight] = []
        self.update()

    def __repr__(self) -> str:
        return f"Line({bytes(self._chars)!r})"

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def chars(self) -> bytes:
        return bytes(self._chars)

    @property
    def render(self) -> bytes:
        return self._render

    @property
    def highlight(self) -> tuple[Highlight, ...]:
        return tuple(self._highlight)

    def update(self) -> None:
        """Regenerate the rendered bytes and the baseline highlight tags."""
        self._render = expand_tabs(self._chars)
        self._highlight = highlight_numbers(self._render)

    def insert(self, at: int, byte: int) -> None:
        at = max(0, min(at, len(self._chars)))
        self._chars.insert(at, byte)
        self.update()

    def delete(self, at: int) -> bool:
        if at < 0 or at >= len(self._chars):
            return False
        del self._chars[at]
        self.update()
        return True

    def append(self, text: bytes) -> None:
        self._chars.extend(text)
        self.update()

    def truncate(self, at: int) -> None:
        at = max(0, min(at, len(self._chars)))
        del self._chars[at:]
        self.update()

    def cx_to_rx(self, cx: int) -> int:
        """Translate a chars column into the matching render column."""
        rx = 0
        for byte in self._chars[:cx]:
            if byte == _TAB:
                rx += (TAB_STOP - 1) - (rx % TAB_STOP)
            rx += 1
        return rx

    def rx_to_cx(self, rx: int) -> int:
        """Translate a render column back into the chars column that covers it."""
        cur_rx = 0
        for cx, byte in enumerate(self._chars):
            if byte == _TAB:
                cur_rx += (TAB_STOP - 1) - (cur_rx % TAB_STOP)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return len(self._chars)

    def mark_match(self, start: int, length: int) -> list[Highlight]:
        """Overlay search-match tags and return the baseline to restore later."""
        saved = list(self._highlight)
        end = min(len(self._highlight), start + length)
        for idx in range(max(0, start), end):
            self._highlight[idx] = Highlight.MATCH
        return saved

    def restore_highlight(self, saved: list[Highlight]) -> None:
        if len(saved) != len(self._render):
            # Line changed since the overlay; the regenerated tags are current.
            return
        self._highlight = list(saved)


class RowStore:
    """Ordered document lines plus a count of mutations since the last save."""

    def __init__(self, lines: Iterable[bytes] = ()) -> None:
        self._lines = [Line(text) for text in lines]
        self.dirty = 0

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __getitem__(self, index: int) -> Line:
        return self._lines[index]

    def insert_line(self, at: int, text: bytes = b"") -> None:
        if at < 0 or at > len(self._lines):
            return
        self._lines.insert(at, Line(text))
        self.dirty += 1

    def delete_line(self, at: int) -> None:
        if at < 0 or at >= len(self._lines):
            return
        del self._lines[at]
        self.dirty += 1

    def insert_char(self, row: int, col: int, ch: int) -> None:
        if row < 0 or row >= len(self._lines):
            return
        self._lines[row].insert(col, ch)
        self.dirty += 1

    def delete_char(self, row: int, col: int) -> None:
        if row < 0 or row >= len(self._lines):
            return
        if self._lines[row].delete(col):
            self.dirty += 1

    def append_text(self, row: int, text: bytes) -> None:
        if row < 0 or row >= len(self._lines):
            return
        self._lines[row].append(text)
        self.dirty += 1

    def truncate_line(self, row: int, col: int) -> None:
        if row < 0 or row >= len(self._lines):
            return
        self._lines[row].truncate(col)
        self.dirty += 1

    def row_length(self, row: int) -> int:
        """Return the chars length of ``row``, or 0 for the virtual append row."""
        if 0 <= row < len(self._lines):
            return len(self._lines[row])
        return 0

    def to_bytes(self) -> bytes:
        return b"".join(line.chars + b"\n" for line in self._lines)

    def mark_clean(self) -> None:
        self.dirty = 0
