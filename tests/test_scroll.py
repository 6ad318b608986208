from __future__ import annotations

import unittest

from simpad.rows import RowStore
from simpad.scroll import recompute_scroll
from simpad.state import Document


def _document(lines: list[bytes], rows: int = 10, cols: int = 20) -> Document:
    return Document(rows=RowStore(lines), screen_rows=rows, screen_cols=cols)


class RecomputeScrollTests(unittest.TestCase):
    def test_scrolls_down_to_reveal_cursor(self) -> None:
        document = _document([b"x"] * 50)
        document.cy = 30
        recompute_scroll(document)
        self.assertEqual(document.row_offset, 21)

    def test_scrolls_up_to_reveal_cursor(self) -> None:
        document = _document([b"x"] * 50)
        document.row_offset = 25
        document.cy = 3
        recompute_scroll(document)
        self.assertEqual(document.row_offset, 3)

    def test_offset_unchanged_while_cursor_visible(self) -> None:
        document = _document([b"x"] * 50)
        document.row_offset = 5
        document.cy = 14
        recompute_scroll(document)
        self.assertEqual(document.row_offset, 5)

    def test_horizontal_scroll_uses_render_column(self) -> None:
        document = _document([b"\t\tabc"], cols=10)
        document.cx = 2
        recompute_scroll(document)
        self.assertEqual(document.rx, 16)
        self.assertEqual(document.col_offset, 7)

        document.cx = 0
        recompute_scroll(document)
        self.assertEqual(document.rx, 0)
        self.assertEqual(document.col_offset, 0)

    def test_virtual_row_has_zero_render_column(self) -> None:
        document = _document([b"abc"])
        document.cy = 1
        document.cx = 3
        recompute_scroll(document)
        self.assertEqual(document.rx, 0)

    def test_cursor_always_inside_viewport(self) -> None:
        document = _document([b"a" * 60] * 40, rows=7, cols=13)
        for cy, cx in ((0, 0), (39, 60), (12, 5), (33, 59), (0, 30), (40, 0)):
            document.cy = cy
            document.cx = min(cx, document.rows.row_length(cy))
            recompute_scroll(document)
            self.assertTrue(document.row_offset <= document.cy < document.row_offset + 7)
            self.assertTrue(document.col_offset <= document.rx < document.col_offset + 13)

    def test_explicit_extent_overrides_document_size(self) -> None:
        document = _document([b"x"] * 50)
        document.cy = 30
        recompute_scroll(document, 5, 20)
        self.assertEqual(document.row_offset, 26)


if __name__ == "__main__":
    unittest.main()
