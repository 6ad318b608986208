"""Row store and line derivation tests.

Covers tab expansion, column translation, highlight length invariants and
the bounds rules for row/column mutations.
"""

from __future__ import annotations

import unittest

from simpad.highlight import Highlight
from simpad.rows import TAB_STOP, Line, RowStore, expand_tabs


class ExpandTabsTests(unittest.TestCase):
    def test_leading_tab_expands_to_full_stop(self) -> None:
        self.assertEqual(expand_tabs(b"\tx"), b" " * 8 + b"x")

    def test_tab_after_text_pads_to_next_stop(self) -> None:
        self.assertEqual(expand_tabs(b"ab\tc"), b"ab" + b" " * 6 + b"c")

    def test_tab_on_stop_boundary_still_advances_full_stop(self) -> None:
        self.assertEqual(expand_tabs(b"12345678\tz"), b"12345678" + b" " * 8 + b"z")

    def test_characters_after_tabs_land_on_tab_stops(self) -> None:
        for chars in (b"\ta", b"a\tb", b"abc\t\td", b"1234567\te"):
            line = Line(chars)
            self.assertGreaterEqual(len(line.render), len(line.chars))
            last = chars[-1:]
            self.assertEqual(line.render.rindex(last) % TAB_STOP, 0, chars)


class LineTests(unittest.TestCase):
    def test_insert_then_delete_restores_content(self) -> None:
        line = Line(b"hello")
        line.insert(2, ord("Z"))
        self.assertEqual(line.chars, b"heZllo")
        self.assertTrue(line.delete(2))
        self.assertEqual(line.chars, b"hello")

    def test_insert_clamps_out_of_range_column(self) -> None:
        line = Line(b"ab")
        line.insert(50, ord("c"))
        line.insert(-3, ord("_"))
        self.assertEqual(line.chars, b"_abc")

    def test_delete_out_of_range_is_ignored(self) -> None:
        line = Line(b"ab")
        self.assertFalse(line.delete(2))
        self.assertFalse(line.delete(-1))
        self.assertEqual(line.chars, b"ab")

    def test_highlight_tracks_render_length_after_every_mutation(self) -> None:
        line = Line(b"x\t1")
        self.assertEqual(len(line.highlight), len(line.render))
        line.insert(0, 0x09)
        self.assertEqual(len(line.highlight), len(line.render))
        line.append(b"\t22")
        self.assertEqual(len(line.highlight), len(line.render))
        line.delete(0)
        self.assertEqual(len(line.highlight), len(line.render))
        line.truncate(1)
        self.assertEqual(len(line.highlight), len(line.render))
        self.assertEqual(line.chars, b"x")

    def test_column_translation_through_tabs(self) -> None:
        line = Line(b"\tab")
        self.assertEqual(line.cx_to_rx(0), 0)
        self.assertEqual(line.cx_to_rx(1), 8)
        self.assertEqual(line.cx_to_rx(3), 10)
        self.assertEqual(line.rx_to_cx(3), 0)
        self.assertEqual(line.rx_to_cx(8), 1)
        self.assertEqual(line.rx_to_cx(9), 2)
        self.assertEqual(line.rx_to_cx(40), 3)

    def test_mark_match_and_restore_round_trip(self) -> None:
        line = Line(b"a 12 b")
        baseline = line.highlight
        saved = line.mark_match(2, 2)
        self.assertEqual(line.highlight[2:4], (Highlight.MATCH, Highlight.MATCH))
        line.restore_highlight(saved)
        self.assertEqual(line.highlight, baseline)


class RowStoreTests(unittest.TestCase):
    def test_loaded_lines_start_clean(self) -> None:
        store = RowStore([b"abc", b"a1b2"])
        self.assertEqual(len(store), 2)
        self.assertEqual(store.dirty, 0)

    def test_insert_char_scenario(self) -> None:
        store = RowStore([b"abc", b"a1b2"])
        store.insert_char(0, 1, ord("X"))
        self.assertEqual(store[0].chars, b"aXbc")
        self.assertEqual(store[1].chars, b"a1b2")
        self.assertEqual(store.dirty, 1)

    def test_insert_line_bounds(self) -> None:
        store = RowStore([b"a"])
        store.insert_line(5, b"nope")
        store.insert_line(-1, b"nope")
        self.assertEqual(len(store), 1)
        self.assertEqual(store.dirty, 0)
        store.insert_line(1, b"end")
        store.insert_line(0, b"start")
        self.assertEqual([line.chars for line in store], [b"start", b"a", b"end"])
        self.assertEqual(store.dirty, 2)

    def test_delete_line_bounds(self) -> None:
        store = RowStore([b"a", b"b"])
        store.delete_line(2)
        self.assertEqual(store.dirty, 0)
        store.delete_line(1)
        self.assertEqual([line.chars for line in store], [b"a"])
        self.assertEqual(store.dirty, 1)

    def test_delete_char_out_of_range_does_not_mark_dirty(self) -> None:
        store = RowStore([b"ab"])
        store.delete_char(0, 2)
        store.delete_char(3, 0)
        self.assertEqual(store.dirty, 0)
        store.delete_char(0, 0)
        self.assertEqual(store[0].chars, b"b")
        self.assertEqual(store.dirty, 1)

    def test_append_and_truncate(self) -> None:
        store = RowStore([b"head", b"tail"])
        store.append_text(0, b"-more")
        store.truncate_line(1, 2)
        self.assertEqual(store[0].chars, b"head-more")
        self.assertEqual(store[1].chars, b"ta")

    def test_to_bytes_terminates_every_line(self) -> None:
        store = RowStore([b"one", b"", b"\tthree"])
        self.assertEqual(store.to_bytes(), b"one\n\n\tthree\n")
        self.assertEqual(RowStore().to_bytes(), b"")

    def test_row_length_of_virtual_row_is_zero(self) -> None:
        store = RowStore([b"abc"])
        self.assertEqual(store.row_length(0), 3)
        self.assertEqual(store.row_length(1), 0)

    def test_mark_clean_resets_dirty(self) -> None:
        store = RowStore([b"x"])
        store.insert_char(0, 0, ord("y"))
        store.mark_clean()
        self.assertEqual(store.dirty, 0)


if __name__ == "__main__":
    unittest.main()
