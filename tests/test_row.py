"""Tests for tab expansion and logical/render column mapping.

Covers the render cache staying in sync with text after every mutation.
"""

from __future__ import annotations

import unittest

from lazyedit.document.row import Row, cx_to_rx, expand_tabs, rx_to_cx


class TabExpansionTests(unittest.TestCase):
    def test_tab_expands_to_next_tab_stop(self) -> None:
        self.assertEqual(expand_tabs(b"ab\tcd"), b"ab" + b" " * 6 + b"cd")

    def test_tab_on_stop_boundary_still_emits_full_width(self) -> None:
        self.assertEqual(expand_tabs(b"12345678\tx"), b"12345678" + b" " * 8 + b"x")

    def test_custom_tab_stop(self) -> None:
        self.assertEqual(expand_tabs(b"\ta\tb", tab_stop=4), b"    a   b")

    def test_carriage_return_does_not_reset_column(self) -> None:
        self.assertEqual(expand_tabs(b"a\r\tb", tab_stop=4), b"a\r  b")


class ColumnMappingTests(unittest.TestCase):
    def test_cx_to_rx_just_past_tab(self) -> None:
        self.assertEqual(cx_to_rx(b"ab\tcd", 3), 8)
        self.assertEqual(cx_to_rx(b"ab\tcd", 2), 2)
        self.assertEqual(cx_to_rx(b"ab\tcd", 5), 10)

    def test_rx_to_cx_inverts_cx_to_rx_without_tabs(self) -> None:
        text = b"hello world"
        for cx in range(len(text) + 1):
            self.assertEqual(rx_to_cx(text, cx_to_rx(text, cx)), cx)

    def test_rx_to_cx_inside_tab_returns_tab_column(self) -> None:
        text = b"ab\tcd"
        for rx in range(2, 8):
            self.assertEqual(rx_to_cx(text, rx), 2)
        self.assertEqual(rx_to_cx(text, 8), 3)

    def test_rx_to_cx_past_end_returns_length(self) -> None:
        self.assertEqual(rx_to_cx(b"abc", 50), 3)

    def test_cx_to_rx_is_monotonic_with_tabs(self) -> None:
        text = b"\ta\t\tbc\td"
        values = [cx_to_rx(text, cx) for cx in range(len(text) + 1)]
        self.assertEqual(values, sorted(values))


class RowMutationTests(unittest.TestCase):
    def test_render_tracks_every_mutation(self) -> None:
        row = Row(b"ab")
        row.insert(1, ord("\t"))
        self.assertEqual(row.render, b"a       b")
        row.delete(1)
        self.assertEqual(row.render, b"ab")
        row.append(b"\tz")
        self.assertEqual(row.render, b"ab      z")
        tail = row.truncate(2)
        self.assertEqual(tail, b"\tz")
        self.assertEqual(row.render, b"ab")

    def test_insert_then_delete_at_same_column_is_noop(self) -> None:
        row = Row(b"a\tbc")
        before = (bytes(row.text), row.render)
        row.insert(2, ord("x"))
        row.delete(2)
        self.assertEqual((bytes(row.text), row.render), before)

    def test_insert_out_of_range_appends(self) -> None:
        row = Row(b"ab")
        row.insert(99, ord("c"))
        row.insert(-1, ord("d"))
        self.assertEqual(bytes(row.text), b"abcd")

    def test_delete_out_of_range_is_rejected(self) -> None:
        row = Row(b"ab")
        self.assertFalse(row.delete(2))
        self.assertFalse(row.delete(-1))
        self.assertEqual(bytes(row.text), b"ab")

    def test_cx_to_rx_clamps_past_end(self) -> None:
        row = Row(b"a\t")
        self.assertEqual(row.cx_to_rx(10), 8)


if __name__ == "__main__":
    unittest.main()
