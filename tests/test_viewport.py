"""Tests for viewport scrolling and full-frame escape output."""

from __future__ import annotations

import unittest

from lazyedit import __version__
from lazyedit.document.cursor import Cursor
from lazyedit.document.store import RowStore
from lazyedit.render.status import StatusMessage, message_bar, status_bar
from lazyedit.render.viewport import Viewport


def _store(*lines: bytes) -> RowStore:
    store = RowStore()
    store.load(lines)
    return store


class ScrollTests(unittest.TestCase):
    def test_scroll_down_snaps_minimum_amount(self) -> None:
        store = _store(*[b"x"] * 50)
        viewport = Viewport(screen_rows=10, screen_cols=20)
        cursor = Cursor(cy=15)
        viewport.scroll(store, cursor)
        self.assertEqual(viewport.row_offset, 6)

    def test_scroll_up_snaps_to_cursor_row(self) -> None:
        store = _store(*[b"x"] * 50)
        viewport = Viewport(screen_rows=10, screen_cols=20, row_offset=30)
        cursor = Cursor(cy=12)
        viewport.scroll(store, cursor)
        self.assertEqual(viewport.row_offset, 12)

    def test_horizontal_scroll_uses_render_column(self) -> None:
        store = _store(b"\t\t\tabc")
        viewport = Viewport(screen_rows=5, screen_cols=10)
        cursor = Cursor(cx=3, cy=0)
        viewport.scroll(store, cursor)
        self.assertEqual(cursor.rx, 24)
        self.assertEqual(viewport.col_offset, 15)

        cursor.cx = 0
        viewport.scroll(store, cursor)
        self.assertEqual(viewport.col_offset, 0)

    def test_virtual_row_has_render_column_zero(self) -> None:
        store = _store(b"abc")
        viewport = Viewport(screen_rows=5, screen_cols=10)
        cursor = Cursor(cx=2, cy=1)
        viewport.scroll(store, cursor)
        self.assertEqual(cursor.rx, 0)

    def test_for_window_reserves_bar_rows(self) -> None:
        viewport = Viewport.for_window(24, 80)
        self.assertEqual((viewport.screen_rows, viewport.screen_cols), (22, 80))


class FrameTests(unittest.TestCase):
    def test_frame_layout_and_cursor_escape(self) -> None:
        store = _store(b"hello", b"a\tb")
        viewport = Viewport(screen_rows=3, screen_cols=12)
        frame = viewport.render(store, Cursor(cx=2, cy=1), filename="f.txt", message="hi")

        self.assertTrue(frame.startswith(b"\x1b[?25l\x1b[H"))
        self.assertTrue(frame.endswith(b"\x1b[2;9H\x1b[?25h"))
        body = frame[len(b"\x1b[?25l\x1b[H") :]
        self.assertTrue(
            body.startswith(
                b"hello\x1b[K\r\n"
                b"a       b\x1b[K\r\n"
                b"~\x1b[K\r\n"
            )
        )
        self.assertIn(b"\x1b[Khi\x1b[2;9H", frame)

    def test_rows_are_clipped_to_column_window(self) -> None:
        store = _store(b"0123456789abcdef")
        viewport = Viewport(screen_rows=1, screen_cols=4, col_offset=6)
        frame = viewport.render(store, Cursor(cx=8, cy=0))
        self.assertIn(b"\x1b[H6789\x1b[K\r\n", frame)
        self.assertTrue(frame.endswith(b"\x1b[1;3H\x1b[?25h"))

    def test_empty_document_shows_welcome_banner(self) -> None:
        viewport = Viewport(screen_rows=6, screen_cols=60)
        frame = viewport.render(RowStore(), Cursor())
        lines = frame.split(b"\r\n")
        welcome = f"Lazyedit editor -- version {__version__}".encode()
        self.assertTrue(lines[2].startswith(b"~ "))
        self.assertIn(welcome, lines[2])
        self.assertEqual(lines[1], b"~\x1b[K")

    def test_loaded_document_has_no_banner(self) -> None:
        viewport = Viewport(screen_rows=6, screen_cols=60)
        frame = viewport.render(_store(b"x"), Cursor())
        self.assertNotIn(b"version", frame)


class StatusBarTests(unittest.TestCase):
    def test_right_indicator_is_flush_right(self) -> None:
        bar = status_bar("doc.txt", 3, True, 0, 40)
        self.assertTrue(bar.startswith(b"\x1b[7m"))
        self.assertTrue(bar.endswith(b"1/3\x1b[m"))
        inner = bar[len(b"\x1b[7m") : -len(b"\x1b[m")]
        self.assertEqual(len(inner), 40)
        self.assertTrue(inner.startswith(b"doc.txt - 3 lines (modified)"))

    def test_placeholder_name_and_long_name_truncation(self) -> None:
        self.assertIn(b"[No Name] - 0 lines ", status_bar(None, 0, False, 0, 40))
        bar = status_bar("a" * 30, 1, False, 0, 60)
        self.assertIn(b"a" * 20 + b" - 1 lines", bar)
        self.assertNotIn(b"a" * 21, bar)

    def test_narrow_screen_truncates_and_drops_indicator(self) -> None:
        bar = status_bar("doc.txt", 3, False, 0, 5)
        self.assertEqual(bar, b"\x1b[7mdoc.t\x1b[m")


class MessageTests(unittest.TestCase):
    def test_message_expires_after_timeout(self) -> None:
        status = StatusMessage(timeout_seconds=5.0)
        status.set("saved", now=100.0)
        self.assertEqual(status.visible_text(now=104.9), "saved")
        self.assertEqual(status.visible_text(now=105.0), "")

    def test_message_bar_is_clipped(self) -> None:
        self.assertEqual(message_bar("abcdef", 3), b"\x1b[Kabc")


if __name__ == "__main__":
    unittest.main()
