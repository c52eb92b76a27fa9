"""Tests for pi.textfield.viewport.limit_frame -- vertical scrolling."""

from __future__ import annotations

from pi.textfield.render import Cell, Frame
from pi.textfield.viewport import limit_frame


def _column_frame(rows: int, cursor_row: int) -> Frame:
    """One cell per row, labelled with the row number."""
    return Frame(
        cursor=(cursor_row, 1),
        height=rows,
        cells=[Cell(r, 0, str(r)) for r in range(rows)],
    )


class TestLimitFrame:
    """Rows outside the window around the cursor are dropped."""

    def test_zero_limit_is_passthrough(self) -> None:
        frame = _column_frame(5, 4)
        assert limit_frame(frame, 0) is frame

    def test_cursor_near_top_shows_first_rows(self) -> None:
        limited = limit_frame(_column_frame(5, 0), 2)
        assert [c.char for c in limited.cells] == ["0", "1"]
        assert limited.cursor == (0, 1)
        assert limited.height == 2

    def test_cursor_on_last_row_scrolls_to_bottom(self) -> None:
        limited = limit_frame(_column_frame(5, 4), 2)
        assert limited.cells == [Cell(0, 0, "3"), Cell(1, 0, "4")]
        assert limited.cursor == (1, 1)
        assert limited.height == 2

    def test_cursor_row_is_last_visible_row(self) -> None:
        limited = limit_frame(_column_frame(10, 6), 3)
        assert [c.char for c in limited.cells] == ["4", "5", "6"]
        assert limited.cursor == (2, 1)

    def test_short_content_keeps_its_height(self) -> None:
        limited = limit_frame(_column_frame(1, 0), 3)
        assert limited.height == 1
        assert limited.cells == [Cell(0, 0, "0")]
