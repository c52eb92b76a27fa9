"""Vertical scrolling: clip a frame to a window of rows around the cursor."""

from __future__ import annotations

from pi.textfield.render import Cell, Frame


def limit_frame(frame: Frame, limit: int) -> Frame:
    """Keep at most ``limit`` rows of ``frame``, always including the cursor row.

    The window ends on the cursor row once the cursor is past the first
    ``limit`` rows; rows are renumbered so the window starts at row 0.
    A limit of 0 disables clipping.
    """
    if limit == 0:
        return frame

    cursor_row, cursor_col = frame.cursor
    offset = max(0, cursor_row + 1 - limit)
    cells = [
        Cell(cell.row - offset, cell.col, cell.char)
        for cell in frame.cells
        if offset <= cell.row < offset + limit
    ]
    return Frame(
        cursor=(cursor_row - offset, cursor_col),
        height=min(frame.height, limit),
        cells=cells,
    )
