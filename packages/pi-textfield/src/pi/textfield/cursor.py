"""Cursor navigation over a wrap layout."""

from __future__ import annotations

from collections.abc import Sequence

from pi.textfield.layout import Layout, LayoutError, Position


def resolve_position(positions: Sequence[Position], row: int, col: int) -> int:
    """Resolve a screen coordinate to the nearest valid layout index.

    Coordinates past the last entry resolve to the trailing ``"end"`` entry.
    A column past the end of a row resolves to the last entry of that row.

    Raises:
        LayoutError: if no candidate exists, which a well-formed layout never
            allows.
    """
    row = max(row, 0)
    col = max(col, 0)
    if row == 0 and col == 0:
        return 0

    last = positions[-1]
    if row > last.row or (row == last.row and col >= last.col):
        return len(positions) - 1

    for i, pos in enumerate(positions):
        if pos.row == row and pos.col == col:
            return i
        if pos.row == row + 1 and i > 0:
            return i - 1

    # Best effort: last entry in the requested column.
    for i in range(len(positions) - 1, -1, -1):
        if positions[i].col == col:
            return i

    raise LayoutError(f"no layout position for row {row}, col {col}")


class CursorController:
    """Index into a :class:`Layout`, kept in range before and after each move.

    Vertical moves land on the nearest column that does not exceed the
    current one; there is no sticky preferred column.
    """

    def __init__(self, layout: Layout) -> None:
        self._layout = layout
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def set_index(self, index: int) -> None:
        self._index = index
        self.clamp()

    def clamp(self) -> None:
        size = self._layout.size()
        if self._index >= size:
            self._index = size - 1
        if self._index < 0:
            self._index = 0

    def position(self) -> Position:
        self.clamp()
        return self._layout.positions()[self._index]

    # -- Horizontal ----------------------------------------------------------

    def move_left(self) -> None:
        self.clamp()
        if self._index > 0:
            self._index -= 1
        self.clamp()

    def move_right(self) -> None:
        self.clamp()
        if self._index < self._layout.size() - 1:
            self._index += 1
        self.clamp()

    def move_home(self) -> None:
        """Move to the first entry of the current visual row."""
        self.clamp()
        positions = self._layout.positions()
        row = positions[self._index].row
        while self._index > 0 and positions[self._index - 1].row == row:
            self._index -= 1
        self.clamp()

    def move_end(self) -> None:
        """Move to the last entry of the current visual row."""
        self.clamp()
        positions = self._layout.positions()
        row = positions[self._index].row
        while self._index < len(positions) - 1 and positions[self._index + 1].row == row:
            self._index += 1
        self.clamp()

    # -- Vertical ------------------------------------------------------------

    def move_up(self) -> None:
        self.clamp()
        positions = self._layout.positions()
        current = positions[self._index]
        target_row = current.row - 1
        for i in range(self._index - 1, -1, -1):
            pos = positions[i]
            if pos.row < target_row:
                break
            if pos.row == target_row and pos.col <= current.col:
                self._index = i
                break
        self.clamp()

    def move_down(self) -> None:
        self.clamp()
        positions = self._layout.positions()
        current = positions[self._index]
        if current.row < positions[-1].row:
            self._index = resolve_position(positions, current.row + 1, current.col)
        self.clamp()

    def page_up(self, rows: int) -> None:
        """Move up by ``rows`` visual rows, stopping at the first row."""
        for _ in range(max(rows, 0)):
            before = self._index
            self.move_up()
            if self._index == before:
                break

    def page_down(self, rows: int) -> None:
        """Move down by ``rows`` visual rows, stopping at the last row."""
        for _ in range(max(rows, 0)):
            before = self._index
            self.move_down()
            if self._index == before:
                break

    def seek(self, row: int, col: int) -> None:
        """Place the cursor at the layout entry nearest to (row, col)."""
        self.clamp()
        self._index = resolve_position(self._layout.positions(), row, col)
        self.clamp()
