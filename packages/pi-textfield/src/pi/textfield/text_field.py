"""TextField - multi-line wrapping text input addressed on a row/column grid."""

from __future__ import annotations

from dataclasses import dataclass

from pi.textfield.cursor import CursorController
from pi.textfield.filters import CharFilter
from pi.textfield.layout import Layout, Position
from pi.textfield.render import (
    DEFAULT_PLACEHOLDER,
    CursorFn,
    DrawFn,
    emit_frame,
    try_build_frame,
)
from pi.textfield.text_store import TextStore
from pi.textfield.viewport import limit_frame


@dataclass
class TextFieldOptions:
    width: int | None = None
    line_limit: int = 0
    placeholder: str = DEFAULT_PLACEHOLDER
    accepts: CharFilter | None = None


class TextField:
    """Wrapping text field.

    The host supplies the width, feeds edits and movements, and calls
    :meth:`render` with its own drawing callbacks. Layout is recomputed lazily
    on the first read after the text or width changed.

    Every operation other than construction and :meth:`set_text` requires a
    width to have been set and raises ``RuntimeError`` otherwise.
    """

    def __init__(self, text: str = "", options: TextFieldOptions | None = None) -> None:
        if options is None:
            options = TextFieldOptions()

        if len(options.placeholder) != 1:
            raise ValueError(
                f"placeholder must be a single character, got {options.placeholder!r}"
            )

        self._store = TextStore(text)
        self._layout = Layout(self._store)
        self._cursor = CursorController(self._layout)
        self._placeholder = options.placeholder
        self._accepts: CharFilter | None = options.accepts
        self._line_limit = 0
        self._last_height = 1

        self.set_line_limit(options.line_limit)
        if options.width is not None:
            self.set_width(options.width)

    # -- Configuration -------------------------------------------------------

    @property
    def width(self) -> int | None:
        return self._layout.width

    def set_width(self, width: int) -> None:
        self._layout.set_width(width)
        self._cursor.clamp()

    @property
    def line_limit(self) -> int:
        return self._line_limit

    def set_line_limit(self, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"line limit must be non-negative, got {limit}")
        self._line_limit = limit

    def set_filter(self, accepts: CharFilter | None) -> None:
        self._accepts = accepts

    # -- Text access ---------------------------------------------------------

    def get_text(self) -> str:
        return self._store.get_text()

    def set_text(self, text: str) -> None:
        if not self._store.set_text(text):
            return
        self._layout.invalidate()
        if self._layout.width is not None:
            self._cursor.clamp()

    def layout(self) -> tuple[Position, ...]:
        """Current layout, one entry per character plus the trailing end entry."""
        return self._layout.positions()

    # -- Cursor --------------------------------------------------------------

    @property
    def cursor(self) -> int:
        self._cursor.clamp()
        return self._cursor.index

    def cursor_position(self) -> Position:
        return self._cursor.position()

    def move_left(self) -> None:
        self._cursor.move_left()

    def move_right(self) -> None:
        self._cursor.move_right()

    def move_up(self) -> None:
        self._cursor.move_up()

    def move_down(self) -> None:
        self._cursor.move_down()

    def move_home(self) -> None:
        self._cursor.move_home()

    def move_end(self) -> None:
        self._cursor.move_end()

    def page_up(self, rows: int | None = None) -> None:
        """Move up a page; the page defaults to the line limit (or one row)."""
        self._cursor.page_up(self._page_rows(rows))

    def page_down(self, rows: int | None = None) -> None:
        self._cursor.page_down(self._page_rows(rows))

    def seek(self, row: int, col: int) -> None:
        self._cursor.seek(row, col)

    def _page_rows(self, rows: int | None) -> int:
        if rows is not None:
            return rows
        return max(self._line_limit, 1)

    # -- Editing -------------------------------------------------------------

    def insert(self, char: str) -> None:
        """Insert one character at the cursor unless the filter rejects it."""
        if len(char) != 1:
            raise ValueError(f"insert expects a single character, got {char!r}")
        self._cursor.clamp()
        if self._accepts is not None and not self._accepts(char):
            return

        index = min(self._cursor.index, len(self._store))
        self._store.insert(index, char)
        self._layout.invalidate()
        self._cursor.set_index(index + 1)

    def insert_text(self, text: str) -> None:
        """Insert ``text`` character by character, as if typed."""
        for char in text:
            self.insert(char)

    def backspace(self) -> None:
        self._cursor.clamp()
        index = self._cursor.index
        if index == 0 or len(self._store) == 0:
            return

        self._store.remove(index - 1)
        self._layout.invalidate()
        self._cursor.set_index(index - 1)

    def delete(self) -> None:
        self._cursor.clamp()
        index = self._cursor.index
        if index >= self._layout.size() - 1 or index >= len(self._store):
            return

        self._store.remove(index)
        self._layout.invalidate()
        self._cursor.clamp()

    # -- Rendering -----------------------------------------------------------

    def render(self, draw: DrawFn, move_cursor: CursorFn | None = None) -> int:
        """Draw the field and return the number of rows it occupies.

        When the line limit is set, only the rows of the scrolled window are
        drawn and the returned height is capped at the limit. A frame that
        could not be built consistently is skipped entirely; the height of the
        last drawn frame is returned in that case.
        """
        self._cursor.clamp()
        frame = try_build_frame(
            self._layout, self._store, self._cursor.index, self._placeholder
        )
        if frame is None:
            return self._last_height

        frame = limit_frame(frame, self._line_limit)
        self._last_height = emit_frame(frame, draw, move_cursor)
        return self._last_height
