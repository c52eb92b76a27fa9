"""Wrap layout: maps every character of a text field to a screen cell.

The layout of ``n`` characters is a sequence of ``n + 1`` positions, one per
character plus a trailing ``"end"`` entry that marks the append position after
the last character. Rows never decrease along the sequence and the column
restarts at zero whenever the row advances.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

import wcwidth as _wcwidth

from pi.textfield.text_store import TextStore

logger = logging.getLogger(__name__)

PositionKind = Literal["symbol", "space", "newline", "end"]

# Extra scan steps tolerated on top of the text length before the scan is
# considered runaway.
_SCAN_SLACK = 1024


class LayoutError(RuntimeError):
    """The layout is inconsistent in a way that indicates a logic defect."""


@dataclass(frozen=True)
class Position:
    """Screen cell of one layout entry."""

    row: int
    col: int
    kind: PositionKind


def classify(char: str) -> PositionKind:
    """Classify a single character for layout purposes.

    ``' '`` is an ordinary symbol. Any other whitespace, and any non-printable
    control character, becomes ``"space"`` and is drawn as a placeholder.
    """
    if char == "\n":
        return "newline"
    if char == " ":
        return "symbol"
    if char.isspace() or char == "\x00" or _wcwidth.wcwidth(char) < 0:
        return "space"
    return "symbol"


def compute_layout(chars: Sequence[str], width: int) -> list[Position]:
    """Lay out ``chars`` in a grid ``width`` columns wide.

    One column is reserved for the cursor past the end of a row, so rows hold
    at most ``width - 1`` characters. Widths below 2 leave no room for a glyph
    and collapse the layout to a single ``"end"`` entry at (0, 0).

    Raises:
        LayoutError: if the scan runs past its iteration ceiling, which only
            happens when ``chars`` keeps growing while it is being scanned.
            :class:`Layout` always passes a detached copy; the ceiling guards
            callers that hand in a live sequence another actor is appending to.
    """
    if width < 2:
        return [Position(0, 0, "end")]

    wrap_width = width - 1
    ceiling = len(chars) + _SCAN_SLACK
    positions: list[Position] = []
    row = 0
    col = 0
    index = 0

    while index < len(chars):
        if index >= ceiling:
            raise LayoutError(f"layout scan exceeded {ceiling} steps")

        kind = classify(chars[index])
        positions.append(Position(row, col, kind))

        col += 1
        # A newline break and a width break at the same cell produce one break.
        if kind == "newline" or col >= wrap_width:
            row += 1
            col = 0
        index += 1

    positions.append(Position(row, col, "end"))
    return positions


class Layout:
    """Lazily recomputed layout of a :class:`TextStore` at a given width.

    The cache is marked stale by width changes and content edits and is only
    rebuilt when :meth:`positions` is next read.
    """

    def __init__(self, store: TextStore) -> None:
        self._store = store
        self._width: int | None = None
        self._stale = True
        self._positions: tuple[Position, ...] = ()

    @property
    def width(self) -> int | None:
        return self._width

    @property
    def stale(self) -> bool:
        return self._stale

    def set_width(self, width: int) -> None:
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        if width != self._width:
            self._width = width
            self._stale = True

    def invalidate(self) -> None:
        self._stale = True

    def size(self) -> int:
        """Length the layout has (or will have once recomputed)."""
        width = self._require_width()
        if width < 2:
            return 1
        return len(self._store) + 1

    def positions(self) -> tuple[Position, ...]:
        """Return the current layout, recomputing it first if stale."""
        self._require_width()
        if self._stale:
            # Cleared before width and text are read: a width change or edit
            # racing this recompute marks the cache stale again and the next
            # read picks it up.
            self._stale = False
            width = self._require_width()
            chars = self._store.chars()
            try:
                positions = tuple(compute_layout(chars, width))
            except BaseException:
                self._stale = True
                raise
            self._positions = positions
            logger.debug(
                "Recomputed layout: %d chars at width %d -> %d rows",
                len(chars),
                width,
                positions[-1].row + 1,
            )
        return self._positions

    def _require_width(self) -> int:
        if self._width is None:
            raise RuntimeError("width is not set")
        return self._width
