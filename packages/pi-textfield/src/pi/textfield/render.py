"""Frame building and emission for a text field.

Rendering is split in two steps. :func:`try_build_frame` walks the layout into
a detached :class:`Frame`, or returns ``None`` when the layout changed under
the walk; :func:`emit_frame` then replays a finished frame through the host's
callbacks. A frame is therefore either drawn completely or not at all.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Callable

from pi.textfield.layout import Layout, Position
from pi.textfield.text_store import TextStore

logger = logging.getLogger(__name__)

DrawFn = Callable[[int, int, str], None]
CursorFn = Callable[[int, int], None]

DEFAULT_PLACEHOLDER = "·"


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    char: str


@dataclass
class Frame:
    """Everything one render call draws."""

    cursor: tuple[int, int]
    height: int
    cells: list[Cell] = field(default_factory=list)


def build_frame(
    positions: Sequence[Position],
    chars: Sequence[str],
    cursor_index: int,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> Frame:
    """Walk a layout into a frame.

    Raises:
        IndexError: if ``positions``, ``chars`` and ``cursor_index`` disagree,
            i.e. the text changed after the layout was computed.
    """
    cells: list[Cell] = []
    for i, pos in enumerate(positions):
        if pos.kind == "symbol":
            cells.append(Cell(pos.row, pos.col, chars[i]))
        elif pos.kind == "space":
            cells.append(Cell(pos.row, pos.col, placeholder))

    cursor = positions[cursor_index]
    height = max(positions[-1].row + 1, 1)
    return Frame(cursor=(cursor.row, cursor.col), height=height, cells=cells)


def try_build_frame(
    layout: Layout,
    store: TextStore,
    cursor_index: int,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> Frame | None:
    """Build a frame, or return None if a concurrent edit left the layout in flux."""
    try:
        positions = layout.positions()
        return build_frame(positions, store.chars(), cursor_index, placeholder)
    except IndexError:
        logger.debug("Skipping frame: layout changed during render", exc_info=True)
        return None


def emit_frame(frame: Frame, draw: DrawFn, move_cursor: CursorFn | None = None) -> int:
    """Send a frame to the host callbacks and return its height."""
    for cell in frame.cells:
        draw(cell.row, cell.col, cell.char)
    if move_cursor is not None:
        move_cursor(*frame.cursor)
    return frame.height
