"""pi-textfield: wrapping multi-line text field layout and cursor addressing."""

# Cursor navigation
from pi.textfield.cursor import CursorController, resolve_position

# Input filters
from pi.textfield.filters import (
    CharFilter,
    FilterName,
    accepts_float,
    accepts_integer,
    accepts_unsigned_integer,
    get_filter,
)

# Layout
from pi.textfield.layout import (
    Layout,
    LayoutError,
    Position,
    PositionKind,
    classify,
    compute_layout,
)

# Rendering
from pi.textfield.render import (
    DEFAULT_PLACEHOLDER,
    Cell,
    CursorFn,
    DrawFn,
    Frame,
    build_frame,
    emit_frame,
    try_build_frame,
)

# Text field
from pi.textfield.text_field import TextField, TextFieldOptions
from pi.textfield.text_store import TextStore
from pi.textfield.viewport import limit_frame

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "Cell",
    "CharFilter",
    "CursorController",
    "CursorFn",
    "DrawFn",
    "FilterName",
    "Frame",
    "Layout",
    "LayoutError",
    "Position",
    "PositionKind",
    "TextField",
    "TextFieldOptions",
    "TextStore",
    "accepts_float",
    "accepts_integer",
    "accepts_unsigned_integer",
    "build_frame",
    "classify",
    "compute_layout",
    "emit_frame",
    "get_filter",
    "limit_frame",
    "resolve_position",
    "try_build_frame",
]
