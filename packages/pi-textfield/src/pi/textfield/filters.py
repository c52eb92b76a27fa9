"""Per-character input filters for numeric fields."""

from __future__ import annotations

from typing import Callable, Literal

CharFilter = Callable[[str], bool]

FilterName = Literal["string", "float", "integer", "unsigned"]

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_FLOAT_EXTRA = frozenset(".eE")


def accepts_unsigned_integer(char: str) -> bool:
    """ASCII digits only."""
    return char in _DIGITS


def accepts_integer(char: str) -> bool:
    return char in _DIGITS or char in _SIGNS


def accepts_float(char: str) -> bool:
    """Characters that can appear in a floating-point literal such as ``-1.5e3``."""
    return char in _DIGITS or char in _SIGNS or char in _FLOAT_EXTRA


_FILTERS: dict[str, CharFilter | None] = {
    "string": None,
    "float": accepts_float,
    "integer": accepts_integer,
    "unsigned": accepts_unsigned_integer,
}


def get_filter(name: FilterName) -> CharFilter | None:
    """Look up a filter by format name. ``"string"`` means unrestricted (None)."""
    try:
        return _FILTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown filter {name!r}; expected one of {', '.join(_FILTERS)}"
        ) from None
