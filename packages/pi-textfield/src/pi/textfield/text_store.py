"""Mutable character storage for a text field."""

from __future__ import annotations


class TextStore:
    """Holds the field contents as a list of single characters.

    One list element is one logical unit; no grapheme clustering.
    """

    def __init__(self, text: str = "") -> None:
        self._chars: list[str] = list(text)

    def __len__(self) -> int:
        return len(self._chars)

    def get_text(self) -> str:
        return "".join(self._chars)

    def chars(self) -> list[str]:
        """Return a detached copy of the characters."""
        return list(self._chars)

    def set_text(self, text: str) -> bool:
        """Replace all content.

        Returns False (and leaves the store untouched) when ``text`` equals the
        current content, so callers can skip layout invalidation.
        """
        if len(text) == len(self._chars) and text == "".join(self._chars):
            return False
        self._chars = list(text)
        return True

    def insert(self, index: int, char: str) -> None:
        self._chars.insert(index, char)

    def remove(self, index: int) -> str:
        return self._chars.pop(index)
