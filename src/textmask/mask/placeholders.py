"""Placeholder kinds and the ASCII character-class filters behind them."""

from __future__ import annotations

import string
from enum import Enum
from typing import Callable, Dict, Optional

_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_DIGITS = frozenset(string.digits)
_ASCII_ALNUM = _ASCII_LETTERS | _ASCII_DIGITS


class PlaceholderKind(str, Enum):
    """Pattern symbols that stand for one filtered input character."""

    ALPHANUMERIC = "*"
    LETTER = "@"
    LOWER_LETTER = "a"
    UPPER_LETTER = "A"
    DIGIT = "#"

    @property
    def symbol(self) -> str:
        return self.value

    def accept(self, char: str) -> Optional[str]:
        """Return ``char`` (case-folded where the kind demands it) or ``None``."""

        return _FILTERS[self](char)

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["PlaceholderKind"]:
        """Return the kind for a pattern character, or ``None`` for literals."""

        return _BY_SYMBOL.get(symbol)


def filter_alphanumeric(char: str) -> Optional[str]:
    return char if char in _ASCII_ALNUM else None


def filter_letter(char: str) -> Optional[str]:
    return char if char in _ASCII_LETTERS else None


def filter_lower_letter(char: str) -> Optional[str]:
    return char.lower() if char in _ASCII_LETTERS else None


def filter_upper_letter(char: str) -> Optional[str]:
    return char.upper() if char in _ASCII_LETTERS else None


def filter_digit(char: str) -> Optional[str]:
    return char if char in _ASCII_DIGITS else None


def sanitize(value: str) -> str:
    """Strip every character that is not an ASCII letter or digit."""

    return "".join(char for char in value if char in _ASCII_ALNUM)


_FILTERS: Dict[PlaceholderKind, Callable[[str], Optional[str]]] = {
    PlaceholderKind.ALPHANUMERIC: filter_alphanumeric,
    PlaceholderKind.LETTER: filter_letter,
    PlaceholderKind.LOWER_LETTER: filter_lower_letter,
    PlaceholderKind.UPPER_LETTER: filter_upper_letter,
    PlaceholderKind.DIGIT: filter_digit,
}

_BY_SYMBOL: Dict[str, PlaceholderKind] = {kind.value: kind for kind in PlaceholderKind}


__all__ = [
    "PlaceholderKind",
    "filter_alphanumeric",
    "filter_digit",
    "filter_letter",
    "filter_lower_letter",
    "filter_upper_letter",
    "sanitize",
]
