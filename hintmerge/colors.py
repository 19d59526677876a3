"""
colors.py

Feedback colors and the cell/row types every other module works with.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Sequence, Tuple


class LetterColor(IntEnum):
    """Per-cell feedback. Ordered by display priority (higher wins)."""

    NO_GUESS = 0
    NO_MATCH = 1
    PARTIAL_MATCH = 2
    EXACT_MATCH = 3

    @property
    def tag(self) -> str:
        return _TAGS[self]

    @property
    def is_colored(self) -> bool:
        """True for green and yellow."""
        return self is LetterColor.EXACT_MATCH or self is LetterColor.PARTIAL_MATCH

    @classmethod
    def from_pattern(cls, p: int) -> "LetterColor":
        """Map the classic 0/1/2 pattern value (gray/yellow/green) to a color."""
        if isinstance(p, LetterColor):
            return p
        if not isinstance(p, int) or isinstance(p, bool):
            raise TypeError(f"pattern value must be an int, got {type(p).__name__}")
        try:
            return _FROM_PATTERN[p]
        except KeyError:
            raise ValueError(f"pattern value must be in {{0,1,2}}, got {p}") from None


_TAGS = {
    LetterColor.EXACT_MATCH: "G",
    LetterColor.PARTIAL_MATCH: "Y",
    LetterColor.NO_MATCH: "X",
    LetterColor.NO_GUESS: "_",
}

_FROM_PATTERN = {
    0: LetterColor.NO_MATCH,
    1: LetterColor.PARTIAL_MATCH,
    2: LetterColor.EXACT_MATCH,
}

# Sentinel letter for blank/whitespace tokens.
EMPTY = ""


class Cell(NamedTuple):
    letter: str
    color: LetterColor

    def __str__(self) -> str:
        return f"{self.letter}{self.color.tag}"


EMPTY_CELL = Cell(EMPTY, LetterColor.NO_GUESS)

Row = Tuple[Cell, ...]


def row_key(row: Sequence[Cell]) -> str:
    """Canonical string key of a row: 'a|G;b|Y;|_;' style."""
    return "".join(f"{c.letter}|{c.color.tag};" for c in row)


def count_color(row: Sequence[Cell], color: LetterColor) -> int:
    return sum(1 for c in row if c.color is color)


def empty_row(width: int) -> Row:
    return tuple(EMPTY_CELL for _ in range(width))


def dense_grid(row: Sequence[Cell]) -> list[list[Cell]]:
    """
    Align a row by index as one list per position; positions without a
    guessed letter become empty lists.
    """
    return [[c] if c.color is not LetterColor.NO_GUESS else [] for c in row]


def format_row(row: Sequence[Cell]) -> str:
    """Human-readable form, e.g. '0:_ 1:_ 2:aG 3:_ 4:eG'."""
    return " ".join(f"{j}:{c.letter}{c.color.tag}" if c.letter else f"{j}:{c.color.tag}"
                    for j, c in enumerate(row))
