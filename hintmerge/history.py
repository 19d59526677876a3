"""
history.py

Guess histories for the two participants and the width normalization applied
before any reasoning: rows narrower than the board are right-padded with
NO_GUESS cells, wider rows are cut to the board width, and every letter is
normalized.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from hintmerge.colors import EMPTY, EMPTY_CELL, Cell, LetterColor, Row
from hintmerge.normalize import Alphabet, DEFAULT_ALPHABET, normalize

DEFAULT_WIDTH = 5


def coerce_cell(cell, alphabet: Alphabet = DEFAULT_ALPHABET) -> Cell:
    """Accept a Cell or a (letter, color) pair; color may be a LetterColor or a 0/1/2 int."""
    try:
        letter, color = cell
    except (TypeError, ValueError) as e:
        raise TypeError(f"cell must be a (letter, color) pair, got {cell!r}") from e
    color = LetterColor.from_pattern(color)
    letter = normalize(letter, alphabet)
    if letter == EMPTY:
        # no letter means no observation, whatever the color says
        return EMPTY_CELL
    return Cell(letter, color)


def pad_row(row: Iterable, width: int, alphabet: Alphabet = DEFAULT_ALPHABET) -> Row:
    cells = [coerce_cell(c, alphabet) for c in row][:width]
    if len(cells) < width:
        cells.extend([EMPTY_CELL] * (width - len(cells)))
    return tuple(cells)


@dataclass(frozen=True)
class HistorySet:
    """Two independent, ordered row sequences: the human's and the AI's."""

    human: Tuple[Row, ...] = field(default_factory=tuple)
    ai: Tuple[Row, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, human: Optional[Iterable] = None, ai: Optional[Iterable] = None) -> "HistorySet":
        """Snapshot the given row sequences (each row copied to a tuple)."""
        return cls(
            tuple(tuple(r) for r in (human or ())),
            tuple(tuple(r) for r in (ai or ())),
        )

    def infer_width(self, default: int = DEFAULT_WIDTH) -> int:
        """Board width: the widest recorded row, or `default` when there are no rows."""
        widths = [len(r) for r in self.human + self.ai]
        return max(widths) if widths and max(widths) > 0 else default

    def rows(self, width: int, alphabet: Alphabet = DEFAULT_ALPHABET) -> List[Row]:
        """All rows from both participants, normalized and padded to `width`."""
        return list(self.iter_rows(width, alphabet))

    def iter_rows(self, width: int, alphabet: Alphabet = DEFAULT_ALPHABET) -> Iterator[Row]:
        for row in self.human:
            yield pad_row(row, width, alphabet)
        for row in self.ai:
            yield pad_row(row, width, alphabet)

