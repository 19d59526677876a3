"""
observations.py

Per-position index of every (letter, color) pair seen across all histories.
The merge is a set union per position, so the order in which rows (or
participants) are folded in never changes the result.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Sequence, Set

from hintmerge.colors import EMPTY, Cell, LetterColor

PositionObservations = List[FrozenSet[Cell]]


def observe(rows: Iterable[Sequence[Cell]], width: int) -> PositionObservations:
    seen: List[Set[Cell]] = [set() for _ in range(width)]
    for row in rows:
        for j, cell in enumerate(row[:width]):
            if cell.color is LetterColor.NO_GUESS or cell.letter == EMPTY:
                continue
            seen[j].add(cell)
    return [frozenset(s) for s in seen]


def merge(a: PositionObservations, b: PositionObservations) -> PositionObservations:
    """Union two indexes position by position (widths may differ)."""
    width = max(len(a), len(b))
    out: PositionObservations = []
    for j in range(width):
        left = a[j] if j < len(a) else frozenset()
        right = b[j] if j < len(b) else frozenset()
        out.append(left | right)
    return out


def positions_by_color(obs: PositionObservations, color: LetterColor) -> Dict[str, Set[int]]:
    """letter -> positions where that letter was observed with `color`."""
    out: Dict[str, Set[int]] = {}
    for j, cells in enumerate(obs):
        for cell in cells:
            if cell.color is color:
                out.setdefault(cell.letter, set()).add(j)
    return out


def green_positions(obs: PositionObservations) -> Dict[str, Set[int]]:
    return positions_by_color(obs, LetterColor.EXACT_MATCH)


def yellow_positions(obs: PositionObservations) -> Dict[str, Set[int]]:
    return positions_by_color(obs, LetterColor.PARTIAL_MATCH)


def format_observations(obs: PositionObservations) -> List[str]:
    return [" ".join(sorted(str(c) for c in cells)) for cells in obs]
