"""
enumeration.py

Depth-first search over positions, picking one candidate per position, to
list every unique internally consistent composite row.

Pruning along a path:
- a position holding any green explores only its greens
- green + yellow placements of a letter never exceed the letter's cap
- at most one gray per letter per row
- a position with no candidates, or none placeable on the current path, is
  left as an empty cell
Rows without a single colored cell are dropped.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Sequence

from hintmerge.colors import EMPTY_CELL, Cell, LetterColor, Row, row_key
from hintmerge.constraints import LetterConstraints

log = logging.getLogger(__name__)


def _options(cands: Sequence[Cell]) -> List[Cell]:
    greens = [c for c in cands if c.color is LetterColor.EXACT_MATCH]
    return greens if greens else list(cands)


def enumerate_rows(candidates: Sequence[Sequence[Cell]], constraints: LetterConstraints) -> List[Row]:
    """All unique valid rows, in discovery order."""
    n = len(candidates)
    options = [_options(c) for c in candidates]
    results: Dict[str, Row] = {}

    row: List[Cell] = [EMPTY_CELL] * n
    used_colored: Counter = Counter()
    used_gray: Counter = Counter()

    def dfs(j: int) -> None:
        if j == n:
            if any(c.color.is_colored for c in row):
                key = row_key(row)
                if key not in results:
                    results[key] = tuple(row)
            return

        placed = False
        for cell in options[j]:
            if cell.color.is_colored:
                if not constraints.allows(cell.letter, used_colored[cell.letter] + 1):
                    continue
                used_colored[cell.letter] += 1
                row[j] = cell
                dfs(j + 1)
                used_colored[cell.letter] -= 1
            elif cell.color is LetterColor.NO_MATCH:
                if used_gray[cell.letter] >= 1:
                    continue
                used_gray[cell.letter] += 1
                row[j] = cell
                dfs(j + 1)
                used_gray[cell.letter] -= 1
            else:
                row[j] = cell
                dfs(j + 1)
            placed = True

        row[j] = EMPTY_CELL
        if not placed:
            dfs(j + 1)

    if n:
        dfs(0)
    log.debug("enumerated %d rows", len(results))
    return list(results.values())
