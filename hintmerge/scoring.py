"""
scoring.py

Entropy ranking of composite rows.

For position j the denominator is the summed weight of the distinct colored
candidates at j (1.0 when there are none). A row scores

    sum over colored cells of  -log2(weight(color) / denom[j])

with green weighted above yellow. The best row maximizes the score; ties go
to more greens, then to the smallest canonical row key, so selection is a
total order and never depends on iteration order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from hintmerge.colors import Cell, LetterColor, Row, count_color, empty_row, row_key

log = logging.getLogger(__name__)

GREEN_WEIGHT = 3.0
YELLOW_WEIGHT = 1.0


def weight(color: LetterColor, green_weight: float = GREEN_WEIGHT, yellow_weight: float = YELLOW_WEIGHT) -> float:
    if color is LetterColor.EXACT_MATCH:
        return green_weight
    if color is LetterColor.PARTIAL_MATCH:
        return yellow_weight
    return 0.0


def position_denominators(
    columns: Sequence[Iterable[Cell]],
    green_weight: float = GREEN_WEIGHT,
    yellow_weight: float = YELLOW_WEIGHT,
) -> np.ndarray:
    """Summed weight of the distinct colored cells in each column, floored at 1.0."""
    denom = np.ones(len(columns), dtype=np.float64)
    for j, cells in enumerate(columns):
        uniq = {c for c in cells if c.color.is_colored}
        total = sum(weight(c.color, green_weight, yellow_weight) for c in uniq)
        denom[j] = max(total, 1.0)
    return denom


def entropy_score(
    row: Sequence[Cell],
    denom: np.ndarray,
    green_weight: float = GREEN_WEIGHT,
    yellow_weight: float = YELLOW_WEIGHT,
) -> float:
    idx = [j for j, c in enumerate(row) if c.color.is_colored]
    if not idx:
        return 0.0
    w = np.array([weight(row[j].color, green_weight, yellow_weight) for j in idx])
    return float(np.sum(-np.log2(w / denom[idx])))


def _rank_key(scored: Tuple[Row, float]) -> Tuple[float, int, str]:
    row, score = scored
    return (-score, -count_color(row, LetterColor.EXACT_MATCH), row_key(row))


def select_best(
    rows: Sequence[Row],
    candidates: Sequence[Sequence[Cell]],
    green_weight: float = GREEN_WEIGHT,
    yellow_weight: float = YELLOW_WEIGHT,
) -> Row:
    """Highest-entropy row; an all-empty row when `rows` is empty."""
    if not rows:
        return empty_row(len(candidates))
    denom = position_denominators(candidates, green_weight, yellow_weight)
    scored: List[Tuple[Row, float]] = [
        (tuple(r), entropy_score(r, denom, green_weight, yellow_weight)) for r in rows
    ]
    best = min(scored, key=_rank_key)
    log.debug("best score=%.4f of %d rows", best[1], len(scored))
    return best[0]


def best_entropy_row(
    rows: Sequence[Sequence[Cell]],
    green_weight: float = GREEN_WEIGHT,
    yellow_weight: float = YELLOW_WEIGHT,
) -> Optional[Row]:
    """
    Pick the best of an arbitrary list of equal-width rows, using the rows
    themselves (column by column) as the candidate distribution.
    Returns None for an empty list.
    """
    if not rows:
        return None
    width = len(rows[0])
    columns = [[r[j] for r in rows] for j in range(width)]
    return select_best([tuple(r) for r in rows], columns, green_weight, yellow_weight)
