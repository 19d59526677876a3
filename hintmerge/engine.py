"""
engine.py

Merges the human's and the AI's guess histories into one consolidated hint.

API
---
best_composite_row(human_history, ai_history, *, width=None) -> Row
    Dense mode: enumerate every consistent composite row and return the one
    with the highest entropy score. No information -> an all-empty row.

sparse_hint_map(human_history, ai_history, *, width=None) -> list[(index, [Cell])]
    Sparse mode: locked greens plus yellows at their observed positions only.
    Positions with nothing to show are omitted.

Histories are sequences of rows; a row is a sequence of Cell or (letter,
color) pairs. Everything is recomputed from the histories on every call and
nothing is kept between calls, so an engine may be shared freely as long as
callers do not mutate a history while a call is running.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from hintmerge.candidates import build_candidates
from hintmerge.colors import Row
from hintmerge.constraints import LetterConstraints, aggregate
from hintmerge.enumeration import enumerate_rows
from hintmerge.feedback import SUPPORTED_WIDTHS
from hintmerge.history import DEFAULT_WIDTH, HistorySet
from hintmerge.normalize import Alphabet, DEFAULT_ALPHABET
from hintmerge.observations import PositionObservations, observe
from hintmerge.scoring import GREEN_WEIGHT, YELLOW_WEIGHT, select_best
from hintmerge.sparse import SparseHints

log = logging.getLogger(__name__)


class HintEngine:
    def __init__(
        self,
        *,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        green_weight: float = GREEN_WEIGHT,
        yellow_weight: float = YELLOW_WEIGHT,
        keep_lonely_yellows: bool = True,
        default_width: int = DEFAULT_WIDTH,
    ) -> None:
        if not isinstance(alphabet, Alphabet):
            raise TypeError("alphabet must be an Alphabet")
        green_weight = float(green_weight)
        yellow_weight = float(yellow_weight)
        if green_weight <= 0 or yellow_weight <= 0:
            raise ValueError("weights must be positive")
        if green_weight < yellow_weight:
            raise ValueError("green_weight must be >= yellow_weight")
        if default_width not in SUPPORTED_WIDTHS:
            raise ValueError(f"default_width must be one of {SUPPORTED_WIDTHS}")

        self.alphabet = alphabet
        self.green_weight = green_weight
        self.yellow_weight = yellow_weight
        self.keep_lonely_yellows = bool(keep_lonely_yellows)
        self.default_width = int(default_width)

    # -------------------------
    # Public queries
    # -------------------------
    def best_composite_row(
        self,
        human_history: Optional[Iterable] = None,
        ai_history: Optional[Iterable] = None,
        *,
        width: Optional[int] = None,
    ) -> Row:
        obs, constraints, _ = self._prepare(human_history, ai_history, width)
        candidates = build_candidates(obs, constraints, keep_lonely_yellows=self.keep_lonely_yellows)
        rows = enumerate_rows(candidates, constraints)
        return select_best(rows, candidates, self.green_weight, self.yellow_weight)

    def sparse_hint_map(
        self,
        human_history: Optional[Iterable] = None,
        ai_history: Optional[Iterable] = None,
        *,
        width: Optional[int] = None,
    ) -> SparseHints:
        obs, constraints, _ = self._prepare(human_history, ai_history, width)
        return build_candidates(obs, constraints, sparse=True)

    def constraints(
        self,
        human_history: Optional[Iterable] = None,
        ai_history: Optional[Iterable] = None,
        *,
        width: Optional[int] = None,
    ) -> LetterConstraints:
        """Caps and bans derived from both histories (for inspection)."""
        return self._prepare(human_history, ai_history, width)[1]

    # -------------------------
    # Helpers
    # -------------------------
    def _prepare(
        self,
        human_history: Optional[Iterable],
        ai_history: Optional[Iterable],
        width: Optional[int],
    ) -> Tuple[PositionObservations, LetterConstraints, int]:
        history = HistorySet.of(human_history, ai_history)
        n = history.infer_width(self.default_width) if width is None else int(width)
        if n <= 0:
            raise ValueError(f"width must be positive, got {n}")
        rows: List[Row] = history.rows(n, self.alphabet)
        log.debug("merging %d human + %d ai rows at width %d", len(history.human), len(history.ai), n)
        return observe(rows, n), aggregate(rows), n


_default_engine = HintEngine()


def best_composite_row(human_history=None, ai_history=None, *, width: Optional[int] = None) -> Row:
    return _default_engine.best_composite_row(human_history, ai_history, width=width)


def sparse_hint_map(human_history=None, ai_history=None, *, width: Optional[int] = None) -> SparseHints:
    return _default_engine.sparse_hint_map(human_history, ai_history, width=width)
