"""
candidates.py

Per-position colored-letter options for the dense hint.

Rules at position j (banned letters are dropped first):
1. Any green at j -> only the green(s). Greens are never optional.
2. Otherwise the yellows at j whose letter still has cap left once its
   confirmed greens are counted. A yellow for a letter with no green anywhere
   must also carry new information: either more copies are proven than greens
   account for, or it is "lonely" (the only row that ever colored the letter).
3. Every letter still owed a yellow (see sparse.owed_yellows) is also offered
   at j unless it was itself observed yellow at j. This is how a yellow gets
   moved to a slot it was never seen at.
4. Grays are offered only when nothing colored is left at j.

`build_candidates(..., sparse=True)` returns the sparse projection instead,
which never moves a yellow away from where it was observed.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Set, Union

from hintmerge.colors import Cell, LetterColor
from hintmerge.constraints import LetterConstraints
from hintmerge.observations import (
    PositionObservations,
    format_observations,
    green_positions,
    yellow_positions,
)
from hintmerge.sparse import SparseHints, owed_yellows, project

log = logging.getLogger(__name__)

DenseCandidates = List[List[Cell]]


def _sorted(cells) -> List[Cell]:
    return sorted(cells, key=lambda c: c.letter)


def _residual(letter: str, constraints: LetterConstraints, greens: Dict[str, Set[int]]) -> float:
    cap = constraints.cap(letter)
    limit = math.inf if cap is None else cap
    return limit - len(greens.get(letter, ()))


def _informative_yellow(
    letter: str,
    constraints: LetterConstraints,
    greens: Dict[str, Set[int]],
    keep_lonely_yellows: bool,
) -> bool:
    confirmed = len(greens.get(letter, ()))
    needs_extra_copy = constraints.max_colored.get(letter, 0) > confirmed
    lonely = constraints.colored_rows.get(letter, 0) == 1
    return needs_extra_copy or (keep_lonely_yellows and lonely)


def build_dense(
    obs: PositionObservations,
    constraints: LetterConstraints,
    *,
    keep_lonely_yellows: bool = True,
) -> DenseCandidates:
    greens_at = green_positions(obs)
    seen_yellow_at = yellow_positions(obs)
    owed = owed_yellows(obs, constraints)
    out: DenseCandidates = []

    for j, cells in enumerate(obs):
        live = [c for c in cells if c.letter not in constraints.banned]
        greens = [c for c in live if c.color is LetterColor.EXACT_MATCH]
        if greens:
            out.append(_sorted(greens))
            continue

        yellows = []
        for c in live:
            if c.color is not LetterColor.PARTIAL_MATCH:
                continue
            if _residual(c.letter, constraints, greens_at) <= 0:
                continue
            if c.letter not in greens_at and not _informative_yellow(
                c.letter, constraints, greens_at, keep_lonely_yellows
            ):
                continue
            yellows.append(c)

        # owed letters may move to any free slot, never one where they were seen yellow
        for ch in sorted(owed):
            if j not in seen_yellow_at.get(ch, ()):
                yellows.append(Cell(ch, LetterColor.PARTIAL_MATCH))

        if yellows:
            out.append(_sorted(yellows))
            continue

        out.append(_sorted(c for c in live if c.color is LetterColor.NO_MATCH))

    if log.isEnabledFor(logging.DEBUG):
        log.debug("observations=%s", format_observations(obs))
        log.debug("candidates=%s", [" ".join(str(c) for c in cs) for cs in out])
    return out


def build_candidates(
    obs: PositionObservations,
    constraints: LetterConstraints,
    *,
    sparse: bool = False,
    keep_lonely_yellows: bool = True,
) -> Union[DenseCandidates, SparseHints]:
    if sparse:
        return project(obs, constraints)
    return build_dense(obs, constraints, keep_lonely_yellows=keep_lonely_yellows)
