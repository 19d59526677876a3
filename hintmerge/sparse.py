"""
sparse.py

Cheap, non-enumerative hint: only informative positions are returned.
- greens stay locked where they were seen
- a letter still owed as yellow is shown only at positions where it was
  actually observed yellow (never rehomed), and never where the same letter
  is green
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from hintmerge.colors import Cell, LetterColor
from hintmerge.constraints import LetterConstraints
from hintmerge.observations import PositionObservations, green_positions, yellow_positions

log = logging.getLogger(__name__)

SparseHints = List[Tuple[int, List[Cell]]]


def owed_yellows(obs: PositionObservations, constraints: LetterConstraints) -> Dict[str, int]:
    """
    letter -> yellow placements still owed: the largest colored count proven
    in one row (bounded by the cap) minus the distinct green positions.
    """
    greens = green_positions(obs)
    need: Dict[str, int] = {}
    for ch, proven in constraints.max_colored.items():
        if ch in constraints.banned:
            continue
        cap = constraints.cap(ch)
        must = proven if cap is None else min(proven, cap)
        still = must - len(greens.get(ch, ()))
        if still > 0:
            need[ch] = still
    return need


def project(obs: PositionObservations, constraints: LetterConstraints) -> SparseHints:
    greens = green_positions(obs)
    yellows = yellow_positions(obs)

    assigned: Dict[int, List[str]] = {}
    for ch, k in sorted(owed_yellows(obs, constraints).items()):
        homes = sorted(yellows.get(ch, set()) - greens.get(ch, set()))
        if not homes:
            # nowhere it was actually seen as yellow; nothing to show
            continue
        for t in range(k):
            assigned.setdefault(homes[t % len(homes)], []).append(ch)

    out: SparseHints = []
    for j, cells in enumerate(obs):
        bucket = [
            c for c in sorted(cells, key=lambda c: c.letter)
            if c.color is LetterColor.EXACT_MATCH and c.letter not in constraints.banned
        ]
        bucket.extend(Cell(ch, LetterColor.PARTIAL_MATCH) for ch in sorted(assigned.get(j, ())))
        if bucket:
            out.append((j, bucket))

    log.debug("sparse=%s", [(j, " ".join(str(c) for c in cs)) for j, cs in out])
    return out
