"""
constraints.py

Derives letter-level constraints from every history row:
- cap: upper bound on how many times a letter may be shown colored
- banned: letters proven absent from the secret (cap forced to 0)

Rows are folded one at a time into a ConstraintState; `aggregate` is the
one-shot helper over a full row list.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Sequence, Set

from hintmerge.colors import EMPTY, Cell, LetterColor

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LetterConstraints:
    """
    Result of aggregation.

    caps         letter -> max colored occurrences (missing = unbounded)
    banned       letters proven absent
    max_colored  letter -> largest colored count seen in a single row
    colored_rows letter -> number of rows in which the letter was colored
    """

    caps: Mapping[str, int] = field(default_factory=dict)
    banned: FrozenSet[str] = frozenset()
    max_colored: Mapping[str, int] = field(default_factory=dict)
    colored_rows: Mapping[str, int] = field(default_factory=dict)

    def cap(self, letter: str) -> Optional[int]:
        """Cap for `letter`, or None when unbounded."""
        return self.caps.get(letter)

    def allows(self, letter: str, count: int) -> bool:
        """True if `count` colored copies of `letter` stay within its cap."""
        c = self.caps.get(letter)
        return c is None or count <= c

    def __iter__(self):
        # unpacks as (caps, banned)
        yield self.caps
        yield self.banned


class ConstraintState:
    def __init__(self) -> None:
        self._tight_caps: Dict[str, int] = {}
        self._max_colored: Dict[str, int] = {}
        self._colored_rows: Counter = Counter()
        self._ever_colored: Set[str] = set()
        self._gray_only: Set[str] = set()

    def apply_row(self, row: Sequence[Cell]) -> None:
        """
        Fold one row into the running tallies.
        - colored (green/yellow) at least once -> letter is present, remember
          the per-row colored count
        - colored AND gray in the same row -> the secret holds exactly the
          colored count, tighten the cap to it
        - gray only -> candidate for a ban
        """
        # Pass 1: per-letter green/yellow/gray tallies for this row
        greens: Counter = Counter()
        yellows: Counter = Counter()
        grays: Counter = Counter()
        for cell in row:
            if cell.letter == EMPTY:
                continue
            if cell.color is LetterColor.EXACT_MATCH:
                greens[cell.letter] += 1
            elif cell.color is LetterColor.PARTIAL_MATCH:
                yellows[cell.letter] += 1
            elif cell.color is LetterColor.NO_MATCH:
                grays[cell.letter] += 1

        # Pass 2: update letter-level evidence
        touched = set(greens) | set(yellows) | set(grays)
        for ch in touched:
            colored = greens[ch] + yellows[ch]
            if colored > 0:
                self._ever_colored.add(ch)
                self._colored_rows[ch] += 1
                if self._max_colored.get(ch, 0) < colored:
                    self._max_colored[ch] = colored
                if grays[ch] > 0:
                    # a gray copy next to colored copies pins the exact count
                    prev = self._tight_caps.get(ch)
                    if prev is None or prev > colored:
                        self._tight_caps[ch] = colored
            elif grays[ch] > 0:
                self._gray_only.add(ch)

    def result(self) -> LetterConstraints:
        banned = frozenset(ch for ch in self._gray_only if ch not in self._ever_colored)

        caps: Dict[str, int] = dict(self._tight_caps)
        for ch, m in self._max_colored.items():
            caps[ch] = min(caps[ch], m) if ch in caps else m
        for ch in banned:
            caps[ch] = 0

        return LetterConstraints(
            caps=caps,
            banned=banned,
            max_colored=dict(self._max_colored),
            colored_rows=dict(self._colored_rows),
        )


def aggregate(rows: Iterable[Sequence[Cell]]) -> LetterConstraints:
    """Caps and bans over all rows (rows must already be normalized and padded)."""
    state = ConstraintState()
    for row in rows:
        state.apply_row(row)
    out = state.result()
    log.debug("caps=%s banned=%s", dict(sorted(out.caps.items())), sorted(out.banned))
    return out
