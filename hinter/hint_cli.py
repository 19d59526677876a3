"""
hinter/hint_cli.py

One-shot consolidated hint from two guess histories (you + the AI).
- Each guess is given as GUESS:FEEDBACK, feedback as 'bbgbb', '00200' or
  '[0,0,2,0,0]'. With --target the feedback may be omitted and is scored
  against the target word instead.
- Histories can also come from a CSV with columns participant,guess[,feedback]
  where participant is 'human' or 'ai'.
- Prints the best composite row (dense) or the per-index map (--sparse).

Run:
  python -m hinter.hint_cli --human crane:bbgbb --ai table:bybbg
  python -m hinter.hint_cli --csv history.csv --sparse
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from hintmerge.colors import Row, format_row
from hintmerge.engine import HintEngine
from hintmerge.feedback import row_from_guess, score_guess

PARTICIPANTS = ("human", "ai")


def parse_entry(entry: str, target: Optional[str] = None) -> Row:
    """Parse one GUESS:FEEDBACK entry (or a bare GUESS when a target is known)."""
    guess, sep, fb = entry.strip().partition(":")
    guess = guess.strip()
    if not guess:
        raise ValueError(f"empty guess in {entry!r}")
    if not sep or not fb.strip():
        if target is None:
            raise ValueError(f"missing feedback for {guess!r} (use GUESS:FEEDBACK or --target)")
        return row_from_guess(guess, score_guess(guess, target))
    return row_from_guess(guess, fb)


def load_history_csv(path: str, target: Optional[str] = None) -> Tuple[List[Row], List[Row]]:
    """
    Load both histories from a CSV file.

    Columns: participant (human/ai), guess, and optionally feedback. Rows keep
    their file order within each participant.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    for column in ("participant", "guess"):
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
    has_feedback = "feedback" in df.columns

    human: List[Row] = []
    ai: List[Row] = []
    for rec in df.itertuples(index=False):
        who = str(rec.participant).strip().lower()
        if who not in PARTICIPANTS:
            raise ValueError(f"participant must be one of {PARTICIPANTS}, got {rec.participant!r}")
        fb = str(rec.feedback).strip() if has_feedback else ""
        entry = f"{rec.guess}:{fb}" if fb else str(rec.guess)
        (human if who == "human" else ai).append(parse_entry(entry, target))
    return human, ai


def format_sparse(hints) -> str:
    if not hints:
        return "(no hints)"
    return "\n".join(f"[{j}] -> {' '.join(str(c) for c in cells)}" for j, cells in hints)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Merge two guess histories into one hint row")
    ap.add_argument("--human", action="append", default=[], metavar="GUESS:FEEDBACK",
                    help="a guess from the human player (repeatable)")
    ap.add_argument("--ai", action="append", default=[], metavar="GUESS:FEEDBACK",
                    help="a guess from the AI opponent (repeatable)")
    ap.add_argument("--csv", help="CSV file with participant,guess[,feedback] columns")
    ap.add_argument("--target", help="score bare guesses against this word")
    ap.add_argument("--width", type=int, help="board width (default: widest guess)")
    ap.add_argument("--sparse", action="store_true", help="print the per-index map instead of one row")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        human = [parse_entry(e, args.target) for e in args.human]
        ai = [parse_entry(e, args.target) for e in args.ai]
        if args.csv:
            csv_human, csv_ai = load_history_csv(args.csv, args.target)
            human.extend(csv_human)
            ai.extend(csv_ai)
        engine = HintEngine()
        if args.sparse:
            out = format_sparse(engine.sparse_hint_map(human, ai, width=args.width))
        else:
            out = format_row(engine.best_composite_row(human, ai, width=args.width))
    except (ValueError, KeyError, TypeError) as e:
        ap.error(str(e))

    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
