"""
feedback.py

Game-rule helpers that produce the rows the hint engine consumes.

The engine never scores guesses itself; these exist so callers (the CLI,
tests) can turn a guess plus a target, or a guess plus a typed-in feedback
string, into a Row of normalized cells.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import List, Sequence, Union

from hintmerge.colors import Cell, LetterColor, Row
from hintmerge.normalize import Alphabet, DEFAULT_ALPHABET, normalize

SUPPORTED_WIDTHS = (4, 5, 6)

FeedbackLike = Union[str, Sequence[int], Sequence[LetterColor]]

_FEEDBACK_CHARS = {
    "g": LetterColor.EXACT_MATCH,
    "y": LetterColor.PARTIAL_MATCH,
    "b": LetterColor.NO_MATCH,
    "x": LetterColor.NO_MATCH,
    "2": LetterColor.EXACT_MATCH,
    "1": LetterColor.PARTIAL_MATCH,
    "0": LetterColor.NO_MATCH,
    "_": LetterColor.NO_GUESS,
    ".": LetterColor.NO_GUESS,
}


def _letters(word: str, alphabet: Alphabet) -> List[str]:
    return [normalize(ch, alphabet) for ch in word]


def score_guess(guess: str, target: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> List[LetterColor]:
    """
    Compute Wordle feedback for `guess` against `target`.

    Two-pass duplicate rule: greens first (consuming the target's letter
    counts), then yellows left to right while the letter still has unused
    copies in the target; everything else is gray.

    Letters are normalized first, so 'CRANE' vs 'crane' is all green and a
    Hebrew final form matches its base letter.
    """
    if not isinstance(guess, str) or not isinstance(target, str):
        raise TypeError("guess and target must be strings")
    if len(guess) != len(target):
        raise ValueError("guess and target must have the same length")
    if len(guess) not in SUPPORTED_WIDTHS:
        raise ValueError(f"word length must be one of {SUPPORTED_WIDTHS}, got {len(guess)}")

    g_letters = _letters(guess, alphabet)
    t_letters = _letters(target, alphabet)

    pattern = [LetterColor.NO_MATCH] * len(g_letters)
    remaining = Counter(t_letters)

    # Pass 1: greens
    for i, (g, t) in enumerate(zip(g_letters, t_letters)):
        if g == t:
            pattern[i] = LetterColor.EXACT_MATCH
            remaining[g] -= 1

    # Pass 2: yellows where counts allow (else gray)
    for i, g in enumerate(g_letters):
        if pattern[i] is LetterColor.NO_MATCH and remaining[g] > 0:
            pattern[i] = LetterColor.PARTIAL_MATCH
            remaining[g] -= 1

    return pattern


def parse_feedback(s: str, width: int = 5) -> List[LetterColor]:
    """
    Parse a typed feedback string into colors.

    Accepted forms:
      - letters: g/y/b (x is an alias for b)
      - digits:  2/1/0
      - list:    [0, 1, 2, 2, 0]
      - '_' or '.' marks a cell with no guess
    Raises ValueError on invalid input.
    """
    if not isinstance(s, str):
        raise TypeError("feedback must be a string")
    s = s.strip().lower()
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != width:
            raise ValueError(f"list form must contain exactly {width} 0/1/2 values")
        return [LetterColor.from_pattern(int(x)) for x in nums]

    if len(s) != width:
        raise ValueError(f"feedback must be length {width} (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return [_FEEDBACK_CHARS[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b, 2/1/0 or _") from e


def row_from_guess(
    guess: str,
    feedback: FeedbackLike,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> Row:
    """
    Build a Row from a guessed word and its feedback.

    `feedback` may be a feedback string (see parse_feedback), a list of
    0/1/2 pattern ints, or a list of LetterColor.
    """
    if not isinstance(guess, str):
        raise TypeError("guess must be a string")
    if isinstance(feedback, str):
        colors = parse_feedback(feedback, width=len(guess))
    else:
        colors = [LetterColor.from_pattern(p) for p in feedback]
    if len(colors) != len(guess):
        raise ValueError("guess and feedback must have the same length")
    return tuple(Cell(normalize(ch, alphabet), c) for ch, c in zip(guess, colors))


if __name__ == "__main__":
    # Quick sanity checks
    G, Y, X = LetterColor.EXACT_MATCH, LetterColor.PARTIAL_MATCH, LetterColor.NO_MATCH
    assert score_guess("crane", "crane") == [G] * 5
    assert score_guess("allot", "total") == [Y, Y, X, Y, Y]
    assert score_guess("abbey", "cabin") == [Y, X, G, X, X]
    assert parse_feedback("bbgbb") == [X, X, G, X, X]
    print("feedback.py sanity checks passed.")
