"""
normalize.py

Letter canonicalization. Every count and comparison in the engine is done on
normalized letters:
- Latin letters are lowercased.
- Hebrew word-final forms collapse to their base letter, so a letter seen once
  medial and once final counts as the same letter.
- Blank / whitespace tokens become EMPTY.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from hintmerge.colors import EMPTY


@dataclass(frozen=True, eq=False)
class Alphabet:
    """
    Immutable final-form table: final glyph -> base letter.

    The reverse direction (`final_form`) lets a renderer re-finalize the last
    letter of a word; the engine itself only uses `base_form`.
    """

    name: str
    finals: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        finals = dict(self.finals)
        for final, base in finals.items():
            if len(final) != 1 or len(base) != 1:
                raise ValueError("final-form table entries must be single characters")
        if len(set(finals.values())) != len(finals):
            raise ValueError("final-form table must be one-to-one")
        object.__setattr__(self, "finals", MappingProxyType(finals))
        object.__setattr__(self, "_bases", MappingProxyType({b: f for f, b in finals.items()}))

    def base_form(self, ch: str) -> str:
        return self.finals.get(ch, ch)

    def final_form(self, ch: str) -> str:
        return self._bases.get(ch, ch)  # type: ignore[attr-defined]


HEBREW = Alphabet(
    "hebrew",
    {
        "ך": "כ",
        "ם": "מ",
        "ן": "נ",
        "ף": "פ",
        "ץ": "צ",
    },
)

LATIN = Alphabet("latin")

# Latin letters have no final forms, so the Hebrew table is safe for both.
DEFAULT_ALPHABET = HEBREW


def normalize(raw: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """
    Canonicalize one guessed token to a single lowercase letter (or EMPTY).

    Only the first character of the stripped token is kept. Idempotent:
    normalize(normalize(x)) == normalize(x).
    """
    if raw is None:
        return EMPTY
    if not isinstance(raw, str):
        raise TypeError(f"letter must be a string, got {type(raw).__name__}")
    t = raw.strip()
    if not t:
        return EMPTY
    ch = alphabet.base_form(t[0])
    # some uppercase letters lower to more than one code point (e.g. U+0130)
    return ch.lower()[0]
