import pytest

from hintmerge.colors import Cell, LetterColor
from hintmerge.feedback import parse_feedback, row_from_guess, score_guess

G, Y, X, N = (
    LetterColor.EXACT_MATCH,
    LetterColor.PARTIAL_MATCH,
    LetterColor.NO_MATCH,
    LetterColor.NO_GUESS,
)


def test_score_guess_duplicate_handling():
    assert score_guess("crane", "crane") == [G] * 5
    assert score_guess("allot", "total") == [Y, Y, X, Y, Y]
    assert score_guess("abbey", "cabin") == [Y, X, G, X, X]
    assert score_guess("press", "spree") == [Y, Y, Y, Y, X]


def test_score_guess_other_widths_and_case():
    assert score_guess("TREE", "tore") == [G, Y, X, G]
    assert score_guess("Planet", "planet") == [G] * 6


def test_score_guess_hebrew_final_matches_base():
    # final mem in the guess matches a medial mem in the target
    assert score_guess("שלום", "מלוש") == [Y, G, G, Y]


def test_score_guess_rejects_bad_input():
    with pytest.raises(ValueError):
        score_guess("crane", "cran")
    with pytest.raises(ValueError):
        score_guess("abc", "abc")
    with pytest.raises(TypeError):
        score_guess(12345, "crane")


def test_parse_feedback_forms():
    assert parse_feedback("gybbg") == [G, Y, X, X, G]
    assert parse_feedback("21002") == [G, Y, X, X, G]
    assert parse_feedback("[2, 1, 0, 0, 2]") == [G, Y, X, X, G]
    assert parse_feedback("gy_b", width=4) == [G, Y, N, X]


def test_parse_feedback_invalid():
    with pytest.raises(ValueError):
        parse_feedback("gyb")
    with pytest.raises(ValueError):
        parse_feedback("gyzzz")
    with pytest.raises(ValueError):
        parse_feedback("[0, 1, 2]")


def test_row_from_guess_normalizes_letters():
    row = row_from_guess("CRANE", "bbgbb")
    assert row == (
        Cell("c", X), Cell("r", X), Cell("a", G), Cell("n", X), Cell("e", X),
    )
    assert row_from_guess("abcd", [2, 1, 0, 0])[1] == Cell("b", Y)
    with pytest.raises(ValueError):
        row_from_guess("crane", [2, 1, 0])
