import pytest

from hintmerge.colors import EMPTY
from hintmerge.normalize import HEBREW, LATIN, Alphabet, normalize

FINALS = {"ך": "כ", "ם": "מ", "ן": "נ", "ף": "פ", "ץ": "צ"}


@pytest.mark.parametrize("raw", ["A", "a", " b ", "Z", "ם", "מ", "ץ", "", "   ", "İ", "ß", "\t"])
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_latin_letters_are_lowercased():
    assert normalize("Q") == "q"
    assert normalize(" e") == "e"


def test_blank_tokens_become_empty():
    assert normalize("") == EMPTY
    assert normalize("  \n") == EMPTY
    assert normalize(None) == EMPTY


def test_hebrew_finals_collapse_to_base():
    for final, base in FINALS.items():
        assert normalize(final) == base
        assert normalize(base) == base


def test_final_form_round_trip():
    for final, base in FINALS.items():
        assert HEBREW.final_form(base) == final
        assert HEBREW.base_form(HEBREW.final_form(base)) == base
    assert HEBREW.final_form("a") == "a"


def test_latin_alphabet_keeps_hebrew_finals():
    assert normalize("ם", LATIN) == "ם"


def test_alphabet_table_is_immutable():
    with pytest.raises(TypeError):
        HEBREW.finals["x"] = "y"


def test_alphabet_rejects_non_bijective_table():
    with pytest.raises(ValueError):
        Alphabet("broken", {"ך": "כ", "ם": "כ"})


def test_normalize_rejects_non_strings():
    with pytest.raises(TypeError):
        normalize(5)
