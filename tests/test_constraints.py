from hintmerge.colors import EMPTY_CELL, Cell, LetterColor
from hintmerge.constraints import ConstraintState, aggregate
from hintmerge.feedback import row_from_guess as row


def test_gray_only_letter_is_banned():
    caps, banned = aggregate([row("crane", "bbgbb")])
    assert banned == {"c", "r", "n", "e"}
    assert all(caps[ch] == 0 for ch in banned)
    assert caps["a"] == 1


def test_gray_next_to_colored_pins_exact_count():
    # two e's guessed: one green, one gray -> exactly one e in the secret
    out = aggregate([row("eagle", "gbbyb")])
    assert out.caps["e"] == 1
    assert "e" not in out.banned


def test_colored_in_other_row_lifts_ban():
    out = aggregate([row("crane", "bbgbb"), row("table", "bybbg")])
    assert "e" not in out.banned
    assert out.caps["e"] == 1
    assert out.banned == {"c", "r", "n", "t", "b", "l"}


def test_unseen_letter_is_unbounded():
    out = aggregate([row("crane", "bbgbb")])
    assert out.cap("z") is None
    assert out.allows("z", 99)
    assert "z" not in out.banned


def test_cap_follows_largest_colored_count():
    out = aggregate([row("level", "ybbbb"), row("lolly", "gbybb")])
    # 'l': row1 one colored + grays -> pinned at 1; row2 two colored + gray -> 2
    assert out.caps["l"] == 1
    assert out.max_colored["l"] == 2
    assert out.colored_rows["l"] == 2


def test_cap_only_rises_when_a_row_proves_more_copies():
    state = ConstraintState()
    state.apply_row(row("apple", "ybbbb"))
    before = state.result().caps["a"]
    state.apply_row(row("about", "ybbbb"))
    assert state.result().caps["a"] == before == 1
    state.apply_row(row("banal", "bygyb"))
    assert state.result().caps["a"] == 2


def test_cap_never_loosens_once_pinned():
    state = ConstraintState()
    state.apply_row(row("sassy", "ybbbb"))
    assert state.result().caps["s"] == 1
    state.apply_row(row("stats", "ybbbb"))
    assert state.result().caps["s"] == 1


def test_ban_is_stable_until_letter_is_colored():
    state = ConstraintState()
    state.apply_row(row("crane", "bbbbb"))
    assert "c" in state.result().banned
    state.apply_row(row("coast", "bbbbb"))
    assert "c" in state.result().banned
    state.apply_row(row("cloud", "ybbbb"))
    assert "c" not in state.result().banned


def test_empty_cells_are_ignored():
    r = (Cell("a", LetterColor.PARTIAL_MATCH), EMPTY_CELL, EMPTY_CELL)
    out = aggregate([r])
    assert out.caps == {"a": 1}
    assert out.banned == frozenset()


def test_empty_history():
    out = aggregate([])
    assert out.caps == {}
    assert out.banned == frozenset()
