import pandas as pd
import pytest

from hintmerge.colors import Cell, LetterColor
from hinter.hint_cli import load_history_csv, main, parse_entry


def test_parse_entry_with_feedback_and_target():
    assert parse_entry("crane:bbgbb")[2] == Cell("a", LetterColor.EXACT_MATCH)
    assert parse_entry("allot", target="total")[0] == Cell("a", LetterColor.PARTIAL_MATCH)
    with pytest.raises(ValueError):
        parse_entry("crane")
    with pytest.raises(ValueError):
        parse_entry(":bbgbb")


def test_dense_output(capsys):
    assert main(["--human", "crane:bbgbb", "--ai", "table:bybbg"]) == 0
    assert capsys.readouterr().out.strip() == "0:_ 1:_ 2:aG 3:_ 4:eG"


def test_sparse_output(capsys):
    main(["--human", "crane:bbgbb", "--ai", "table:bybbg", "--sparse"])
    assert capsys.readouterr().out.strip().splitlines() == ["[2] -> aG", "[4] -> eG"]


def test_target_scores_bare_guesses(capsys):
    main(["--target", "total", "--human", "allot", "--ai", "stoal"])
    assert capsys.readouterr().out.strip() == "0:oY 1:tY 2:_ 3:aG 4:lG"


def test_empty_history_prints_no_hints(capsys):
    main(["--sparse"])
    assert capsys.readouterr().out.strip() == "(no hints)"


def test_csv_history(tmp_path, capsys):
    path = tmp_path / "history.csv"
    pd.DataFrame(
        {
            "participant": ["human", "ai"],
            "guess": ["crane", "table"],
            "feedback": ["00200", "01002"],
        }
    ).to_csv(path, index=False)

    human, ai = load_history_csv(str(path))
    assert len(human) == 1 and len(ai) == 1

    main(["--csv", str(path)])
    assert capsys.readouterr().out.strip() == "0:_ 1:_ 2:aG 3:_ 4:eG"


def test_csv_requires_columns(tmp_path):
    path = tmp_path / "bad.csv"
    pd.DataFrame({"who": ["human"], "guess": ["crane"]}).to_csv(path, index=False)
    with pytest.raises(KeyError):
        load_history_csv(str(path))


def test_invalid_feedback_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["--human", "crane:bbzbb"])
    assert exc.value.code == 2


def test_bad_width_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["--human", "crane:bbgbb", "--width", "0"])
    assert exc.value.code == 2


def test_unknown_flag_is_rejected():
    with pytest.raises(SystemExit) as exc:
        main(["--no-lonely"])
    assert exc.value.code == 2
