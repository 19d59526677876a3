import pytest

from hintmerge.constraints import aggregate
from hintmerge.feedback import row_from_guess
from hintmerge.observations import observe


@pytest.fixture
def crane_table():
    """Human guessed CRANE (only A right), the AI guessed TABLE (A elsewhere, E right)."""
    human = [row_from_guess("crane", "bbgbb")]
    ai = [row_from_guess("table", "bybbg")]
    return human, ai


@pytest.fixture
def prepare():
    """rows -> (observations, constraints)"""

    def _prepare(rows, width=5):
        rows = list(rows)
        return observe(rows, width), aggregate(rows)

    return _prepare
