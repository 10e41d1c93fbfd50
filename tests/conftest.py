import pytest

from eightpuzzle.domains.puzzle8 import parse_state
from eightpuzzle.session import PuzzleSession


@pytest.fixture
def session():
    return PuzzleSession()


@pytest.fixture
def one_move():
    """Goal with the blank slid right once."""
    return parse_state("1b2345678")


@pytest.fixture
def two_moves():
    return parse_state("12b345678")


@pytest.fixture
def local_minimum():
    """Solvable board where every neighbour has a larger Manhattan distance (4 -> 5)."""
    return parse_state("2143b5678")
