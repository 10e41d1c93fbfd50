from typing import Tuple

from eightpuzzle.domains.puzzle8 import GOAL

State = Tuple[int, ...]


def misplaced_tiles(s: State) -> int:
    """Number of numbered tiles not on their goal cell (position 0 holds the blank in GOAL)."""
    return sum(1 for i in range(1, 9) if s[i] != GOAL[i])
