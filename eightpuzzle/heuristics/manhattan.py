from typing import Tuple

State = Tuple[int, ...]


def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored). Tile v belongs at (v//3, v%3)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, 3)
        dist += abs(r - tile // 3) + abs(c - tile % 3)
    return dist
