from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple
import random

from eightpuzzle.errors import InvalidConfiguration, InvalidMove, UnknownCommand

State = Tuple[int, ...]  # 9-length tuple, 0 is blank
GOAL: State = (0, 1, 2, 3, 4, 5, 6, 7, 8)

BLANK_SYMBOL = "b"
DIRECTIONS: Tuple[str, ...] = ("up", "down", "left", "right")
OPPOSITE: Dict[str, str] = {"up": "down", "down": "up", "left": "right", "right": "left"}

_OFFSET: Dict[str, int] = {"up": -3, "down": 3, "left": -1, "right": 1}


def _blocked(direction: str, z: int) -> bool:
    if direction == "up":    return z < 3
    if direction == "down":  return z >= 6
    if direction == "left":  return z % 3 == 0
    return (z + 1) % 3 == 0


# ---------------- Configuration ----------------

def validate_state(seq: Sequence[int]) -> State:
    """Return `seq` as a State, or raise InvalidConfiguration unless it is a permutation of 0..8."""
    s = tuple(seq)
    if len(s) != 9 or sorted(s) != list(range(9)):
        raise InvalidConfiguration(f"not a permutation of the 9 tiles: {seq!r}")
    return s


def parse_state(text: str) -> State:
    """
    Parse board text such as 'b12345678' or 'b12 345 678'.
    An 11-char form carries row separators at positions 3 and 7, which are dropped.
    """
    if len(text) == 11:
        text = text[0:3] + text[4:7] + text[8:11]
    if len(text) != 9:
        raise InvalidConfiguration(f"board text must have 9 symbols: {text!r}")
    if text.count(BLANK_SYMBOL) != 1:
        raise InvalidConfiguration(f"board text needs exactly one '{BLANK_SYMBOL}': {text!r}")
    tiles: List[int] = []
    for ch in text:
        if ch == BLANK_SYMBOL:
            tiles.append(0)
        elif ch in "12345678":
            tiles.append(int(ch))
        else:
            raise InvalidConfiguration(f"unexpected symbol {ch!r} in {text!r}")
    return validate_state(tiles)


def format_state(s: State) -> str:
    return "".join(BLANK_SYMBOL if t == 0 else str(t) for t in s)


def format_grid(s: State) -> str:
    text = format_state(s)
    return "\n".join(text[3*r:3*r+3] for r in range(3))


def blank_index(s: State) -> int:
    return s.index(0)


def is_solvable(s: State) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0


# ---------------- Moves ----------------

def apply_move(s: State, direction: str) -> State:
    """Slide the blank one cell in `direction`; raises InvalidMove at a grid edge."""
    if direction not in _OFFSET:
        raise UnknownCommand(f"unknown direction {direction!r}")
    z = s.index(0)
    if _blocked(direction, z):
        raise InvalidMove(f"cannot move {direction} with blank at index {z}")
    j = z + _OFFSET[direction]
    lst = list(s)
    lst[z], lst[j] = lst[j], lst[z]
    return tuple(lst)


def successors(s: State) -> Iterator[Tuple[str, State]]:
    """Yield (direction, next_state) for every legal move, in DIRECTIONS order."""
    for d in DIRECTIONS:
        try:
            yield d, apply_move(s, d)
        except InvalidMove:
            continue


def apply_moves(s: State, moves: Iterable[str]) -> State:
    for d in moves:
        s = apply_move(s, d)
    return s


def random_walk(n: int, rng: random.Random, start: State = GOAL) -> State:
    """
    Apply n random legal moves starting from `start`.
    A blocked pick is dropped and another direction is drawn from the rest.
    """
    if n < 0:
        raise InvalidConfiguration(f"move count must be non-negative, got {n}")
    s = start
    for _ in range(n):
        cand = list(DIRECTIONS)
        while True:
            d = cand[rng.randrange(len(cand))]
            try:
                s = apply_move(s, d)
                break
            except InvalidMove:
                cand.remove(d)
    return s


def scramble(depth: int, seed: int) -> State:
    """Scramble GOAL by performing 'depth' random legal blank moves."""
    return random_walk(depth, random.Random(seed))
