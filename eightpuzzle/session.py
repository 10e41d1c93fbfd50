from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging
import random

from eightpuzzle.config import PuzzleConfig
from eightpuzzle.domains.puzzle8 import GOAL, apply_move, parse_state, random_walk
from eightpuzzle.errors import InvalidConfiguration
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.beam import local_beam
from eightpuzzle.search.node import SearchResult

logger = logging.getLogger(__name__)

State = Tuple[int, ...]


class SeedCounter:
    """Seed source for randomize calls: yields start, start+1, ... one value per call."""

    def __init__(self, start: int = 0):
        self.value = start

    def next(self) -> int:
        seed = self.value
        self.value += 1
        return seed


@dataclass
class SolveOutcome:
    state: State
    moves: List[str]
    length: int
    result: SearchResult


class PuzzleSession:
    """
    Holds the current configuration and the node budget shared by solves.
    Searches never touch `state`; the session adopts the goal after a solve.
    """

    def __init__(self, config: Optional[PuzzleConfig] = None, seeds: Optional[SeedCounter] = None):
        self.config = config or PuzzleConfig()
        self.state: State = GOAL
        self.node_budget = self.config.node_budget
        self.seeds = seeds or SeedCounter(self.config.seed_start)

    def set_state(self, text: str) -> State:
        self.state = parse_state(text)
        return self.state

    def move(self, direction: str) -> State:
        self.state = apply_move(self.state, direction)
        return self.state

    def randomize_state(self, n: int) -> State:
        if n < 0:
            raise InvalidConfiguration(f"randomize count must be non-negative, got {n}")
        seed = self.seeds.next()
        self.state = random_walk(n, random.Random(seed))
        logger.debug("randomized %d moves with seed %d -> %s", n, seed, self.state)
        return self.state

    def set_node_budget(self, n: int) -> None:
        if n < 0:
            raise InvalidConfiguration(f"node budget must be non-negative, got {n}")
        self.node_budget = n

    def solve_a_star(self, heuristic: str) -> SolveOutcome:
        return self._adopt(a_star(self.state, heuristic, node_budget=self.node_budget))

    def solve_beam(self, k: Optional[int] = None) -> SolveOutcome:
        if k is None:
            k = self.config.default_beam_width
        return self._adopt(local_beam(self.state, k, node_budget=self.node_budget))

    def _adopt(self, res: SearchResult) -> SolveOutcome:
        moves, length = res.tree.path_to(res.goal)
        self.state = res.goal.state
        return SolveOutcome(state=self.state, moves=moves, length=length, result=res)
