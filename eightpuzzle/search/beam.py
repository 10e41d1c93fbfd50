from __future__ import annotations
from typing import List, Optional, Set, Tuple
import heapq
import itertools
import logging
from time import perf_counter

from eightpuzzle.domains.puzzle8 import GOAL, successors
from eightpuzzle.errors import InvalidConfiguration, Unreachable
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.search.node import NodeBudget, SearchNode, SearchResult, SearchTree

logger = logging.getLogger(__name__)

State = Tuple[int, ...]


def local_beam(
    start: State,
    k: int,
    node_budget: Optional[int] = None,
) -> SearchResult:
    """
    Local beam search keeping the k best nodes by Manhattan distance (no depth term).

    A successor is a candidate only if it is unexplored and does not raise h2
    above its parent's value, so the search stops with Unreachable at a state
    whose every neighbour is strictly worse, even when that state is solvable.
    """
    if k < 1:
        raise InvalidConfiguration(f"beam width must be positive, got {k}")
    budget = NodeBudget(node_budget, algorithm="beam")
    t0 = perf_counter()

    tree = SearchTree()
    budget.charge()
    beam: List[SearchNode] = [tree.add_root(start, manhattan(start))]
    logger.debug("beam start=%s k=%d h0=%d", start, k, beam[0].cost)

    explored: Set[State] = set()
    expanded = 0
    peak_open = 1
    counter = itertools.count()

    while beam:
        pool: List[Tuple[int, int, int, str, State]] = []
        for node in beam:
            explored.add(node.state)
            if node.state == GOAL:
                res = SearchResult(
                    algorithm="beam", heuristic="h2", goal=node, tree=tree,
                    expanded=expanded, generated=budget.generated,
                    peak_open=peak_open, time=perf_counter() - t0,
                )
                logger.info("beam (k=%d) solved in %d moves, %d nodes generated", k, res.length, res.generated)
                return res
            expanded += 1
            for direction, s2 in successors(node.state):
                budget.charge()
                h = manhattan(s2)
                if s2 in explored or h > node.cost:
                    continue
                heapq.heappush(pool, (h, next(counter), node.index, direction, s2))
        peak_open = max(peak_open, len(pool))
        beam = [tree.add_child(tree[p], s2, h, d) for h, _, p, d, s2 in heapq.nsmallest(k, pool)]

    logger.info("beam (k=%d) emptied without reaching the goal after %d nodes", k, budget.generated)
    raise Unreachable(
        f"beam: goal state not found, considering {budget.generated} nodes",
        generated=budget.generated, algorithm="beam",
    )
