from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
import heapq
import itertools
import logging
from time import perf_counter

from eightpuzzle.domains.puzzle8 import GOAL, successors
from eightpuzzle.errors import UnknownHeuristic, Unreachable
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.heuristics.misplaced import misplaced_tiles
from eightpuzzle.search.node import NodeBudget, SearchResult, SearchTree

logger = logging.getLogger(__name__)

State = Tuple[int, ...]

HEURISTICS: Dict[str, Callable[[State], int]] = {
    "h1": misplaced_tiles,
    "h2": manhattan,
}


def resolve_heuristic(name: str) -> Callable[[State], int]:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise UnknownHeuristic(f"unknown heuristic {name!r} (expected one of {sorted(HEURISTICS)})") from None


def a_star(
    start: State,
    heuristic: str = "h2",
    node_budget: Optional[int] = None,
) -> SearchResult:
    """
    A* to GOAL over unit-cost blank slides.

    Node cost holds f = g + h; a child's f is derived from its parent's as
    f - h(parent) + 1 + h(child), so g is never stored. Every generated node,
    root included, is charged to `node_budget` (ResourceExceeded when passed).
    Equal-f nodes pop in insertion order; only the path length is guaranteed
    optimal, not which of several shortest paths comes back.
    """
    hfun = resolve_heuristic(heuristic)
    budget = NodeBudget(node_budget, algorithm="A*")
    t0 = perf_counter()

    tree = SearchTree()
    open_heap: List[Tuple[int, int, int]] = []
    counter = itertools.count()

    budget.charge()
    root = tree.add_root(start, hfun(start))
    heapq.heappush(open_heap, (root.cost, next(counter), root.index))
    logger.debug("A* start=%s heuristic=%s f0=%d", start, heuristic, root.cost)

    closed: Set[State] = set()
    expanded = 0
    peak_open = 1

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, _, i = heapq.heappop(open_heap)
        node = tree[i]
        if node.state in closed:
            continue
        closed.add(node.state)

        if node.state == GOAL:
            res = SearchResult(
                algorithm="A*", heuristic=heuristic, goal=node, tree=tree,
                expanded=expanded, generated=budget.generated,
                peak_open=peak_open, time=perf_counter() - t0,
            )
            logger.info("A* (%s) solved in %d moves, %d nodes generated", heuristic, res.length, res.generated)
            return res

        expanded += 1
        g = node.cost - hfun(node.state)
        for direction, s2 in successors(node.state):
            budget.charge()
            if s2 in closed:
                continue
            child = tree.add_child(node, s2, g + 1 + hfun(s2), direction)
            heapq.heappush(open_heap, (child.cost, next(counter), child.index))

    logger.info("A* (%s) exhausted the frontier after %d nodes", heuristic, budget.generated)
    raise Unreachable(
        f"A*: unreachable goal state, having considered {budget.generated} nodes",
        generated=budget.generated, algorithm="A*",
    )
