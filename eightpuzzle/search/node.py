from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import sys

from eightpuzzle.errors import ResourceExceeded

logger = logging.getLogger(__name__)

State = Tuple[int, ...]

ROOT = -1  # parent index of a root node


@dataclass(frozen=True)
class SearchNode:
    state: State
    cost: int
    parent: int = ROOT
    move: Optional[str] = None
    index: int = 0


class SearchTree:
    """
    Arena of SearchNodes for one solve call.
    A node stores its parent's index; indices are handed out once, in creation
    order, so a parent always precedes its children and the tree cannot cycle.
    """

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, i: int) -> SearchNode:
        return self._nodes[i]

    def add_root(self, state: State, cost: int) -> SearchNode:
        node = SearchNode(state=state, cost=cost, parent=ROOT, move=None, index=len(self._nodes))
        self._nodes.append(node)
        return node

    def add_child(self, parent: SearchNode, state: State, cost: int, move: str) -> SearchNode:
        node = SearchNode(state=state, cost=cost, parent=parent.index, move=move, index=len(self._nodes))
        self._nodes.append(node)
        return node

    def path_to(self, node: SearchNode) -> Tuple[List[str], int]:
        """Moves from the root to `node`, and their count."""
        moves: List[str] = []
        while node.parent != ROOT:
            moves.append(node.move)  # type: ignore[arg-type]
            node = self._nodes[node.parent]
        moves.reverse()
        return moves, len(moves)

    def states_to(self, node: SearchNode) -> List[State]:
        path: List[State] = [node.state]
        while node.parent != ROOT:
            node = self._nodes[node.parent]
            path.append(node.state)
        path.reverse()
        return path


class NodeBudget:
    """Counts generated nodes and aborts a search once `limit` is passed."""

    def __init__(self, limit: Optional[int] = None, algorithm: str = ""):
        self.limit = sys.maxsize if limit is None else limit
        self.algorithm = algorithm
        self.generated = 0

    def charge(self) -> None:
        self.generated += 1
        if self.generated > self.limit:
            logger.info("%s aborted: node budget %d exceeded", self.algorithm, self.limit)
            raise ResourceExceeded(
                f"{self.algorithm}: exceeded max node generation limit ({self.limit})",
                generated=self.generated, algorithm=self.algorithm,
            )


@dataclass
class SearchResult:
    algorithm: str
    heuristic: str
    goal: SearchNode
    tree: SearchTree = field(repr=False)
    expanded: int = 0
    generated: int = 0
    peak_open: int = 0
    time: float = 0.0

    @property
    def moves(self) -> List[str]:
        return self.tree.path_to(self.goal)[0]

    @property
    def length(self) -> int:
        return self.tree.path_to(self.goal)[1]

    @property
    def path(self) -> List[State]:
        return self.tree.states_to(self.goal)
