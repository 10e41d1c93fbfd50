from __future__ import annotations
from typing import Optional


class PuzzleError(Exception):
    """Base class for every failure raised by the puzzle engine."""


class InvalidConfiguration(PuzzleError, ValueError):
    """Board text is malformed / not a permutation, or a count argument is negative."""


class InvalidMove(PuzzleError):
    """The blank cannot slide in the requested direction."""


class UnknownCommand(PuzzleError):
    pass


class UnknownHeuristic(UnknownCommand):
    pass


class SearchAborted(PuzzleError):
    """A solve call ended without a goal node. `generated` is the node count reached."""

    def __init__(self, message: str, generated: int = 0, algorithm: Optional[str] = None):
        super().__init__(message)
        self.generated = generated
        self.algorithm = algorithm


class ResourceExceeded(SearchAborted):
    pass


class Unreachable(SearchAborted):
    pass
