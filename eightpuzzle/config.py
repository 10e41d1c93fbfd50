from __future__ import annotations
from dataclasses import dataclass
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class PuzzleConfig:
    """
    Settings shared by a session and the CLIs.

    node_budget: max number of nodes a single solve may generate (root included).
    seed_start: first value of the randomize seed counter.
    default_beam_width: k used when a caller does not pass one.
    """
    node_budget: int = sys.maxsize
    seed_start: int = 0
    default_beam_width: int = 3
    log_level: str = "WARNING"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
