#!/usr/bin/env python3
"""
Line-oriented command interpreter for the 8-puzzle.

Each line of a script is one command:

    setState b12 345 678
    printState
    move up|down|left|right
    randomizeState 20
    solve A-star h1|h2
    solve beam 5
    maxNodes 10000

A failing line is logged and recorded; the next line still runs.
"""
from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from eightpuzzle.config import PuzzleConfig, configure_logging
from eightpuzzle.domains.puzzle8 import format_grid, format_state
from eightpuzzle.errors import InvalidConfiguration, PuzzleError, UnknownCommand
from eightpuzzle.session import PuzzleSession, SolveOutcome

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    line: str
    ok: bool
    output: List[str] = field(default_factory=list)
    error: Optional[PuzzleError] = None


def _int_arg(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidConfiguration(f"{what} must be an integer, got {text!r}") from None


def _solve_report(out: SolveOutcome) -> List[str]:
    lines = list(out.moves)
    lines.append(f"Puzzle successfully solved in {out.length} moves, considering {out.result.generated} nodes")
    return lines


class CommandInterpreter:
    def __init__(self, session: Optional[PuzzleSession] = None):
        self.session = session or PuzzleSession()

    def execute(self, line: str) -> List[str]:
        """Run one command and return its printable output lines. Errors propagate."""
        s = self.session
        if line.startswith("setState "):
            s.set_state(line[len("setState "):])
            return []
        if line == "printState":
            return format_grid(s.state).splitlines()
        if line.startswith("move "):
            s.move(line[len("move "):].strip())
            return []
        if line.startswith("randomizeState "):
            s.randomize_state(_int_arg(line[len("randomizeState "):], "randomizeState count"))
            return []
        if line.startswith("solve A-star "):
            heuristic = line[len("solve A-star "):].strip()
            header = f"Solving A-star with starting state {format_state(s.state)} and heuristic {heuristic}:"
            return [header] + _solve_report(s.solve_a_star(heuristic))
        if line.startswith("solve beam "):
            k = _int_arg(line[len("solve beam "):], "beam width")
            header = f"Solving Local Beam with starting state {format_state(s.state)} and k = {k}:"
            return [header] + _solve_report(s.solve_beam(k))
        if line.startswith("maxNodes "):
            s.set_node_budget(_int_arg(line[len("maxNodes "):], "maxNodes"))
            return []
        raise UnknownCommand(f"unknown command {line!r}")

    def run_line(self, line: str) -> CommandResult:
        try:
            return CommandResult(line=line, ok=True, output=self.execute(line))
        except PuzzleError as e:
            logger.error("command %r failed: %s: %s", line, type(e).__name__, e)
            return CommandResult(line=line, ok=False, error=e)

    def run_script(self, lines: Iterable[str]) -> List[CommandResult]:
        results: List[CommandResult] = []
        for raw in lines:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            results.append(self.run_line(line))
        return results


def _non_negative(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run an 8-puzzle command script.")
    ap.add_argument("script", type=Path, help="Text file with one command per line")
    ap.add_argument("--max-nodes", type=_non_negative, default=None, help="Initial node budget per solve")
    ap.add_argument("--seed-start", type=int, default=0, help="First seed used by randomizeState")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    cfg = PuzzleConfig(seed_start=args.seed_start, log_level=args.log_level)
    if args.max_nodes is not None:
        cfg.node_budget = args.max_nodes
    configure_logging(cfg.log_level)

    interp = CommandInterpreter(PuzzleSession(cfg))
    with args.script.open() as f:
        results = interp.run_script(f)

    for r in results:
        for out in r.output:
            print(out)
        if r.output:
            print()
    failed = sum(1 for r in results if not r.ok)
    if failed:
        print(f"{failed} of {len(results)} commands failed", file=sys.stderr)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
