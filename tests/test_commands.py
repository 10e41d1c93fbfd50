import logging

import pytest

from eightpuzzle.commands import CommandInterpreter, main
from eightpuzzle.domains.puzzle8 import GOAL
from eightpuzzle.errors import (
    InvalidConfiguration, InvalidMove, ResourceExceeded, UnknownCommand, UnknownHeuristic,
)


@pytest.fixture
def interp():
    return CommandInterpreter()


SCRIPT = [
    "setState 1b2 345 678\n",
    "printState\n",
    "solve A-star h2\n",
    "printState\n",
    "\n",
    "move up\n",
    "fly away\n",
    "maxNodes 0\n",
    "solve beam 3\n",
]


def test_script_continues_after_failures(interp):
    results = interp.run_script(SCRIPT)
    assert [r.ok for r in results] == [True, True, True, True, False, False, True, False]
    assert results[1].output == ["1b2", "345", "678"]
    assert results[2].output == [
        "Solving A-star with starting state 1b2345678 and heuristic h2:",
        "left",
        "Puzzle successfully solved in 1 moves, considering 4 nodes",
    ]
    assert results[3].output == ["b12", "345", "678"]
    assert isinstance(results[4].error, InvalidMove)
    assert isinstance(results[5].error, UnknownCommand)
    assert isinstance(results[7].error, ResourceExceeded)
    assert interp.session.state == GOAL


def test_failures_are_logged(interp, caplog):
    with caplog.at_level(logging.ERROR, logger="eightpuzzle.commands"):
        interp.run_script(["move left", "printState"])
    assert len(caplog.records) == 1
    assert "InvalidMove" in caplog.records[0].getMessage()


def test_beam_report(interp):
    interp.run_line("setState 12b345678")
    r = interp.run_line("solve beam 2")
    assert r.ok
    assert r.output[0] == "Solving Local Beam with starting state 12b345678 and k = 2:"
    assert r.output[1:3] == ["left", "left"]
    assert r.output[3].startswith("Puzzle successfully solved in 2 moves")


@pytest.mark.parametrize("line, exc", [
    ("randomizeState abc", InvalidConfiguration),
    ("randomizeState -2", InvalidConfiguration),
    ("maxNodes lots", InvalidConfiguration),
    ("solve A-star h3", UnknownHeuristic),
    ("solve beam x", InvalidConfiguration),
    ("setState 123", InvalidConfiguration),
    ("move diagonal", UnknownCommand),
    ("printstate", UnknownCommand),
])
def test_bad_lines(interp, line, exc):
    r = interp.run_line(line)
    assert not r.ok
    assert isinstance(r.error, exc)


def test_randomize_then_solve(interp):
    results = interp.run_script(["randomizeState 15", "solve A-star h1"])
    assert all(r.ok for r in results)
    last = results[1].output[-1]
    assert int(last.split(" in ")[1].split()[0]) <= 15


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "cmds.txt"
    script.write_text("setState 1b2345678\nsolve A-star h1\nprintState\n")
    assert main([str(script)]) == 0
    out = capsys.readouterr().out
    assert "Puzzle successfully solved in 1 moves" in out
    assert "b12\n345\n678" in out


def test_main_reports_failures(tmp_path, capsys):
    script = tmp_path / "cmds.txt"
    script.write_text("move up\nprintState\n")
    assert main([str(script), "--max-nodes", "10"]) == 1
    captured = capsys.readouterr()
    assert "1 of 2 commands failed" in captured.err


def test_main_rejects_negative_max_nodes(tmp_path, capsys):
    script = tmp_path / "cmds.txt"
    script.write_text("printState\n")
    with pytest.raises(SystemExit) as ei:
        main([str(script), "--max-nodes", "-1"])
    assert ei.value.code == 2
    assert "must be non-negative" in capsys.readouterr().err


def test_main_logs_at_configured_level(tmp_path, monkeypatch):
    import eightpuzzle.commands as commands

    levels = []
    monkeypatch.setattr(commands, "configure_logging", levels.append)
    script = tmp_path / "cmds.txt"
    script.write_text("printState\n")
    assert main([str(script), "--log-level", "DEBUG"]) == 0
    assert levels == ["DEBUG"]
