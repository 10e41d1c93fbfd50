import csv

import pytest

from eightpuzzle.domains.puzzle8 import is_solvable, parse_state
from eightpuzzle.experiments import plot, summarize
from eightpuzzle.experiments.runner import HEADER, Instance, make_instances, run_one
from eightpuzzle.experiments.visualize_path import save_path_frames
from eightpuzzle.search.a_star import a_star


def test_make_instances():
    insts = make_instances([2, 6], per_depth=3, start_seed=10)
    assert [i.depth for i in insts] == [2, 2, 2, 6, 6, 6]
    assert [i.seed for i in insts] == list(range(10, 16))
    assert all(is_solvable(i.state) for i in insts)


def test_run_one_terminations(local_minimum):
    inst = Instance(seed=0, depth=4, state=parse_state("12b345678"))
    ok = run_one(inst, "a", heuristic="h1")
    assert ok["termination"] == "ok"
    assert ok["g"] == 2 and ok["algorithm"] == "A*" and ok["heuristic"] == "h1"

    budget = run_one(inst, "a", node_budget=0)
    assert budget["termination"] == "budget"

    stuck = run_one(Instance(seed=1, depth=4, state=local_minimum), "beam", k=3)
    assert stuck["termination"] == "unreachable"
    assert stuck["generated"] == 5
    assert stuck["beam_k"] == 3


@pytest.fixture
def results_csv(tmp_path, local_minimum):
    inst = Instance(seed=0, depth=4, state=parse_state("12b345678"))
    stuck = Instance(seed=1, depth=4, state=local_minimum)
    rows = [
        run_one(inst, "a", heuristic="h2"),
        run_one(stuck, "a", heuristic="h2"),
        run_one(inst, "beam", k=3),
        run_one(stuck, "beam", k=3),
    ]
    path = tmp_path / "run.csv"
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER, restval="")
        w.writeheader()
        w.writerows(rows)
    return path


def test_summarize(results_csv):
    table = summarize.summarize(summarize.load_many([str(results_csv)]))
    a = table[table["algorithm"] == "A*"].iloc[0]
    beam = table[table["algorithm"] == "beam"].iloc[0]
    assert a["runs"] == 2 and a["solve_rate"] == 1.0
    assert beam["runs"] == 2 and beam["solve_rate"] == 0.5
    assert beam["beam_k"] == "3"
    assert beam["g_mean"] == 2.0


def test_plot_helpers(results_csv, tmp_path):
    rows = plot.read_rows([str(results_csv)])
    assert len(rows) == 4
    rates = plot.solve_rate(rows)
    assert rates["beam | k=3"] == ([4], [0.5])
    series = plot.agg_mean(rows, "g")
    assert series["A* | h2"][0] == [4]

    fig, ax = plot.plt.subplots()
    plot.plot_solve_rate(ax, rows)
    out = plot.save_fig(fig, tmp_path / "plots", "rate")
    plot.plt.close(fig)
    assert out.exists()


def test_save_path_frames(tmp_path, one_move):
    res = a_star(one_move, "h2")
    frames = save_path_frames(res.path, res.moves, tmp_path / "frames")
    assert [p.name for p in frames] == ["step_000.png", "step_001.png"]
    assert all(p.exists() for p in frames)
