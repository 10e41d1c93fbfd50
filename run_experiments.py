#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("A* h1/h2", "python -m eightpuzzle.experiments.runner --algo a --depths 4 8 12 16 20 --per_depth 20 --out results/astar.csv")
    run("Local beam", "python -m eightpuzzle.experiments.runner --algo beam --beam_k 1 3 10 --depths 4 8 12 16 20 --per_depth 20 --out results/beam.csv")
    run("Summary", "python -m eightpuzzle.experiments.summarize results/astar.csv results/beam.csv --out results/summary.csv")
    run("Plots", "python -m eightpuzzle.experiments.plot results/astar.csv results/beam.csv --save results/plots")

if __name__ == "__main__":
    main()
