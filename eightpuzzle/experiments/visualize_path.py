#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from eightpuzzle.domains.puzzle8 import parse_state, scramble
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.beam import local_beam

State = Tuple[int, ...]

def draw_board(state: State, out_path: Path, title: Optional[str] = None):
    grid = np.array(state).reshape(3, 3)
    fig, ax = plt.subplots(figsize=(3, 3))
    # blank cell shaded, tiles white
    ax.imshow((grid == 0).astype(float), cmap="Greys", vmin=0, vmax=3)
    ax.set_xticks(np.arange(-0.5, 3, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, 3, 1), minor=True)
    ax.grid(which="minor", color="black", linewidth=1)
    ax.set_xticks([]); ax.set_yticks([])
    for (r, c), t in np.ndenumerate(grid):
        if t == 0: continue
        ax.text(c, r, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)

def save_path_frames(path: List[State], moves: List[str], outdir: Path) -> List[Path]:
    out = []
    for i, s in enumerate(path):
        title = "start" if i == 0 else f"{i}: {moves[i-1]}"
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, p, title)
        out.append(p)
    return out

def main():
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=["a", "beam"], default="a")
    p.add_argument("--heuristic", choices=["h1", "h2"], default="h2")
    p.add_argument("--k", type=int, default=3, help="Beam width")
    p.add_argument("--state", default=None, help="Start board text, e.g. 1b2345678")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args()

    start = parse_state(args.state) if args.state else scramble(args.depth, args.seed)
    if args.algo == "a":
        res = a_star(start, args.heuristic)
    else:
        res = local_beam(start, args.k)

    frames = save_path_frames(res.path, res.moves, Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
