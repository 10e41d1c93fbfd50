#!/usr/bin/env python3
import sys, csv, os, argparse
from pathlib import Path
from collections import defaultdict
import statistics

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

def _to_int(x):
    try: return int(x)
    except (TypeError, ValueError): return None

def _to_float(x):
    try: return float(x)
    except (TypeError, ValueError): return None

def series_label(row):
    if row["algorithm"] == "beam":
        return f"beam | k={row['beam_k']}"
    return f"{row['algorithm']} | {row['heuristic']}"

def read_rows(paths):
    rows = []
    for p in paths:
        with open(p, newline="") as f:
            for row in csv.DictReader(f):
                depth = _to_int(row.get("depth"))
                if not row.get("algorithm") or depth is None:
                    continue
                rows.append({
                    "algorithm": row["algorithm"],
                    "heuristic": row.get("heuristic", ""),
                    "beam_k": row.get("beam_k", ""),
                    "depth": depth,
                    "ok": (row.get("termination") or "ok") == "ok",
                    "expanded": _to_int(row.get("expanded")),
                    "generated": _to_int(row.get("generated")),
                    "g": _to_int(row.get("g")),
                    "time_sec": _to_float(row.get("time_sec")),
                })
    return rows

def agg_mean(rows, metric):
    """{label: (depths, means, stds)} over solved runs only."""
    buckets = defaultdict(lambda: defaultdict(list))
    for r in rows:
        v = r.get(metric)
        if not r["ok"] or v is None:
            continue
        buckets[series_label(r)][r["depth"]].append(v)
    series = {}
    for label, by_depth in buckets.items():
        xs = sorted(by_depth.keys())
        ys = [statistics.mean(by_depth[d]) for d in xs]
        es = [statistics.pstdev(by_depth[d]) if len(by_depth[d]) > 1 else 0.0 for d in xs]
        series[label] = (xs, ys, es)
    return series

def solve_rate(rows):
    buckets = defaultdict(lambda: defaultdict(list))
    for r in rows:
        buckets[series_label(r)][r["depth"]].append(1.0 if r["ok"] else 0.0)
    return {label: (sorted(d), [statistics.mean(d[x]) for x in sorted(d)]) for label, d in buckets.items()}

def plot_metric(ax, rows, metric):
    for label, (xs, ys, es) in sorted(agg_mean(rows, metric).items()):
        ax.errorbar(xs, ys, yerr=es, marker="o", capsize=3, label=label)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std, solved runs)")
    ax.grid(True)
    ax.legend()

def plot_solve_rate(ax, rows):
    for label, (xs, ys) in sorted(solve_rate(rows).items()):
        ax.plot(xs, ys, marker="o", label=label)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel("solve rate")
    ax.set_ylim(-0.05, 1.05)
    ax.set_title("Fraction of instances solved")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str):
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main():
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args()

    rows = read_rows(args.csv)
    if not rows:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    plot_metric(axes[0], rows, "generated")
    plot_metric(axes[1], rows, "g")
    plot_solve_rate(axes[2], rows)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    for metric in ["expanded", "generated", "g", "time_sec"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, rows, metric)
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        plt.close(fig)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
