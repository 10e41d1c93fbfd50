#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

GROUP = ["algorithm", "heuristic", "beam_k", "depth"]
METRICS = ["expanded", "generated", "g", "time_sec"]

def load_many(paths: List[str]) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p, dtype={"beam_k": str})
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in METRICS + ["depth", "seed"]:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    df["beam_k"] = df["beam_k"].fillna("").astype(str)
    df["termination"] = df["termination"].fillna("ok")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per (algorithm, heuristic, beam_k, depth): solve rate plus mean/std of metrics over solved runs."""
    if df.empty:
        return df
    rate = df.groupby(GROUP)["termination"].agg(
        runs="size",
        solve_rate=lambda t: float(np.mean(t.to_numpy() == "ok")),
    )
    ok = df[df["termination"] == "ok"]
    stats = ok.groupby(GROUP)[METRICS].agg(["mean", "std"])
    stats.columns = [f"{m}_{s}" for m, s in stats.columns]
    return rate.join(stats).reset_index()

def main():
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (solve rate, mean/std per depth).")
    ap.add_argument("csv", nargs="+")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args()

    table = summarize(load_many(args.csv))
    if table.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return
    with pd.option_context("display.max_rows", None, "display.width", 160):
        print(table.round(3).to_string(index=False))
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")

if __name__ == "__main__":
    main()
