#!/usr/bin/env python3
import argparse
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

REQUIRED = {"n", "depth", "solvable", "expanded", "time_sec"}

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1)/np.sqrt(n)

def load(paths: List[Path]) -> pd.DataFrame:
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        missing = REQUIRED - set(df.columns)
        if missing:
            raise ValueError(f"{p}: missing columns {sorted(missing)}")
        frames.append(df)
    if not frames:
        raise ValueError("no result files given")
    return pd.concat(frames, ignore_index=True)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per (n, depth, solvable): expansion stats and mean time ± SEM."""
    g = df.groupby(["n", "depth", "solvable"])
    out = g.agg(
        runs=("expanded", "size"),
        expanded_mean=("expanded", "mean"),
        expanded_median=("expanded", "median"),
        expanded_max=("expanded", "max"),
        time_mean=("time_sec", "mean"),
        time_sem=("time_sec", sem),
    )
    return out.reset_index()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs by board size, depth and solvability.")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--save", type=Path, default=None, help="Optional CSV path for the summary table")
    args = ap.parse_args(argv)

    table = summarize(load(args.csv))
    print(table.to_string(index=False, float_format=lambda v: f"{v:.4f}"))
    if args.save is not None:
        args.save.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.save, index=False)
        print(f"Saved: {args.save}")

if __name__ == "__main__":
    main()
