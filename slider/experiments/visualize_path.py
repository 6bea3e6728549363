#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from slider.domains.board import Board
from slider.domains.loader import load_board
from slider.search.solver import Solver

def draw_board(board: Board, out_path: Path):
    n = board.n
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(board.tiles):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_frames(path: List[Board], outdir: Path) -> List[Path]:
    frames = []
    for i, b in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(b, p)
        frames.append(p)
    return frames

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--board", type=Path, default=None, help="Board file; scrambles a new instance if omitted")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", type=Path, default=Path("report/figs/example_path"))
    args = p.parse_args(argv)

    start = load_board(args.board) if args.board else Board.scramble(args.n, args.depth, args.seed)
    solver = Solver(start)
    if not solver.is_solvable():
        print("No solution possible")
        return

    frames = save_frames(solver.solution(), args.outdir)
    print(f"Saved {len(frames)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
