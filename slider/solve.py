#!/usr/bin/env python3
import argparse, logging

from slider.domains.loader import MalformedBoardError, load_board
from slider.search.solver import Solver

def format_report(solver: Solver) -> str:
    if not solver.is_solvable():
        return "No solution possible"
    lines = [f"Minimum number of moves = {solver.moves()}"]
    for board in solver.solution():
        lines.append(str(board))
    return "\n".join(lines)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve a sliding-tile puzzle optimally (A*, Manhattan).")
    ap.add_argument("path", help="Board file: n followed by n*n tiles, 0 is the blank")
    ap.add_argument("--quiet", action="store_true", help="Print only the move count (-1 if unsolvable)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        initial = load_board(args.path)
    except OSError as e:
        ap.error(f"cannot read {args.path}: {e.strerror or e}")
    except MalformedBoardError as e:
        ap.error(f"malformed board in {args.path}: {e}")

    solver = Solver(initial)
    if args.quiet:
        print(solver.moves())
    else:
        print(format_report(solver))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
