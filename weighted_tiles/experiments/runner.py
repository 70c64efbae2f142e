#!/usr/bin/env python3
from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import List, Optional

from weighted_tiles.domains.puzzle8 import DEFAULT_START_GRID, N, to_grid, from_grid
from weighted_tiles.errors import MalformedBoard, NoSolutionFound
from weighted_tiles.experiments.report import TraceReporter, path_frame, trace_frame
from weighted_tiles.search.best_first import TIE_BREAKS, solve

logger = logging.getLogger(__name__)


def parse_board(text: str):
    """'162578043' or '1,6,2,5,7,8,0,4,3' -> 3x3 grid."""
    parts = text.replace(",", " ").split()
    if len(parts) == 1:
        parts = list(parts[0])
    try:
        vals = [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"board must be digits, got {text!r}")
    if len(vals) != N * N:
        raise argparse.ArgumentTypeError(f"board needs {N * N} cells, got {len(vals)}")
    bad = [v for v in vals if not 0 <= v < N * N]
    if bad:
        raise argparse.ArgumentTypeError(f"tiles must be 0-{N * N - 1}, got {bad}")
    return to_grid(from_grid([vals[N*r:N*r+N] for r in range(N)]))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Weighted 8-puzzle best-first search with per-node trace")
    ap.add_argument("--start", type=parse_board, default=DEFAULT_START_GRID,
                    help="Start board, row-major, e.g. 162578043 (default: built-in start)")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="fifo")
    ap.add_argument("--quiet", action="store_true", help="Do not print the per-node trace")
    ap.add_argument("--trace_csv", type=Path, default=None, help="Write generation events to CSV")
    ap.add_argument("--path_csv", type=Path, default=None, help="Write the solution path to CSV")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    reporter = TraceReporter(quiet=args.quiet, record=args.trace_csv is not None)
    try:
        res = solve(args.start, tie_break=args.tie_break, on_generate=reporter.on_generate)
    except MalformedBoard as e:
        ap.error(str(e))
    except NoSolutionFound as e:
        print(f"No solution: {e}")
        return 1
    finally:
        if args.trace_csv is not None:
            args.trace_csv.parent.mkdir(parents=True, exist_ok=True)
            trace_frame(reporter.events).to_csv(args.trace_csv, index=False)
            logger.info("wrote %d trace rows to %s", len(reporter.events), args.trace_csv)

    TraceReporter().print_solution(res["path"])
    if args.path_csv is not None:
        args.path_csv.parent.mkdir(parents=True, exist_ok=True)
        path_frame(res["path"]).to_csv(args.path_csv, index=False)
    logger.info("g=%s expanded=%s generated=%s time=%.3fs",
                res["g"], res["expanded"], res["generated"], res["time"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
