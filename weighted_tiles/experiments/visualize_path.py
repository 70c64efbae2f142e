#!/usr/bin/env python3
from __future__ import annotations
import argparse, os, sys
from pathlib import Path
from typing import List, Optional

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from weighted_tiles.domains.puzzle8 import DEFAULT_START_GRID, N, Node, to_grid
from weighted_tiles.errors import MalformedBoard, NoSolutionFound
from weighted_tiles.experiments.runner import parse_board
from weighted_tiles.search.best_first import TIE_BREAKS, solve


def caption(node: Node) -> str:
    return f"{node.move or 'start'}  g={node.g} h={node.h} f={node.f}"


def draw_board(node: Node, out_path: Path) -> Path:
    """Render node's board as a tile grid, blank left empty, with its costs as the title."""
    fig, ax = plt.subplots(figsize=(3, 3))
    ax.set_xlim(0, N); ax.set_ylim(N, 0)
    ax.set_xticks([]); ax.set_yticks([])
    ax.set_aspect("equal")
    for r, row in enumerate(to_grid(node.state)):
        for c, t in enumerate(row):
            if t == 0:
                continue
            ax.add_patch(plt.Rectangle((c + 0.05, r + 0.05), 0.9, 0.9, fill=False, linewidth=1.5))
            ax.text(c + 0.5, r + 0.5, str(t), ha="center", va="center", fontsize=16)
    ax.set_title(caption(node), fontsize=9)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path


def save_path_frames(path: List[Node], outdir: Path) -> List[Path]:
    """One PNG per board, step_000.png for the start board."""
    return [draw_board(n, outdir / f"step_{i:03d}.png") for i, n in enumerate(path)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve one board and save images along the solution path.")
    p.add_argument("--start", type=parse_board, default=DEFAULT_START_GRID)
    p.add_argument("--tie_break", choices=list(TIE_BREAKS), default="fifo")
    p.add_argument("--outdir", type=Path, default=Path("report/figs/example_path"))
    args = p.parse_args(argv)

    try:
        res = solve(args.start, tie_break=args.tie_break)
    except MalformedBoard as e:
        p.error(str(e))
    except NoSolutionFound as e:
        print(f"No path: {e}")
        return 1

    frames = save_path_frames(res["path"], args.outdir)
    print(f"Saved {len(frames)} frames to {args.outdir}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
