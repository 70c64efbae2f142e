#!/usr/bin/env python3
import sys
from pathlib import Path

from weighted_tiles.experiments import runner, visualize_path
from weighted_tiles.search.best_first import TIE_BREAKS


def main(outdir: Path = Path("results")) -> int:
    """Trace and path CSVs for every tie-break, then images of the fifo solution."""
    outdir.mkdir(exist_ok=True)
    for tb in TIE_BREAKS:
        argv = ["--quiet", "--tie_break", tb, "--log-level", "INFO",
                "--trace_csv", str(outdir / f"trace_{tb}.csv"),
                "--path_csv", str(outdir / f"path_{tb}.csv")]
        print("Running: runner", " ".join(argv))
        rc = runner.main(argv)
        if rc != 0:
            return rc
    return visualize_path.main(["--outdir", str(outdir / "figs" / "example_path")])

if __name__ == "__main__":
    sys.exit(main())
