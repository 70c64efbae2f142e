from __future__ import annotations
import sys
from typing import List, Optional, TextIO

import numpy as np
import pandas as pd

from weighted_tiles.domains.puzzle8 import Node, State, state_key, to_grid


def format_state(state: State, g: int, h: int, exp: int) -> str:
    """One trace block: three bracketed rows, costs, expansion order, blank line."""
    lines = ["[" + "".join(f" {v} " for v in row) + "]" for row in to_grid(state)]
    lines.append(f"g(n): {g}, h(n): {h}")
    lines.append(f"Expansion order: {exp}")
    lines.append("")
    return "\n".join(lines) + "\n"


class TraceReporter:
    """
    Sink for generation events and the final solution listing.

    Pass `on_generate` to the search driver. Events are written to `stream`
    (stdout when not given, nowhere when quiet) and, with record=True, kept
    as rows for trace_frame().
    """
    def __init__(self, stream: Optional[TextIO] = None, quiet: bool = False, record: bool = False):
        self.stream = None if quiet else (stream if stream is not None else sys.stdout)
        self.record = record
        self.events: List[dict] = []

    def _write(self, text: str) -> None:
        if self.stream is not None:
            self.stream.write(text)

    def on_generate(self, node: Node, expansion_order: int) -> None:
        self._write(format_state(node.state, node.g, node.h, expansion_order))
        if self.record:
            self.events.append({
                "state": state_key(node.state),
                "move": node.move,
                "g": node.g,
                "h": node.h,
                "f": node.f,
                "expansion_order": expansion_order,
            })

    def print_solution(self, path: List[Node]) -> None:
        # expansion order is listed as 0 for every node of the solution
        self._write("Solution: \n")
        for n in path:
            self._write(format_state(n.state, n.g, n.h, 0))


def trace_frame(events: List[dict]) -> pd.DataFrame:
    cols = ["state", "move", "g", "h", "f", "expansion_order"]
    return pd.DataFrame(events, columns=cols)


def path_frame(path: List[Node]) -> pd.DataFrame:
    """Solution path as a table, root first, with the cost of each step."""
    g = np.array([n.g for n in path], dtype=int)
    return pd.DataFrame({
        "step": np.arange(len(path)),
        "state": [state_key(n.state) for n in path],
        "move": [n.move for n in path],
        "g": g,
        "h": [n.h for n in path],
        "step_cost": np.diff(g, prepend=0),
    })
