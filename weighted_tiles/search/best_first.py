from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple
import functools
import heapq
import itertools
import logging
from time import perf_counter

from weighted_tiles.domains.puzzle8 import GOAL, Node, State, expand, from_grid, goal_positions, state_key
from weighted_tiles.errors import NoSolutionFound
from weighted_tiles.heuristics.weighted_distance import weighted_distance

logger = logging.getLogger(__name__)

# Called once per accepted child with the number of nodes expanded so far
GenerateHook = Callable[[Node, int], None]

TIE_BREAKS = ("fifo", "lifo", "h", "g")


def reconstruct_path(node: Optional[Node]) -> List[Node]:
    path: List[Node] = []
    while node is not None:
        path.append(node)
        node = node.parent
    path.reverse()
    return path


def best_first(
    start: State,
    goal: State = GOAL,
    hfun: Optional[Callable[[State], int]] = None,
    tie_break: str = "fifo",
    on_generate: Optional[GenerateHook] = None,
    return_path: bool = True,
):
    """
    Best-first graph search on f = g + h.

    Frontier entries with equal f leave in insertion order under "fifo"
    (the default); "lifo", "h" (lower h first) and "g" (higher g first)
    are also accepted. Children are filtered against the explored set only,
    so the frontier may hold the same board more than once; a board that
    was already expanded is skipped when popped again.

    Without hfun, weighted_distance is scored against the goal passed in.

    Returns a stats dict; termination is "solved" or "exhausted".
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")
    if hfun is None:
        hfun = functools.partial(weighted_distance, goal_pos=goal_positions(goal), goal=goal)
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, int, int], int, Node]] = []
    counter = itertools.count()

    def priority_tuple(node: Node, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "h":    return (node.f, node.h, ctr)
        if tie_break == "g":    return (node.f, -node.g, ctr)
        if tie_break == "lifo": return (node.f, 0, -ctr)
        return (node.f, 0, ctr)

    def push(node: Node) -> None:
        ctr = next(counter)
        heapq.heappush(open_heap, (priority_tuple(node, ctr), ctr, node))

    start_node = Node.root(start, hfun)
    push(start_node)
    logger.info("best-first search from %s (h=%d, tie_break=%s)", state_key(start), start_node.h, tie_break)

    goal_key = state_key(goal)
    explored: Set[str] = set()

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1

    def stats(termination: str, node: Optional[Node]) -> Dict[str, object]:
        return {
            "path": reconstruct_path(node) if (node is not None and return_path) else None,
            "g": node.g if node is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_open": peak_open,
            "peak_closed": len(explored),
            "time": perf_counter() - t0,
            "algorithm": "best-first",
            "tie_break": tie_break,
            "termination": termination,
        }

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, _, node = heapq.heappop(open_heap)
        key = state_key(node.state)
        if key in explored:
            duplicates += 1
            continue

        if key == goal_key:
            logger.info("solved: g=%d after %d expansions", node.g, expanded)
            return stats("solved", node)

        explored.add(key)
        expanded += 1
        logger.debug("expand #%d %s f=%d", expanded, key, node.f)

        for child in expand(node, hfun):
            generated += 1
            if state_key(child.state) in explored:
                continue
            push(child)
            if on_generate is not None:
                on_generate(child, expanded)

    # frontier emptied without popping the goal
    logger.info("exhausted after %d expansions", expanded)
    return stats("exhausted", None)


def solve(
    start_grid: Sequence[Sequence[int]],
    tie_break: str = "fifo",
    on_generate: Optional[GenerateHook] = None,
):
    """Grid entry point. Raises MalformedBoard on bad input, NoSolutionFound when exhausted."""
    res = best_first(from_grid(start_grid), tie_break=tie_break, on_generate=on_generate)
    if res["termination"] != "solved":
        raise NoSolutionFound(res)
    return res
