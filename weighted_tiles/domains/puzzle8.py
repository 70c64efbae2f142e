from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from weighted_tiles.errors import MalformedBoard

State = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank
Position = Tuple[int, int]
GoalPositions = Mapping[int, Position]

N = 3

GOAL_GRID = (
    (7, 8, 1),
    (6, 0, 2),
    (5, 4, 3),
)
DEFAULT_START_GRID = (
    (1, 6, 2),
    (5, 7, 8),
    (0, 4, 3),
)

# Blank displacements, in generation order
DIRECTIONS: Tuple[Tuple[str, Position], ...] = (
    ("west",  (0, -1)),
    ("north", (-1, 0)),
    ("east",  (0, 1)),
    ("south", (1, 0)),
)
STEP_COST = MappingProxyType({"west": 1, "north": 2, "east": 3, "south": 2})


def from_grid(grid: Sequence[Sequence[int]]) -> State:
    """Copy a 3x3 grid into a flat State. Raises MalformedBoard on bad shape."""
    rows = list(grid)
    if len(rows) != N or any(len(r) != N for r in rows):
        raise MalformedBoard(f"expected a {N}x{N} grid, got {grid!r}")
    flat = tuple(v for r in rows for v in r)
    if not all(isinstance(v, int) for v in flat):
        raise MalformedBoard(f"board cells must be ints, got {grid!r}")
    return flat


def to_grid(s: State) -> Tuple[Tuple[int, ...], ...]:
    return tuple(s[N*r:N*r+N] for r in range(N))


def state_key(s: State) -> str:
    """Canonical dedup key, e.g. '162578043'."""
    return "".join(str(v) for v in s)


def find_blank_position(s: State) -> Position:
    """Row-major scan for the first 0."""
    for idx, tile in enumerate(s):
        if tile == 0:
            return divmod(idx, N)
    raise MalformedBoard(f"board has no blank cell: {s!r}")


def goal_positions(goal: State) -> GoalPositions:
    """Read-only tile -> (row, col) map for the nonzero tiles of goal."""
    return MappingProxyType({t: divmod(i, N) for i, t in enumerate(goal) if t != 0})


GOAL: State = from_grid(GOAL_GRID)
GOAL_POSITIONS: GoalPositions = goal_positions(GOAL)
DEFAULT_START: State = from_grid(DEFAULT_START_GRID)


@dataclass(frozen=True, eq=False)
class Node:
    """
    One board in the search tree.
    g is the accumulated move cost from the root, h the heuristic of state,
    parent the node this one was generated from (None for the root).
    """
    state: State
    blank: Position
    g: int
    h: int
    parent: Optional["Node"] = None
    move: Optional[str] = None

    @property
    def f(self) -> int:
        return self.g + self.h

    @classmethod
    def root(cls, state: State, hfun: Callable[[State], int]) -> "Node":
        return cls(state=state, blank=find_blank_position(state), g=0, h=hfun(state))


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < N and 0 <= col < N


def neighbors(s: State, blank: Optional[Position] = None) -> List[Tuple[State, int, str, Position]]:
    """Return list of (next_state, cost, direction, new_blank) in west/north/east/south order."""
    br, bc = blank if blank is not None else find_blank_position(s)
    z = br * N + bc
    out: List[Tuple[State, int, str, Position]] = []
    for name, (dr, dc) in DIRECTIONS:
        r, c = br + dr, bc + dc
        if not is_valid_position(r, c):
            continue
        j = r * N + c
        lst = list(s)
        lst[z], lst[j] = lst[j], 0
        out.append((tuple(lst), STEP_COST[name], name, (r, c)))
    return out


def expand(node: Node, hfun: Callable[[State], int]) -> List[Node]:
    """Children of node with g = parent g + direction cost and h = hfun(child)."""
    return [
        Node(state=s2, blank=b2, g=node.g + cost, h=hfun(s2), parent=node, move=name)
        for s2, cost, name, b2 in neighbors(node.state, node.blank)
    ]
