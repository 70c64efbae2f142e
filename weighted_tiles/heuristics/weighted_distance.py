from __future__ import annotations

from weighted_tiles.domains.puzzle8 import GOAL, GOAL_POSITIONS, GoalPositions, N, State

VERTICAL_WEIGHT = 2    # north/south step cost
WEST_WEIGHT = 3        # applied to negative horizontal deviation


def weighted_distance(s: State, goal_pos: GoalPositions = GOAL_POSITIONS, goal: State = GOAL) -> int:
    """
    Direction-weighted distance to goal, blank ignored.

    Per tile: 2 per row away from its goal row, a horizontal term from
    dev = row - goal_col (3*|dev| when dev < 0, dev otherwise), and +1 when
    the tile is not on its goal cell. The horizontal term takes the row
    index, not the column. The goal board itself scores 0.
    """
    if s == goal:
        return 0
    total = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        row, _col = divmod(idx, N)
        gr, gc = goal_pos[tile]
        vertical = abs(row - gr) * VERTICAL_WEIGHT
        dev = row - gc
        horizontal = abs(dev) * WEST_WEIGHT if dev < 0 else dev
        if tile != goal[idx]:
            total += 1
        total += vertical + horizontal
    return total
