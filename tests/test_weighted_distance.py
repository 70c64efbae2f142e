"""Direction-weighted heuristic."""
import pytest

from weighted_tiles.domains.puzzle8 import DEFAULT_START, GOAL, goal_positions
from weighted_tiles.heuristics.weighted_distance import weighted_distance


def test_goal_scores_zero():
    assert weighted_distance(GOAL) == 0


def test_default_start():
    assert weighted_distance(DEFAULT_START) == 31


def test_one_move_from_goal():
    # blank moved west from the goal: 6 now sits in the centre
    assert weighted_distance((7, 8, 1, 0, 6, 2, 5, 4, 3)) == 17


def test_horizontal_term_uses_row_index():
    # 1 and 7 swapped in row 0. Horizontal deviation is row - goal_col:
    # tile 1: 3 * |0 - 2| + 1 misplaced; tile 7: 0 - 0 = 0, + 1 misplaced;
    # tile 8 stays put but still scores 3 * |0 - 1|
    assert weighted_distance((1, 8, 7, 6, 0, 2, 5, 4, 3)) == 18


def test_explicit_goal_map():
    goal = (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert weighted_distance(goal, goal_positions(goal), goal) == 0
    assert weighted_distance(GOAL, goal_positions(goal), goal) > 0


@pytest.mark.parametrize("state", [GOAL, DEFAULT_START, (0, 1, 2, 3, 4, 5, 6, 7, 8)])
def test_non_negative_and_pure(state):
    before = tuple(state)
    assert weighted_distance(state) >= 0
    assert weighted_distance(state) == weighted_distance(state)
    assert state == before
