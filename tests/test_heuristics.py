import pytest

from eightpuzzle.domains.puzzle8 import GOAL, scramble
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.heuristics.misplaced import misplaced_tiles, uniform_cost
from eightpuzzle.heuristics.modes import Mode, heuristic_for, mode_from_name, parse_mode

NEAR = (1, 2, 3, 4, 0, 6, 7, 5, 8)
SHIFTED = (0, 1, 2, 3, 4, 5, 6, 7, 8)

def test_goal_scores_zero():
    assert misplaced_tiles(GOAL) == 0
    assert manhattan(GOAL) == 0
    assert uniform_cost(GOAL) == 0

def test_near_goal():
    assert misplaced_tiles(NEAR) == 2
    assert manhattan(NEAR) == 2

def test_shifted_board():
    assert misplaced_tiles(SHIFTED) == 8
    assert manhattan(SHIFTED) == 12

def test_uniform_cost_is_always_zero():
    assert uniform_cost(SHIFTED) == 0

@pytest.mark.parametrize("hfun", [misplaced_tiles, manhattan, uniform_cost])
def test_heuristics_are_pure(hfun):
    for seed in range(10):
        s = scramble(20, seed)
        assert hfun(s) == hfun(s)

def test_manhattan_dominates_misplaced():
    for seed in range(50):
        s = scramble(25, seed)
        assert manhattan(s) >= misplaced_tiles(s) >= 0

@pytest.mark.parametrize("choice, mode", [
    ("1", Mode.UNIFORM_COST),
    ("2", Mode.MISPLACED_TILES),
    ("3", Mode.MANHATTAN),
    (" 3\n", Mode.MANHATTAN),
    ("4", Mode.NONE),
    ("", Mode.NONE),
    ("manhattan", Mode.NONE),
])
def test_parse_mode(choice, mode):
    assert parse_mode(choice) is mode

def test_heuristic_for_modes():
    assert heuristic_for(Mode.UNIFORM_COST) is uniform_cost
    assert heuristic_for(Mode.NONE) is uniform_cost
    assert heuristic_for(Mode.MISPLACED_TILES) is misplaced_tiles
    assert heuristic_for(Mode.MANHATTAN) is manhattan

def test_mode_from_name():
    assert mode_from_name("ucs") is Mode.UNIFORM_COST
    assert mode_from_name("MANHATTAN") is Mode.MANHATTAN
    with pytest.raises(ValueError):
        mode_from_name("linear_conflict")
