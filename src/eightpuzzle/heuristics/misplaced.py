from typing import Tuple
from eightpuzzle.domains.puzzle8 import GOAL, BLANK

State = Tuple[int, ...]

def misplaced_tiles(s: State) -> int:
    return sum(1 for tile, goal in zip(s, GOAL) if tile != goal and tile != BLANK)

def uniform_cost(s: State) -> int:
    return 0
