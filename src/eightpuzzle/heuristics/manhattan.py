from typing import Dict, Tuple
from eightpuzzle.domains.puzzle8 import GOAL, SIZE, BLANK

State = Tuple[int, ...]

_goal_pos: Dict[int, Tuple[int, int]] = {GOAL[i]: divmod(i, SIZE) for i in range(SIZE * SIZE)}

def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank and in-place tiles ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == BLANK or tile == GOAL[idx]:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = _goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
