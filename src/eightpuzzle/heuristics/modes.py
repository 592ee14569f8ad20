from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Tuple

from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.heuristics.misplaced import misplaced_tiles, uniform_cost

State = Tuple[int, ...]

class Mode(Enum):
    UNIFORM_COST = "ucs"
    MISPLACED_TILES = "misplaced"
    MANHATTAN = "manhattan"
    NONE = "none"

# Menu choices as typed by the user
MENU: Dict[str, Mode] = {
    "1": Mode.UNIFORM_COST,
    "2": Mode.MISPLACED_TILES,
    "3": Mode.MANHATTAN,
}

LABELS: Dict[Mode, str] = {
    Mode.UNIFORM_COST: "Uniform Cost Search",
    Mode.MISPLACED_TILES: "A* with the Misplaced Tile heuristic",
    Mode.MANHATTAN: "A* with the Manhattan Distance heuristic",
    Mode.NONE: "Uniform Cost Search (no mode selected)",
}

_HFUN: Dict[Mode, Callable[[State], int]] = {
    Mode.UNIFORM_COST: uniform_cost,
    Mode.MISPLACED_TILES: misplaced_tiles,
    Mode.MANHATTAN: manhattan,
    Mode.NONE: uniform_cost,
}

def parse_mode(choice: str) -> Mode:
    """'1'/'2'/'3' select a mode; anything else is Mode.NONE."""
    return MENU.get(choice.strip(), Mode.NONE)

def heuristic_for(mode: Mode) -> Callable[[State], int]:
    return _HFUN[mode]

def mode_from_name(name: str) -> Mode:
    n = name.lower()
    for m in Mode:
        if m.value == n or m.name.lower() == n:
            return m
    raise ValueError(name)
