from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
import random

State = Tuple[int, ...]  # 9-length tuple, 0 is blank
GOAL: State = (1,2,3,4,5,6,7,8,0)
SIZE = 3
BLANK = 0

# Blank moves in expansion order: up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

def _moves_from(i: int) -> Tuple[int, ...]:
    r, c = divmod(i, SIZE)
    out = []
    for dr, dc in DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            out.append(nr * SIZE + nc)
    return tuple(out)

# Precomputed blank moves on 3x3 grid, ordered up/down/left/right
_NEI = {i: _moves_from(i) for i in range(SIZE * SIZE)}

def make_state(values: Iterable[int]) -> State:
    """Build a board, rejecting anything that is not a permutation of 0..8."""
    s = tuple(int(v) for v in values)
    if len(s) != SIZE * SIZE:
        raise ValueError(f"expected {SIZE * SIZE} tiles, got {len(s)}")
    if sorted(s) != list(range(SIZE * SIZE)):
        raise ValueError(f"tiles must be exactly 0..{SIZE * SIZE - 1}, got {list(s)}")
    return s

def parse_row(line: str) -> List[int]:
    """Integers of one input row; non-integer tokens are dropped."""
    out: List[int] = []
    for tok in line.split():
        try:
            out.append(int(tok))
        except ValueError:
            continue
    return out

def parse_board(rows: Iterable[str]) -> State:
    rows = list(rows)
    if len(rows) != SIZE:
        raise ValueError(f"expected {SIZE} rows, got {len(rows)}")
    cells: List[int] = []
    for k, line in enumerate(rows):
        row = parse_row(line)
        if len(row) != SIZE:
            raise ValueError(f"row {k + 1} needs {SIZE} integers, got {len(row)}")
        cells.extend(row)
    return make_state(cells)

def format_rows(s: State) -> List[str]:
    """['[1, 2, 3]', '[4, 5, 6]', '[7, 8, 0]']"""
    return ["[" + ", ".join(str(t) for t in s[SIZE*r:SIZE*r+SIZE]) + "]" for r in range(SIZE)]

def blank_index(s: State) -> Optional[int]:
    try:
        return s.index(BLANK)
    except ValueError:
        return None

def successors(s: State) -> List[State]:
    """States reachable by sliding the blank up, down, left or right (in that order)."""
    i = blank_index(s)
    if i is None:
        return []
    out: List[State] = []
    for j in _NEI[i]:
        lst = list(s)
        lst[i], lst[j] = lst[j], lst[i]
        out.append(tuple(lst))
    return out

def inversions(s: State) -> int:
    arr = [x for x in s if x != BLANK]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv

def is_solvable(s: State) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    return (inversions(s) % 2) == 0

def scramble(depth: int, seed: int) -> State:
    """Scramble GOAL by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = GOAL
    last_blank = None
    for _ in range(depth):
        z = s.index(BLANK)
        cand = list(_NEI[z])
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        last_blank = z
        s = tuple(lst)
    return s

def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping inversion parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != BLANK)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != BLANK)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)
