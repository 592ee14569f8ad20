from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
from time import perf_counter

from eightpuzzle.domains.puzzle8 import GOAL, successors
from eightpuzzle.heuristics.modes import Mode, heuristic_for
from eightpuzzle.search.heap import BinaryHeap
from eightpuzzle.search.node import Node, NodeArena, lower_f

State = Tuple[int, ...]

def expand(node: Node, hfun: Callable[[State], int], arena: NodeArena) -> List[Node]:
    """Child nodes for every legal blank move, each one move deeper than node."""
    return [arena.add(s2, node.cost + 1, hfun(s2), parent=node) for s2 in successors(node.state)]

def best_first_search(
    start: State,
    hfun: Callable[[State], int],
    goal: State = GOAL,
    on_expand: Optional[Callable[[Node], None]] = None,
    algorithm: str = "best-first",
):
    """
    Best-first search ordered by f = g + h over unit-cost blank moves.

    Duplicates are pruned only at enqueue time: a successor is dropped when a
    cost <= its g is already recorded for its state. The explored set is
    filled but never consulted, so a state may sit in the frontier several
    times before its cheapest copy is dequeued.
    on_expand: called with every dequeued node before the goal test.
    """
    t0 = perf_counter()
    arena = NodeArena()
    frontier: BinaryHeap[Node] = BinaryHeap(better=lower_f)

    root = arena.add(start, 0, hfun(start))
    frontier.enqueue(root)
    cost_so_far: Dict[State, int] = {start: 0}
    explored: Set[State] = set()

    expanded = 0
    generated = 0
    max_frontier = 0

    while not frontier.is_empty:
        node = frontier.dequeue()
        if node is None:
            break

        explored.add(node.state)
        expanded += 1
        if on_expand is not None:
            on_expand(node)

        if node.state == goal:
            return {
                "depth": node.depth,
                "expanded": expanded,
                "generated": generated,
                "max_frontier": max_frontier,
                "explored": len(explored),
                "time": perf_counter() - t0,
                "algorithm": algorithm,
                "termination": "ok",
            }

        for child in expand(node, hfun, arena):
            generated += 1
            known = cost_so_far.get(child.state)
            if known is not None and known <= child.cost:
                continue
            cost_so_far[child.state] = child.cost
            frontier.enqueue(child)
            max_frontier = max(max_frontier, len(frontier))

    # Frontier exhausted without reaching the goal
    return {
        "depth": None,
        "expanded": expanded,
        "generated": generated,
        "max_frontier": max_frontier,
        "explored": len(explored),
        "time": perf_counter() - t0,
        "algorithm": algorithm,
        "termination": "exhausted",
    }

def solve(start: State, mode: Mode, on_expand: Optional[Callable[[Node], None]] = None):
    """Run best_first_search with the heuristic belonging to a Mode."""
    return best_first_search(start, heuristic_for(mode), on_expand=on_expand, algorithm=mode.value)
