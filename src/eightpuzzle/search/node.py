from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

State = Tuple[int, ...]

@dataclass(frozen=True)
class Node:
    state: State
    cost: int                     # g(n), moves from start
    depth: int
    heuristic: int                # h(n)
    parent: Optional[int] = None  # handle of the parent in the owning NodeArena
    handle: int = 0

    @property
    def f(self) -> int:
        return self.cost + self.heuristic

def lower_f(a: Node, b: Node) -> bool:
    """Heap comparison: lower f = g + h is higher priority."""
    return a.f < b.f

class NodeArena:
    """Append-only store of search nodes; parents are referenced by index."""

    def __init__(self):
        self._nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, handle: int) -> Node:
        return self._nodes[handle]

    def add(self, state: State, cost: int, heuristic: int, parent: Optional[Node] = None) -> Node:
        node = Node(
            state=state,
            cost=cost,
            depth=0 if parent is None else parent.depth + 1,
            heuristic=heuristic,
            parent=None if parent is None else parent.handle,
            handle=len(self._nodes),
        )
        self._nodes.append(node)
        return node

    def parent_of(self, node: Node) -> Optional[Node]:
        if node.parent is None:
            return None
        return self._nodes[node.parent]
