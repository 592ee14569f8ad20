#!/usr/bin/env python3
"""
Interactive 8-puzzle solver.

Reads a board row by row, rejects unsolvable boards, asks for a search mode
and prints every expanded state followed by the solution depth, the number of
expanded nodes and the largest frontier seen.
"""
from __future__ import annotations
import argparse
from typing import Callable, Optional, Tuple

from eightpuzzle.domains.puzzle8 import format_rows, is_solvable, parse_board
from eightpuzzle.heuristics.modes import LABELS, MENU, Mode, parse_mode
from eightpuzzle.search.best_first import solve
from eightpuzzle.search.node import Node

State = Tuple[int, ...]

BANNER = """Let's solve the 8 puzzle, proceed to enter your puzzle. Below are some things about this game:-
       • Type 0 to present the empty tile.
       • Only enter valid 8-puzzles for best experience.
       • Enter the puzzle delimiting the numbers with a space.
       • Press ENTER/RETURN key only when done.
       • Initializing...
"""

ROW_PROMPTS = (
    "Start by entering the first row: ",
    "Now the second row: ",
    "And the third row: ",
)

UNSOLVABLE_MSG = "No solution found. Please check your input and try again."
INVALID_MODE_MSG = "Oops. Try again."

def mode_menu() -> str:
    lines = ["Just one step left before we start the game. Here are modes available in which you want to play:-"]
    for key, mode in MENU.items():
        lines.append(f" {key}. {LABELS[mode]}.")
    lines.append("")
    lines.append("Select the mode by only typing the number.")
    return "\n".join(lines) + "\n"

def print_expansion(node: Node) -> None:
    print(f"The state which is best to expand with g(n) = {node.cost} and h(n) = {node.heuristic}")
    for row in format_rows(node.state):
        print(row)

def read_board(ask: Callable[[str], str]) -> State:
    """Prompt until a well-formed, solvable board is entered. EOFError propagates."""
    while True:
        print(BANNER)
        rows = [ask(prompt) for prompt in ROW_PROMPTS]
        print()
        try:
            board = parse_board(rows)
        except ValueError as e:
            print(f"\nInvalid puzzle: {e}. Please try again.\n")
            continue
        if not is_solvable(board):
            print(f"\n{UNSOLVABLE_MSG}\n")
            continue
        return board

def read_mode(ask: Callable[[str], str]) -> Mode:
    print(mode_menu())
    mode = parse_mode(ask(""))
    if mode is Mode.NONE:
        print(INVALID_MODE_MSG)
    return mode

def report(result) -> None:
    if result["termination"] != "ok":
        return
    print(f"Goal state found with solution depth {result['depth']}")
    print(f"Number of expanded nodes: {result['expanded']}")
    print(f"Max queue size: {result['max_frontier']}")

def run_session(ask: Optional[Callable[[str], str]] = None, quiet: bool = False, show_time: bool = False) -> Optional[dict]:
    """One full round: board, mode, search. Returns the search result, or None on end of input."""
    ask = ask or input
    try:
        board = read_board(ask)
        mode = read_mode(ask)
    except EOFError:
        return None
    res = solve(board, mode, on_expand=None if quiet else print_expansion)
    report(res)
    if show_time:
        print(f"Time elapsed in ms is {res['time'] * 1000:.2f}")
    print()
    return res

def main():
    ap = argparse.ArgumentParser(description="Solve an 8-puzzle typed in row by row.")
    ap.add_argument("--quiet", action="store_true", help="Do not print every expanded state")
    ap.add_argument("--time", action="store_true", help="Print elapsed search time in ms")
    args = ap.parse_args()
    run_session(quiet=args.quiet, show_time=args.time)

if __name__ == "__main__":
    main()
