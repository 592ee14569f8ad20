from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from eightpuzzle.domains.puzzle8 import (
    scramble,
    is_solvable,
    make_unsolvable_variant,
)
from eightpuzzle.heuristics.modes import Mode, mode_from_name
from eightpuzzle.search.best_first import solve

State = Tuple[int, ...]

HEADER = [
    "mode","scramble_depth","seed",
    "solution_depth","expanded","generated","max_frontier","explored",
    "time_sec","termination","solvable",
]

DEFAULT_MODES = ["ucs", "misplaced", "manhattan"]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(d, seed)
            attempts += 1
            if is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def result_row(mode: Mode, inst: Instance, res, solvable_flag: int) -> list:
    return [
        mode.value, inst.depth, inst.seed,
        "" if res["depth"] is None else res["depth"],
        res["expanded"], res["generated"], res["max_frontier"], res["explored"],
        f"{res['time']:.6f}", res["termination"], solvable_flag,
    ]

def rejected_row(mode: Mode, inst: Instance) -> list:
    return [mode.value, inst.depth, inst.seed, "", "", "", "", "", "", "rejected", 0]

def run(insts: List[Instance], modes: List[Mode], out: Path, include_unsolvable: bool = False) -> int:
    """Solve every instance under every mode and write one CSV row per run. Returns rows written."""
    out.parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for mode in modes:
                w.writerow(result_row(mode, inst, solve(inst.state, mode), 1))
                n += 1
            if include_unsolvable:
                # Unsolvable boards never reach the search engine
                u = make_unsolvable_variant(inst.state)
                if is_solvable(u):
                    raise RuntimeError(f"Parity flip produced a solvable board: {u}")
                bad = Instance(seed=inst.seed, depth=inst.depth, state=u)
                for mode in modes:
                    w.writerow(rejected_row(mode, bad))
                    n += 1
    return n

def main():
    ap = argparse.ArgumentParser(description="UCS / A* (misplaced, Manhattan) 8-puzzle experiment runner")
    ap.add_argument("--modes", nargs="+", choices=DEFAULT_MODES, default=DEFAULT_MODES)
    ap.add_argument("--depths", type=int, nargs="+", default=[4,8,12,16,20])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also record parity-flipped variants (rejected before search)")
    args = ap.parse_args()

    modes = [mode_from_name(m) for m in args.modes]
    insts = generate_instances(args.depths, args.per_depth, start_seed=args.seed)
    run(insts, modes, args.out, include_unsolvable=args.include_unsolvable)
    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
