#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("All modes", "python -m eightpuzzle.experiments.runner --depths 4 8 12 16 20 --per_depth 10 --include_unsolvable --out results/modes.csv")
    run("Summary", "python -m eightpuzzle.experiments.summarize results/modes.csv --out results/modes_summary.csv")
    run("Plots", "python -m eightpuzzle.experiments.plot results/modes.csv --save results/plots")

if __name__ == "__main__":
    main()
