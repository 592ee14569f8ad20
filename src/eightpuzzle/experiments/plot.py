#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import Tuple

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import SIZE, make_state
from eightpuzzle.experiments.summarize import load_results, summarize

State = Tuple[int, ...]

METRICS = [("expanded_mean", "expanded"), ("max_frontier_mean", "max frontier"), ("time_mean", "seconds")]
LABELS = {"ucs": "UCS", "misplaced": "A* misplaced", "manhattan": "A* Manhattan"}

def plot_metric(ax, table, column: str, ylabel: str, log: bool = False):
    for mode, part in table.groupby("mode"):
        part = part.sort_values("scramble_depth")
        ax.plot(part["scramble_depth"], part[column], marker="o", label=LABELS.get(mode, mode))
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(ylabel)
    ax.set_title(f"{ylabel} vs depth (mean)")
    if log:
        ax.set_yscale("log")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def draw_board(state: State, out_path: Path):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, SIZE); ax.set_ylim(0, SIZE)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(SIZE+1):
        ax.plot([0,SIZE],[i,i], linewidth=1)
        ax.plot([i,i],[0,SIZE], linewidth=1)
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, SIZE)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def plot_results(csv_paths, outdir: Path, log: bool = True):
    df = load_results(csv_paths)
    if df.empty:
        return []
    table = summarize(df)
    base = "combo" if len(csv_paths) > 1 else Path(csv_paths[0]).stem
    saved = []

    fig, axes = plt.subplots(1, len(METRICS), figsize=(15, 5))
    for ax, (column, ylabel) in zip(axes, METRICS):
        plot_metric(ax, table, column, ylabel, log=log)
    plt.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    plt.close(fig)

    for column, ylabel in METRICS:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, table, column, ylabel, log=log)
        plt.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{column}"))
        plt.close(fig)
    return saved

def main():
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="*", help="One or more CSV result files")
    ap.add_argument("--board", type=int, nargs=9, default=None, help="Also render this board (9 tiles, 0 = blank)")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--linear", action="store_true", help="Linear y axis instead of log")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args()

    if args.board is not None:
        draw_board(make_state(args.board), Path(args.save) / "board.png")
    saved = plot_results(args.csv, Path(args.save), log=not args.linear) if args.csv else []
    if args.csv and not saved:
        print("No rows to plot. Are your CSVs empty?")
        return
    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
