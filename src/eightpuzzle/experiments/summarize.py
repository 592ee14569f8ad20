#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

MODE_ORDER = ["manhattan", "misplaced", "ucs"]  # fewest expansions first

def load_results(paths: Iterable[os.PathLike]) -> pd.DataFrame:
    """Concatenate runner CSVs and keep only searches that reached the goal."""
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(str(p))
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    for c in ("scramble_depth","seed","solution_depth","expanded","generated","max_frontier","explored","time_sec"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")

    term = df.get("termination", pd.Series("ok", index=df.index))
    df = df[term.fillna("ok") == "ok"]
    return df.dropna(subset=["solution_depth", "expanded"])

def effective_branching_factor(expanded: float, depth: float) -> float:
    """b* with 1 + b + ... + b^d = N + 1, N = nodes expanded."""
    if depth is None or np.isnan(depth) or depth < 1 or expanded < 1:
        return float("nan")
    d = int(depth)
    coeffs = np.ones(d + 1)
    coeffs[-1] = -float(expanded)  # b^d + ... + b + 1 - (N + 1)
    roots = np.roots(coeffs)
    real = roots[np.isclose(roots.imag, 0.0) & (roots.real > 0)].real
    return float(real.max()) if real.size else float("nan")

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["ebf"] = [effective_branching_factor(e, d) for e, d in zip(df["expanded"], df["solution_depth"])]
    g = df.groupby(["mode", "scramble_depth"])
    out = g.agg(
        n=("expanded", "size"),
        solution_depth=("solution_depth", "mean"),
        expanded_mean=("expanded", "mean"),
        expanded_std=("expanded", "std"),
        max_frontier_mean=("max_frontier", "mean"),
        time_mean=("time_sec", "mean"),
        ebf=("ebf", "mean"),
    )
    out["expanded_std"] = out["expanded_std"].fillna(0.0)
    return out.reset_index()

def check_properties(df: pd.DataFrame) -> dict:
    """
    Per instance (scramble_depth, seed) present under all three modes:
    - dominance: expanded(manhattan) <= expanded(misplaced) <= expanded(ucs)
    - same_depth: all modes report the same solution depth
    """
    key = ["scramble_depth", "seed"]
    exp = df.pivot_table(index=key, columns="mode", values="expanded", aggfunc="first")
    dep = df.pivot_table(index=key, columns="mode", values="solution_depth", aggfunc="first")
    if not set(MODE_ORDER) <= set(exp.columns):
        return {"instances": 0, "dominance": float("nan"), "same_depth": float("nan")}
    exp = exp[MODE_ORDER].dropna()
    dep = dep.loc[exp.index, MODE_ORDER]
    e = exp.to_numpy()
    dominance = np.all(np.diff(e, axis=1) >= 0, axis=1)
    same_depth = np.all(dep.to_numpy() == dep.to_numpy()[:, :1], axis=1)
    return {
        "instances": int(len(exp)),
        "dominance": float(dominance.mean()) if len(exp) else float("nan"),
        "same_depth": float(same_depth.mean()) if len(exp) else float("nan"),
    }

def main():
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per mode and scramble depth.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args()

    df = load_results(args.csv)
    if df.empty:
        print("No solved rows to summarize. Are your CSVs empty?")
        return

    table = summarize(df)
    with pd.option_context("display.width", 140, "display.max_columns", 20):
        print(table.to_string(index=False, float_format=lambda x: f"{x:.3f}"))

    props = check_properties(df)
    print(f"\nInstances solved by all modes: {props['instances']}")
    print(f"manhattan <= misplaced <= ucs (expanded): {props['dominance']:.1%}")
    print(f"identical solution depth across modes:    {props['same_depth']:.1%}")

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")

if __name__ == "__main__":
    main()
