#!/usr/bin/env python3
"""
Benchmarks for the llrb-trees data structure.

This script measures:
 1. Full LLRB tree build times
 2. Tree statistics of one large random tree
 3. Per-operation cost (get, replace_or_insert, delete) on trees of various sizes

Usage:
    python benchmarks.py [--sizes 100 1000 10000] [--trials T] [--seed S]
"""
import argparse
import time
import gc
from pprint import pprint
from dataclasses import asdict
from statistics import mean, variance

import numpy as np

from stats_llrb_tree import random_keys, random_llrb_tree_of_size, create_llrb_tree_from
from llrb_trees.llrb_tree_base import tree_stats_
from llrb_trees.base import Item


def bench_build(sizes: list[int], seed: int) -> None:
    """Measure building trees of various sizes from random keys."""
    for n in sizes:
        keys = random_keys(n, seed)
        t0 = time.perf_counter()
        _ = create_llrb_tree_from(keys)
        elapsed = time.perf_counter() - t0
        print(f"[bench] build({n}): {elapsed:.4f}s")


def bench_stats(n: int, seed: int) -> None:
    """Build a single random tree and print its stats."""
    tree, _ = random_llrb_tree_of_size(n, seed)
    stats = tree_stats_(tree)
    print(f"[bench] random_llrb_tree_of_size({n}) stats:")
    pprint(asdict(stats))


def _timed(op, args) -> list[float]:
    gc.collect()
    gc.disable()
    try:
        times = []
        for arg in args:
            t0 = time.perf_counter()
            op(arg)
            times.append(time.perf_counter() - t0)
    finally:
        gc.enable()
    return times


def measure_ops(n: int, trials: int, seed: int) -> dict[str, tuple[float, float]]:
    """
    Measure per-operation cost on one tree of exactly `n` items.
    Each measured insert is undone right after so the size stays at n.
    Returns {op: (mean_time_s, variance_time_s)}.
    """
    tree, keys = random_llrb_tree_of_size(n, seed)
    rng = np.random.default_rng(seed + 1)
    present = [Item(keys[i]) for i in rng.integers(0, n, size=trials)]
    fresh = [Item(-1 - int(k)) for k in rng.choice(1 << 20, size=trials, replace=False)]

    results = {}
    results["get"] = _timed(tree.get, present)

    def _insert_then_undo(item):
        tree.replace_or_insert(item)
        tree.delete(item)
    results["insert+delete"] = _timed(_insert_then_undo, fresh)

    return {op: (mean(ts), variance(ts)) for op, ts in results.items()}


def bench_ops(sizes: list[int], trials: int, seed: int) -> None:
    """Run measure_ops for each size and print results."""
    for n in sizes:
        for op, (avg, var) in measure_ops(n, trials, seed).items():
            print(
                f"[bench] {op:<14} size {n:<7} → avg {avg*1e6:8.2f} µs   σ²={var*1e12:8.2f} µs²"
            )


def main():
    parser = argparse.ArgumentParser(description="LLRB tree benchmarks")
    parser.add_argument("--sizes", nargs='+', type=int, default=[100, 1000, 10_000],
                        help="Tree sizes for build and per-operation benchmarks")
    parser.add_argument("--trials", type=int, default=100,
                        help="Number of measured operations per size")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for the random key generator")
    args = parser.parse_args()

    print("\n=== Full LLRB Tree Build ===")
    bench_build(args.sizes, args.seed)

    print("\n=== Random Tree Stats ===")
    bench_stats(max(args.sizes), args.seed)

    print("\n=== Per-Operation Benchmarks ===")
    bench_ops(args.sizes, args.trials, args.seed)


if __name__ == "__main__":
    main()
