"""Statistics for LLRB trees."""
# pylint: skip-file

import logging
import math
import time
from statistics import mean
from typing import List, Optional, Tuple
from pprint import pprint
from dataclasses import asdict
import numpy as np

from llrb_trees.base import Item
from llrb_trees.llrb_tree_base import (
    LLRBTreeBase,
    TREE_FLAGS,
    Stats,
    tree_stats_,
    collect_items,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s: [%(levelname)s] %(message)s"
)


def assert_invariants(t: LLRBTreeBase, stats: Stats) -> None:
    """Check all invariants, but only log ERROR messages on failures."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error("Invariant failed: %s is False", flag)

    if not t.is_empty():
        if stats.node_count <= 0:
            logging.error(
                "Invariant failed: node_count=%d ≤ 0 for non-empty tree",
                stats.node_count
            )
        if stats.height > max_height(stats.node_count):
            logging.error(
                "Invariant failed: height=%d > %d for %d nodes",
                stats.height, max_height(stats.node_count), stats.node_count
            )
        if stats.least_item is None:
            logging.error(
                "Invariant failed: least_item is None for non-empty tree"
            )
        if stats.greatest_item is None:
            logging.error(
                "Invariant failed: greatest_item is None for non-empty tree"
            )


def max_height(n: int) -> int:
    """Worst-case height of an LLRB tree holding n nodes: 2·log2(n+1)."""
    return int(2 * math.log2(n + 1)) if n > 0 else 0


def random_keys(n: int, seed: Optional[int] = None, space: int = 1 << 24) -> List[int]:
    """Draw n distinct integer keys from [0, space) in random order."""
    if space < n:
        raise ValueError(f"Key-space too small! Required: {n}, Available: {space}")
    rng = np.random.default_rng(seed)
    return [int(k) for k in rng.choice(space, size=n, replace=False)]


def shuffled(keys: List[int], seed: Optional[int] = None) -> List[int]:
    """Return keys in a random order, leaving the input untouched."""
    rng = np.random.default_rng(seed)
    return [keys[i] for i in rng.permutation(len(keys))]


def create_llrb_tree_from(keys: List[int], tree: Optional[LLRBTreeBase] = None) -> LLRBTreeBase:
    """Build a tree by inserting Item(key, f"val{key}") for every key in order."""
    if tree is None:
        tree = LLRBTreeBase()
    tree_insert = tree.replace_or_insert
    for key in keys:
        tree_insert(Item(key, f"val{key}"))
    return tree


def random_llrb_tree_of_size(n: int, seed: Optional[int] = None) -> Tuple[LLRBTreeBase, List[int]]:
    """Create a random LLRB tree with n distinct keys; returns (tree, keys in insertion order)."""
    keys = random_keys(n, seed)
    return create_llrb_tree_from(keys), keys


def check_items_in_order(
    tree: LLRBTreeBase,
    expected_keys: Optional[List[int]] = None
) -> Tuple[List[int], bool, bool]:
    """
    Traverse the tree in order once and compute two invariants:
      1. presence_ok: if `expected_keys` is provided, do we have exactly those keys
                      (with multiplicity)? Otherwise always True.
      2. order_ok: are the keys in non-decreasing order?

    Returns:
        (keys, presence_ok, order_ok)
    """
    keys = [item.key for item in collect_items(tree)]
    order_ok = all(a <= b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_keys is not None:
        presence_ok = sorted(keys) == sorted(expected_keys)

    return keys, presence_ok, order_ok


def repeated_experiment(size: int, repetitions: int, seed: Optional[int] = None) -> None:
    """
    Repeatedly builds random LLRB trees of `size` items and reports their
    average height against the perfect and worst-case bounds.
    """
    rng = np.random.default_rng(seed)
    results = []
    times_build = []
    times_stats = []

    for _ in range(repetitions):
        t0 = time.perf_counter()
        tree, _ = random_llrb_tree_of_size(size, int(rng.integers(1 << 31)))
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = tree_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        assert_invariants(tree, stats)
        results.append(stats)

    print("Last tree stats:")
    pprint(asdict(results[-1]))

    perfect_height = math.ceil(math.log2(size + 1)) if size > 0 else 0
    avg_height = mean(s.height for s in results)
    avg_black_height = mean(s.black_height for s in results)

    print(f"Size: {size}, repetitions: {repetitions}")
    print(f"  avg height        {avg_height:.2f} (perfect {perfect_height}, bound {max_height(size)})")
    print(f"  avg black height  {avg_black_height:.2f}")
    print(f"  avg build time    {mean(times_build):.6f}s")
    print(f"  avg stats time    {mean(times_stats):.6f}s")


if __name__ == "__main__":
    for n in (10, 100, 1000, 10_000):
        repeated_experiment(n, 10, seed=n)
