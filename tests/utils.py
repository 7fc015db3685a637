"""Utility functions for testing LLRB tree invariants."""

import logging
from llrb_trees.llrb_tree_base import (
    LLRBTreeBase,
    Stats,
    TREE_FLAGS,
)
from stats.stats_llrb_tree import max_height


def assert_tree_invariants_tc(tc, t: LLRBTreeBase, stats: Stats) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False\n{t.print_structure()}"
        )

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree"
        )
        tc.assertEqual(
            len(t), stats.node_count,
            f"Invariant failed: len()={len(t)} ≠ node_count={stats.node_count}"
        )
        tc.assertLessEqual(
            stats.height, max_height(stats.node_count),
            f"Invariant failed: height={stats.height} too large for {stats.node_count} nodes"
        )
        tc.assertIsNotNone(
            stats.least_item,
            "Invariant failed: least_item is None for non-empty tree"
        )
        tc.assertIsNotNone(
            stats.greatest_item,
            "Invariant failed: greatest_item is None for non-empty tree"
        )
        tc.assertIs(stats.least_item, t.min())
        tc.assertIs(stats.greatest_item, t.max())
    else:
        tc.assertEqual(len(t), 0)
        logging.debug("Empty tree, skipping non-empty invariants")
