"""Utility functions for testing LLRB tree invariants."""

from typing import List, Optional

from llrb_tree.base import BLACK, RED, LLRBNode
from llrb_tree.invariants import TREE_FLAGS
from llrb_tree.keys import StrKey
from llrb_tree.llrb_tree_base import LLRBTree
from llrb_tree.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: LLRBTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertGreater(
            stats.black_height, 0,
            f"Invariant failed: black_height={stats.black_height} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertLessEqual(
            stats.height, 2 * stats.black_height,
            f"Invariant failed: height={stats.height} > 2 * black_height={stats.black_height}\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_key,
            f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
        )
        size = t.size()
        tc.assertEqual(size, stats.node_count,
                       f"Invariant failed: size()={size} ≠ node_count={stats.node_count}, \n\n{err_msg}")


def node(key: str, color: bool = BLACK, left: Optional[LLRBNode] = None,
         right: Optional[LLRBNode] = None, value=None) -> LLRBNode:
    """Build a node by hand; the value defaults to int(key)."""
    n = LLRBNode(StrKey(key), int(key) if value is None else value, color)
    n.left = left
    n.right = right
    return n


def red(key: str, left: Optional[LLRBNode] = None, right: Optional[LLRBNode] = None) -> LLRBNode:
    return node(key, RED, left, right)


def black(key: str, left: Optional[LLRBNode] = None, right: Optional[LLRBNode] = None) -> LLRBNode:
    return node(key, BLACK, left, right)


def keys_of(keys: List[StrKey]) -> List[str]:
    return [k.value for k in keys]
