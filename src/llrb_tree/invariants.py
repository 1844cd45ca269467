"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from llrb_tree.logging_config import get_logger
from llrb_tree.navigation import iter_inorder

logger = get_logger(__name__)

if TYPE_CHECKING:
    from llrb_tree.llrb_tree_base import LLRBTree
    from llrb_tree.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "no_red_right",
    "no_double_red",
    "black_balanced",
    "root_black",
    "unique_keys",
)


class InvariantError(Exception):
    """Raised when an LLRB tree invariant is violated."""


def assert_tree_invariants_raise(
    t: LLRBTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if not t.is_empty():
        if stats.node_count <= 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
        if stats.black_height <= 0:
            raise InvariantError(f"Invariant failed: black_height={stats.black_height} ≤ 0 for non-empty tree")
        if stats.least_key is None:
            raise InvariantError("Invariant failed: least_key is None for non-empty tree")
        if stats.greatest_key is None:
            raise InvariantError("Invariant failed: greatest_key is None for non-empty tree")
        # height of a balanced LLRB tree is at most 2 * black height
        if stats.height > 2 * stats.black_height:
            raise InvariantError(
                f"Invariant failed: height={stats.height} > 2 * black_height={stats.black_height}"
            )

        size = t.size()
        if size != stats.node_count:
            raise InvariantError(
                f"Invariant failed: t.size()={size} ≠ stats.node_count={stats.node_count}"
            )


def check_keys_in_order(
    tree: LLRBTree,
    expected_keys: Optional[List[Any]] = None,
) -> Tuple[List[Any], bool, bool]:
    """Walk *tree* in key order and validate the keys.

    Returns
    -------
    (keys, presence_ok, order_ok)
    """
    keys: List[Any] = []
    order_ok = True

    prev_key = None
    for n in iter_inorder(tree.root):
        if prev_key is not None and prev_key.compare_to(n.key) >= 0:
            order_ok = False
        keys.append(n.key)
        prev_key = n.key

    presence_ok = True
    if expected_keys is not None:
        if len(keys) != len(expected_keys):
            presence_ok = False
        else:
            presence_ok = set(keys) == set(expected_keys)

    return keys, presence_ok, order_ok
