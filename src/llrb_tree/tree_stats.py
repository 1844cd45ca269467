"""Statistics and invariant flags for LLRB tree structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from llrb_tree.base import RED, LLRBNode
from llrb_tree.logging_config import get_logger
from llrb_tree.navigation import iter_inorder

if TYPE_CHECKING:
    from llrb_tree.llrb_tree_base import LLRBTree

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for an LLRB tree (or subtree)."""

    node_count: int
    red_count: int
    height: int
    black_height: int
    least_key: Any | None
    greatest_key: Any | None
    is_search_tree: bool
    no_red_right: bool
    no_double_red: bool
    black_balanced: bool
    root_black: bool
    unique_keys: bool


def _empty_stats() -> Stats:
    return Stats(
        node_count=0,
        red_count=0,
        height=0,
        black_height=0,
        least_key=None,
        greatest_key=None,
        is_search_tree=True,
        no_red_right=True,
        no_double_red=True,
        black_balanced=True,
        root_black=True,
        unique_keys=True,
    )


def _subtree_stats(n: Optional[LLRBNode]) -> Stats:
    if n is None:
        return _empty_stats()

    left = _subtree_stats(n.left)
    right = _subtree_stats(n.right)
    red = n.color == RED

    stats = _empty_stats()
    stats.node_count = 1 + left.node_count + right.node_count
    stats.red_count = int(red) + left.red_count + right.red_count
    stats.height = 1 + max(left.height, right.height)
    # Count along the left spine; black_balanced records any mismatch.
    stats.black_height = left.black_height + (0 if red else 1)

    stats.least_key = left.least_key if left.least_key is not None else n.key
    stats.greatest_key = right.greatest_key if right.greatest_key is not None else n.key

    # ---------- search tree ---------------------------------
    stats.is_search_tree = left.is_search_tree and right.is_search_tree
    if left.greatest_key is not None and left.greatest_key.compare_to(n.key) >= 0:
        stats.is_search_tree = False
    if right.least_key is not None and right.least_key.compare_to(n.key) <= 0:
        stats.is_search_tree = False

    # ---------- color rules ---------------------------------
    right_red = n.right is not None and n.right.color == RED
    left_red = n.left is not None and n.left.color == RED
    stats.no_red_right = left.no_red_right and right.no_red_right and not right_red
    stats.no_double_red = left.no_double_red and right.no_double_red and not (red and left_red)
    stats.black_balanced = (
        left.black_balanced
        and right.black_balanced
        and left.black_height == right.black_height
    )

    return stats


def llrb_stats_(t: LLRBTree) -> Stats:
    """
    Returns aggregated statistics for an LLRB tree in **O(n)** time.

    Besides counts and heights, every flag of :data:`invariants.TREE_FLAGS`
    is filled in, so the result can be handed to
    :func:`invariants.assert_tree_invariants_raise`.
    """
    if t is None or t.is_empty():
        return _empty_stats()

    stats = _subtree_stats(t.root)
    stats.root_black = t.root.color != RED

    # ---------- in-order walk ONCE at the root ----------------
    prev = None
    for n in iter_inorder(t.root):
        if prev is not None and prev.key.compare_to(n.key) >= 0:
            stats.unique_keys = False
            break
        prev = n

    logger.debug(
        "stats: nodes=%d red=%d height=%d black_height=%d",
        stats.node_count, stats.red_count, stats.height, stats.black_height,
    )
    return stats
