"""
llrb_tree: An ordered key-value map on a left-leaning red-black tree.

Quick-start imports::

    from llrb_tree import LLRBTree, StrKey

    tree = LLRBTree()
    tree.put(StrKey("a"), 1)
    tree.get(StrKey("a"))      # (1, True)
"""

from llrb_tree.base import BLACK, RED, AbstractOrderedMap, Key, LLRBNode
from llrb_tree.display import print_pretty, print_structure, to_dot, write_dot
from llrb_tree.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys_in_order,
)
from llrb_tree.keys import BytesKey, IntKey, NaturalKey, StrKey
from llrb_tree.llrb_tree_base import LLRBTree

# Stats & invariants
from llrb_tree.tree_stats import Stats, llrb_stats_

__all__ = [
    "BLACK",
    "RED",
    "AbstractOrderedMap",
    "BytesKey",
    "IntKey",
    "InvariantError",
    "Key",
    "LLRBNode",
    "LLRBTree",
    "NaturalKey",
    # Stats & invariants
    "Stats",
    "StrKey",
    "assert_tree_invariants_raise",
    "check_keys_in_order",
    "llrb_stats_",
    "print_pretty",
    "print_structure",
    "to_dot",
    "write_dot",
]
