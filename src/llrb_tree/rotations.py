"""Structural primitives for left-leaning red-black trees.

Every function here is a pure node-to-node transformation: it takes the
root of a subtree, relinks / recolors a constant number of nodes and
returns the (possibly new) root of that subtree. Callers store the
returned node back into the parent's child slot.

Preconditions are the caller's responsibility and are not validated:

+--------------------+------------------------------------------------+
| Function           | Precondition                                   |
+====================+================================================+
| ``rotate_left``    | ``n.right`` exists and is RED                  |
| ``rotate_right``   | ``n.left`` exists and is RED                   |
| ``color_flip``     | ``n.left`` and ``n.right`` both exist          |
| ``move_red_left``  | ``n`` is RED, ``n.left`` and ``n.left.left``   |
|                    | are BLACK                                      |
| ``move_red_right`` | ``n`` is RED, ``n.right`` and ``n.right.left`` |
|                    | are BLACK                                      |
+--------------------+------------------------------------------------+
"""

from __future__ import annotations

from typing import Optional

from llrb_tree.base import RED, LLRBNode, debug_log


def is_red(n: Optional[LLRBNode]) -> bool:
    """An empty link is BLACK."""
    return n is not None and n.color == RED


def rotate_left(n: LLRBNode) -> LLRBNode:
    """Turn a right-leaning red link into a left-leaning one."""
    x = n.right
    n.right = x.left
    x.left = n
    x.color = n.color
    n.color = RED
    debug_log("rotate_left at %r -> %r", n.key, x.key)
    return x


def rotate_right(n: LLRBNode) -> LLRBNode:
    """Turn a left-leaning red link into a right-leaning one."""
    x = n.left
    n.left = x.right
    x.right = n
    x.color = n.color
    n.color = RED
    debug_log("rotate_right at %r -> %r", n.key, x.key)
    return x


def color_flip(n: LLRBNode) -> LLRBNode:
    """
    Toggle the colors of *n* and both of its children.

    BLACK parent with two RED children -> splits a 4-node (the middle key
    moves up). RED parent with two BLACK children -> merges the parent key
    with both children into one 4-node (used while descending for delete).
    """
    n.color = not n.color
    n.left.color = not n.left.color
    n.right.color = not n.right.color
    return n


def fix_up(n: LLRBNode) -> LLRBNode:
    """Restore the left-leaning invariants at *n* on the way back up."""
    if is_red(n.right) and not is_red(n.left):
        n = rotate_left(n)
    if is_red(n.left) and is_red(n.left.left):
        n = rotate_right(n)
    if is_red(n.left) and is_red(n.right):
        color_flip(n)
    return n


def move_red_left(n: LLRBNode) -> LLRBNode:
    """
    Make ``n.left`` or one of its children RED by borrowing from the right.

    Descending left afterwards never lands on a 2-node, so removing a key
    from the left subtree cannot change its black height.
    """
    color_flip(n)
    if is_red(n.right.left):
        n.right = rotate_right(n.right)
        n = rotate_left(n)
        color_flip(n)
    return n


def move_red_right(n: LLRBNode) -> LLRBNode:
    """Make ``n.right`` or one of its children RED by borrowing from the left."""
    color_flip(n)
    if is_red(n.left.left):
        n = rotate_right(n)
        color_flip(n)
    return n
