"""Deletion logic for LLRB trees.

Provides :class:`LLRBDeleteMixin`, a mixin class that adds ``remove``,
``remove_min`` and their recursive helpers to :class:`LLRBTree`.

Deletion is top-down: while descending, ``move_red_left`` /
``move_red_right`` make sure the current node is never a 2-node on the
side we descend into, so the key finally removed always sits in a 3- or
4-node and the black height of every path is unchanged. ``fix_up`` then
splits the temporary 4-nodes on the way back up.

+-------------------+-------------------------------------------+
| Operation         | Time (n = mappings)                       |
+===================+===========================================+
| ``remove``        | O(log n)  (a ``get`` pre-check + descent) |
| ``remove_min``    | O(log n)                                  |
| ``_delete``       | O(log n) recursion                        |
| ``_delete_min``   | O(log n) recursion                        |
+-------------------+-------------------------------------------+
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, TYPE_CHECKING

from llrb_tree.base import BLACK, RED, Key, LLRBNode, debug_log
from llrb_tree.navigation import min_node
from llrb_tree.rotations import (
    fix_up,
    is_red,
    move_red_left,
    move_red_right,
    rotate_right,
)

if TYPE_CHECKING:
    from llrb_tree.llrb_tree_base import LLRBTree


class LLRBDeleteMixin:
    """Mixin that contributes deletion methods to *LLRBTree*."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def remove(self: 'LLRBTree', key: Key) -> Any:
        """
        Delete the mapping for *key*.

        The key is looked up first; an absent key leaves the tree untouched.

        Returns:
            The removed value, or None if *key* was not present.
        """
        value, found = self.get(key)
        if not found:
            return None

        self._redden_root()
        self.root = self._delete(self.root, key)
        if self.root is not None:
            self.root.color = BLACK
        return value

    def remove_min(self: 'LLRBTree') -> Tuple[Optional[Key], Any]:
        """
        Delete the smallest key.

        Returns:
            ``(key, value)`` of the removed mapping, or ``(None, None)`` if
            the tree is empty.
        """
        if self.root is None:
            return None, None

        self._redden_root()
        self.root, removed = self._delete_min(self.root)
        if self.root is not None:
            self.root.color = BLACK
        return removed.key, removed.value

    # ------------------------------------------------------------------
    # Recursive helpers
    # ------------------------------------------------------------------

    def _redden_root(self: 'LLRBTree') -> None:
        # A root with two BLACK children is a 2-node; coloring it RED lets
        # the first move_red_* merge it with its children.
        root = self.root
        if not is_red(root.left) and not is_red(root.right):
            root.color = RED

    def _delete(self, n: LLRBNode, key: Key) -> Optional[LLRBNode]:
        # key is known to be present in the subtree rooted at n
        if key.compare_to(n.key) < 0:
            if not is_red(n.left) and not is_red(n.left.left):
                n = move_red_left(n)
            n.left = self._delete(n.left, key)
        else:
            if is_red(n.left):
                n = rotate_right(n)
            if key.compare_to(n.key) == 0 and n.right is None:
                debug_log("delete leaf %r", n.key)
                return None
            if not is_red(n.right) and not is_red(n.right.left):
                n = move_red_right(n)
            if key.compare_to(n.key) == 0:
                successor = min_node(n.right)
                debug_log("delete internal %r, successor %r", n.key, successor.key)
                n.key = successor.key
                n.value = successor.value
                n.right, _ = self._delete_min(n.right)
            else:
                n.right = self._delete(n.right, key)

        return fix_up(n)

    def _delete_min(self, n: LLRBNode) -> Tuple[Optional[LLRBNode], LLRBNode]:
        """Remove the leftmost node below *n*; return (new subtree, removed node)."""
        if n.left is None:
            # no left child implies no right child in an LLRB tree
            return None, n

        if not is_red(n.left) and not is_red(n.left.left):
            n = move_red_left(n)
        n.left, removed = self._delete_min(n.left)
        return fix_up(n), removed
