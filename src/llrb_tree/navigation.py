"""Navigation helpers for LLRB trees.

Provides :class:`LLRBNavigationMixin`, a mixin class that adds the
read-only queries ``get``, ``contains``, ``first``, ``last``, ``size``
and ``height`` to :class:`LLRBTree`, plus the node-level descents
``min_node`` / ``max_node`` shared with deletion.

+-------------+--------------------------------------+
| Operation   | Time (n = mappings)                  |
+=============+======================================+
| ``get``     | O(log n)                             |
| ``first``   | O(log n)                             |
| ``last``    | O(log n)                             |
| ``size``    | O(n)  (full traversal, no counter)   |
| ``height``  | O(n)                                 |
+-------------+--------------------------------------+
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple, TYPE_CHECKING

from llrb_tree.base import Key, LLRBNode

if TYPE_CHECKING:
    from llrb_tree.llrb_tree_base import LLRBTree


def min_node(n: LLRBNode) -> LLRBNode:
    """Leftmost node of the non-empty subtree rooted at *n*."""
    while n.left is not None:
        n = n.left
    return n


def max_node(n: LLRBNode) -> LLRBNode:
    """Rightmost node of the non-empty subtree rooted at *n*."""
    while n.right is not None:
        n = n.right
    return n


def iter_preorder(n: Optional[LLRBNode]) -> Iterator[LLRBNode]:
    """Yield the nodes below *n* in pre-order (node, left, right)."""
    stack = [n] if n is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def iter_inorder(n: Optional[LLRBNode]) -> Iterator[LLRBNode]:
    """Yield the nodes below *n* in key order."""
    stack = []
    while stack or n is not None:
        while n is not None:
            stack.append(n)
            n = n.left
        n = stack.pop()
        yield n
        n = n.right


class LLRBNavigationMixin:
    """Mixin that contributes navigation / query methods to *LLRBTree*."""

    def get(self: 'LLRBTree', key: Key) -> Tuple[Any, bool]:
        """
        Look up the value mapped to *key*.

        Returns:
            ``(value, True)`` if *key* is present, ``(None, False)`` otherwise.
        """
        n = self.root
        while n is not None:
            cmp = key.compare_to(n.key)
            if cmp == 0:
                return n.value, True
            n = n.right if cmp > 0 else n.left
        return None, False

    def contains(self: 'LLRBTree', key: Key) -> bool:
        return self.get(key)[1]

    def first(self: 'LLRBTree') -> Tuple[Optional[Key], Any]:
        """``(key, value)`` of the smallest key, ``(None, None)`` if empty."""
        if self.root is None:
            return None, None
        n = min_node(self.root)
        return n.key, n.value

    def last(self: 'LLRBTree') -> Tuple[Optional[Key], Any]:
        """``(key, value)`` of the greatest key, ``(None, None)`` if empty."""
        if self.root is None:
            return None, None
        n = max_node(self.root)
        return n.key, n.value

    def size(self: 'LLRBTree') -> int:
        """Number of mappings. Counts every node on each call."""
        return sum(1 for _ in iter_preorder(self.root))

    def height(self: 'LLRBTree') -> int:
        """Number of nodes on the longest root-to-leaf path (0 if empty)."""
        def _height(n: Optional[LLRBNode]) -> int:
            if n is None:
                return 0
            return 1 + max(_height(n.left), _height(n.right))

        return _height(self.root)
