"""Insertion logic for LLRB trees.

Provides :class:`LLRBInsertMixin`, a mixin class that adds ``put`` and
its recursive helper ``_insert`` to :class:`LLRBTree`.

Insertion follows the 2-3 tree variant: a new key always arrives as a RED
leaf (joining the 2-3 node above it) and temporary 4-nodes are split by
``fix_up`` on the way back to the root.

+----------------+---------------------------------+
| Operation      | Time (n = mappings)             |
+================+=================================+
| ``put``        | O(log n)                        |
| ``_insert``    | O(log n) recursion, O(1) per    |
|                | level for ``fix_up``            |
+----------------+---------------------------------+
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, TYPE_CHECKING

from llrb_tree.base import BLACK, RED, Key, LLRBNode, debug_log
from llrb_tree.rotations import fix_up

if TYPE_CHECKING:
    from llrb_tree.llrb_tree_base import LLRBTree


class LLRBInsertMixin:
    """Mixin that contributes insertion methods to *LLRBTree*."""

    def put(self: 'LLRBTree', key: Key, value: Any) -> Any:
        """
        Associate *value* with *key*, replacing the previous value if any.

        Args:
            key (Key): The key to insert or update.
            value (Any): The value to store.

        Returns:
            The previous value mapped to *key*, or None if *key* was absent.
        """
        self.root, old = self._insert(self.root, key, value)
        self.root.color = BLACK
        return old

    def _insert(
        self, n: Optional[LLRBNode], key: Key, value: Any
    ) -> Tuple[LLRBNode, Any]:
        if n is None:
            debug_log("insert new node %r", key)
            return self.NodeClass(key, value, RED), None

        old = None
        cmp = key.compare_to(n.key)
        if cmp == 0:
            old, n.value = n.value, value
        elif cmp < 0:
            n.left, old = self._insert(n.left, key, value)
        else:
            n.right, old = self._insert(n.right, key, value)

        return fix_up(n), old
