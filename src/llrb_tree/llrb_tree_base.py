"""Left-leaning red-black tree map"""

from __future__ import annotations
from typing import Optional, Type

from llrb_tree.base import AbstractOrderedMap, LLRBNode, debug_log
from llrb_tree.delete import LLRBDeleteMixin
from llrb_tree.insert import LLRBInsertMixin
from llrb_tree.navigation import LLRBNavigationMixin, iter_preorder


class LLRBTree(
    LLRBInsertMixin,
    LLRBDeleteMixin,
    LLRBNavigationMixin,
    AbstractOrderedMap,
):
    """
    An ordered map backed by a left-leaning red-black tree.

    The tree is either empty (``root is None``) or owns a single root
    :class:`LLRBNode`. Keys implement ``compare_to`` (see
    :class:`llrb_tree.base.Key`); all keys of one tree must be of the same kind.

    Not safe for concurrent mutation.

    Attributes:
        root (Optional[LLRBNode]): The root node, None if the tree is empty.
    """
    __slots__ = ("root",)

    NodeClass: Type[LLRBNode] = LLRBNode

    def __init__(self, root: Optional[LLRBNode] = None):
        self.root: Optional[LLRBNode] = root

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        """Drop the whole tree."""
        self.root = None

    def put_all(self, other: LLRBTree) -> None:
        """
        Copy every mapping of *other* into this tree.

        Existing keys are overwritten by the values in *other*. The two
        trees share no nodes afterwards.

        Raises:
            TypeError: If *other* is not an LLRBTree.
        """
        if not isinstance(other, LLRBTree):
            raise TypeError(f"put_all(): expected LLRBTree, got {type(other).__name__}")
        if other is self:
            return

        count = 0
        for n in iter_preorder(other.root):
            self.put(n.key, n.value)
            count += 1
        debug_log("put_all copied %d mappings", count)

    def __str__(self):
        if self.is_empty():
            return f"Empty {self.__class__.__name__}"
        return f"{self.__class__.__name__}(root={self.root})"

    __repr__ = __str__
