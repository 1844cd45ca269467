from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Tuple, TypeVar, runtime_checkable
import logging

from llrb_tree.logging_config import get_logger

# Get logger for this module
logger = get_logger("LLRBTree")

# Link colors. A node's color is the color of the link from its parent.
RED = True
BLACK = False


@runtime_checkable
class Key(Protocol):
    """
    A key orderable through a single three-way comparison.

    ``compare_to`` returns a negative integer, zero, or a positive integer
    as this key is less than, equal to, or greater than *other*.

    Implementations must define a strict total order:
      - sgn(x.compare_to(y)) == -sgn(y.compare_to(x)) for all x, y
      - x.compare_to(y) > 0 and y.compare_to(z) > 0 implies x.compare_to(z) > 0
      - x.compare_to(y) == 0 implies sgn(x.compare_to(z)) == sgn(y.compare_to(z))

    Keys of different concrete kinds must never meet inside one tree; the
    tree does not check this.
    """

    def compare_to(self, other: Any) -> int:
        ...


class LLRBNode:
    """A node of a left-leaning red-black tree. ``None`` children are empty links."""
    __slots__ = ("key", "value", "left", "right", "color")

    def __init__(self, key: Key, value: Any = None, color: bool = RED):
        self.key = key
        self.value = value
        self.left: Optional[LLRBNode] = None
        self.right: Optional[LLRBNode] = None
        self.color = color

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        color = "RED" if self.color == RED else "BLACK"
        return f"{cls}(key={self.key!r}, value={self.value!r}, color={color})"


T = TypeVar("T", bound="AbstractOrderedMap")


class AbstractOrderedMap(ABC):
    """
    Abstract base class for an ordered key-value map keyed by :class:`Key`.
    """

    @abstractmethod
    def get(self, key: Key) -> Tuple[Any, bool]:
        """
        Look up the value mapped to *key*.

        Returns:
            Tuple[Any, bool]: ``(value, True)`` if present, ``(None, False)`` otherwise.
        """
        pass

    @abstractmethod
    def put(self, key: Key, value: Any) -> Any:
        """
        Map *key* to *value*, replacing any previous mapping.

        Returns:
            The previous value, or None if the key was not present.
        """
        pass

    @abstractmethod
    def remove(self, key: Key) -> Any:
        """
        Delete the mapping for *key*.

        Returns:
            The removed value, or None if the key was not present.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Number of live mappings."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every mapping."""
        pass

    @abstractmethod
    def put_all(self: T, other: T) -> None:
        """Copy every mapping of *other* into this map."""
        pass


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
