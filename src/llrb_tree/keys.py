"""Concrete key kinds implementing the ``compare_to`` contract."""

from typing import Any


class NaturalKey:
    """
    Wraps any value that supports ``<`` and orders keys by that value.

    Comparing a ``NaturalKey`` against a key of another kind is undefined
    (and usually raises ``TypeError`` from the wrapped values).
    """
    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def compare_to(self, other: "NaturalKey") -> int:
        a, b = self.value, other.value
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaturalKey):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


class StrKey(NaturalKey):
    """String key, ordered lexicographically by code point."""
    __slots__ = ()

    def __init__(self, value: str):
        super().__init__(str(value))


class IntKey(NaturalKey):
    __slots__ = ()

    def __init__(self, value: int):
        super().__init__(int(value))


class BytesKey(NaturalKey):
    __slots__ = ()

    def __init__(self, value: bytes):
        super().__init__(bytes(value))

    def __str__(self) -> str:
        s = self.value.hex()
        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"
