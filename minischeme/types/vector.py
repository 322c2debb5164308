from __future__ import annotations
from typing import Iterable, Iterator

from minischeme import LispValue


class Vector:
    """Fixed-size indexed array of values, read from ``#(...)``."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[LispValue] = ()):
        self.items: tuple = tuple(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> LispValue:
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Vector) and self.items == other.items

    def __repr__(self):
        return f"Vector({list(self.items)!r})"
