"""Mutable boxes standing in for pointers and pointers-to-pointers.

Python has no address-of operator, so a :class:`Cell` plays the role of a
variable whose storage can be shared. Every alias of a cell observes writes
made through any other alias.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Cell(Generic[T]):
    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


class Ref(Generic[T]):
    """A reference to a cell or another reference; writes land in the cell."""

    __slots__ = ("target",)

    def __init__(self, target: Cell[T] | Ref[T]) -> None:
        self.target = target

    def get(self) -> T:
        return self.target.get()

    def set(self, value: T) -> None:
        self.target.set(value)


def double_in_place(cell: Cell[int]) -> None:
    cell.set(cell.get() * 2)
