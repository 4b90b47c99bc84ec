"""Maximum-element scan over a sequence of signed integers.

``find_max`` never raises for integer input. An empty sequence is not an
error: it yields :class:`Absent`, which callers are expected to handle
explicitly instead of falling back to a sentinel value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True, slots=True)
class Present:
    """A maximum was found."""

    value: int

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Absent:
    """No maximum exists because the input had no elements."""

    def __bool__(self) -> bool:
        return False


MaxResult = Union[Present, Absent]


def find_max(sequence: Sequence[int]) -> MaxResult:
    if len(sequence) == 0:
        return Absent()

    numbers = iter(sequence)
    running_max = next(numbers)
    for number in numbers:
        if number > running_max:
            running_max = number
    return Present(running_max)


def describe_max(result: MaxResult) -> str:
    """Render ``result`` the way the console lessons print it."""
    if isinstance(result, Present):
        return f"The maximum value is: {result.value}"
    return "The sequence is empty"
