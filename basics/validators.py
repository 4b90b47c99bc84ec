"""Validation helpers for numerical inputs."""

from __future__ import annotations

import re
from typing import Iterable, Optional

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_int(value: object) -> int:
    """Parse ``value`` as a signed ``int``.

    Accepts ``int`` instances and strings holding an optionally signed run of
    decimal digits (surrounding whitespace is ignored).

    Raises:
        ValueError: If ``value`` is not an integer or an integer-looking string.
            ``bool`` values are rejected because ``bool`` is a subclass of
            ``int`` in Python but semantically represents logical values.
            Floats are rejected rather than truncated.
    """
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text)

    raise ValueError(f"expected an integer, got {value!r}")


def parse_int_sequence(values: Optional[Iterable[object]]) -> list[int]:
    """Parse every element of ``values`` with :func:`parse_int`.

    ``None`` is treated as the empty sequence. The error message names the
    position of the first element that fails.
    """
    if values is None:
        return []
    if isinstance(values, (str, bytes)):
        raise ValueError("expected a sequence of integers, got a string")

    numbers: list[int] = []
    for index, value in enumerate(values):
        try:
            numbers.append(parse_int(value))
        except ValueError as exc:
            raise ValueError(f"element {index}: {exc}") from exc
    return numbers
