"""Sums, products and numeric ranges."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Optional, Union

Number = Union[int, float]


def total(seq: Optional[Iterable[Number]]) -> Number:
    """Return the sum of the values; 0 for an empty or absent sequence."""
    return sum(seq or ())


def product(seq: Optional[Iterable[Number]]) -> Number:
    """Return the product of the values; 1 for an empty or absent sequence."""
    return math.prod(seq or ())


def _step_count(start: Number, end: Number, step: Number) -> int:
    span = end - start
    if all(isinstance(x, int) for x in (start, end, step)):
        count = abs(span) // abs(step)
        return -count if (span < 0) != (step < 0) else count
    return int(span / step)


def arange(start: Number, end: Number, step: Number = 1) -> list[Number]:
    """Return the numbers from ``start`` up to, but excluding, ``end``.

    The result is empty when ``(end - start) / step`` truncates to zero or
    below. Raises ValueError if ``step`` is 0.
    """
    if step == 0:
        raise ValueError("step cannot be 0")
    if _step_count(start, end, step) <= 0:
        return []
    result: list[Number] = []
    value = start
    if step > 0:
        while value < end:
            result.append(value)
            value += step
    else:
        while value > end:
            result.append(value)
            value += step
    return result