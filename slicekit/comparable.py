"""Searching, comparing, de-duplicating and grouping list values.

Every function takes an optional ``eq`` callable that decides whether two
values are equal; it defaults to ``==``. A ``None`` sequence stands for an
absent list and is passed through where that makes sense.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from itertools import islice
from typing import Any, Optional, TypeVar

T = TypeVar("T")

EqFunc = Callable[[Any, Any], bool]


def _resolve(eq: Optional[EqFunc]) -> EqFunc:
    return operator.eq if eq is None else eq


def contains(seq: Optional[Sequence[T]], value: T, eq: Optional[EqFunc] = None) -> bool:
    """Return True if ``value`` is in ``seq``."""
    return find(seq, value, 0, eq) != -1


def equal(
    seq1: Optional[Sequence[T]],
    seq2: Optional[Sequence[T]],
    eq: Optional[EqFunc] = None,
) -> bool:
    """Return True if both sequences hold equal values in the same order.

    ``None`` is treated as an empty sequence.
    """
    first = seq1 or ()
    second = seq2 or ()
    if len(first) != len(second):
        return False
    eq = _resolve(eq)
    return all(eq(a, b) for a, b in zip(first, second))


def find(
    seq: Optional[Sequence[T]],
    value: T,
    start: int = 0,
    eq: Optional[EqFunc] = None,
) -> int:
    """Return the index of ``value`` in ``seq`` at or after ``start``, or -1."""
    if start < 0:
        raise ValueError("start must be >= 0")
    if seq is None:
        return -1
    eq = _resolve(eq)
    for index, item in islice(enumerate(seq), start, None):
        if eq(value, item):
            return index
    return -1


def find_all(
    seq: Optional[Sequence[T]], value: T, eq: Optional[EqFunc] = None
) -> Optional[list[int]]:
    """Return every index at which ``value`` occurs in ``seq``."""
    if seq is None:
        return None
    eq = _resolve(eq)
    return [index for index, item in enumerate(seq) if eq(value, item)]


def unique(seq: Optional[Sequence[T]], eq: Optional[EqFunc] = None) -> Optional[list[T]]:
    """Return the distinct values of ``seq`` in order of first occurrence.

    Without ``eq`` the values must be hashable.
    """
    if seq is None:
        return None
    result: list[T] = []
    if eq is None:
        seen: set = set()
        for item in seq:
            if item not in seen:
                seen.add(item)
                result.append(item)
        return result
    for item in seq:
        if not contains(result, item, eq):
            result.append(item)
    return result


def group(
    seq: Optional[Sequence[T]], eq: Optional[EqFunc] = None
) -> Optional[list[list[T]]]:
    """Group runs of consecutive values equal to the first value of the run."""
    if seq is None:
        return None
    eq = _resolve(eq)
    result: list[list[T]] = []
    current: list[T] = []
    for item in seq:
        if current and eq(current[0], item):
            current.append(item)
        else:
            if current:
                result.append(current)
            current = [item]
    if current:
        result.append(current)
    return result


def purge(
    seq: Optional[Sequence[T]],
    removals: Optional[Sequence[T]],
    eq: Optional[EqFunc] = None,
) -> Optional[list[T]]:
    """Return a new list of the values of ``seq`` that are not in ``removals``."""
    if seq is None:
        return None
    return [item for item in seq if find(removals, item, 0, eq) == -1]