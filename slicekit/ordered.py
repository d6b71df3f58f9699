"""Minimum, maximum, sorting and binary search over lists.

Every function takes an optional ``less`` callable that returns True if its
first argument orders before its second; it defaults to ``<``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence, Sequence
from functools import cmp_to_key
from itertools import pairwise
from typing import Any, Optional, TypeVar

T = TypeVar("T")

LessFunc = Callable[[Any, Any], bool]


def _resolve(less: Optional[LessFunc]) -> LessFunc:
    return operator.lt if less is None else less


def _non_empty(seq: Optional[Sequence[T]]) -> Sequence[T]:
    if not seq:
        raise ValueError("sequence is empty or None")
    return seq


def minimum(seq: Optional[Sequence[T]], less: Optional[LessFunc] = None) -> T:
    """Return the first smallest value. Raises ValueError if ``seq`` is empty."""
    items = _non_empty(seq)
    less = _resolve(less)
    result = items[0]
    for item in items[1:]:
        if less(item, result):
            result = item
    return result


def maximum(seq: Optional[Sequence[T]], less: Optional[LessFunc] = None) -> T:
    """Return the first largest value. Raises ValueError if ``seq`` is empty."""
    items = _non_empty(seq)
    less = _resolve(less)
    result = items[0]
    for item in items[1:]:
        if less(result, item):
            result = item
    return result


def extrema(seq: Optional[Sequence[T]], less: Optional[LessFunc] = None) -> tuple[T, T]:
    """Return ``(minimum, maximum)`` of ``seq``. Raises ValueError if it is empty."""
    items = _non_empty(seq)
    less = _resolve(less)
    low = high = items[0]
    for item in items[1:]:
        if less(item, low):
            low = item
        elif less(high, item):
            high = item
    return low, high


def _key(less: LessFunc) -> Callable[[Any], Any]:
    def compare(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


def sort(
    seq: Optional[MutableSequence[T]],
    stable: bool = False,
    less: Optional[LessFunc] = None,
) -> None:
    """Sort ``seq`` in place.

    The sort is always stable; ``stable`` is accepted for callers that
    require it explicitly.
    """
    if not seq:
        return
    if less is None:
        seq[:] = sorted(seq)
    else:
        seq[:] = sorted(seq, key=_key(less))


def sort_clone(
    seq: Optional[Sequence[T]],
    stable: bool = False,
    less: Optional[LessFunc] = None,
) -> Optional[list[T]]:
    """Return a sorted copy of ``seq``; None for an absent sequence."""
    if seq is None:
        return None
    result = list(seq)
    sort(result, stable, less)
    return result


def is_sorted(seq: Optional[Sequence[T]], less: Optional[LessFunc] = None) -> bool:
    """Return True if no value orders before the value preceding it."""
    less = _resolve(less)
    return not any(less(b, a) for a, b in pairwise(seq or ()))


def search(
    seq: Optional[Sequence[T]], value: T, less: Optional[LessFunc] = None
) -> tuple[int, bool]:
    """Binary search an ascending ``seq`` for ``value``.

    Returns ``(index, found)``: the first index holding ``value`` if found,
    otherwise the index at which it would have to be inserted.
    """
    items = seq or ()
    less = _resolve(less)
    lo, hi = 0, len(items)
    while lo < hi:
        mid = (lo + hi) // 2
        if less(items[mid], value):
            lo = mid + 1
        else:
            hi = mid
    found = lo < len(items) and not (less(items[lo], value) or less(value, items[lo]))
    return lo, found