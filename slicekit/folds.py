"""Folding a sequence into a single value."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def reduce(seq: Optional[Iterable[T]], initial: U, func: Callable[[U, T], U]) -> U:
    """Accumulate the values with ``func(acc, value)``, starting from ``initial``."""
    result = initial
    for value in seq or ():
        result = func(result, value)
    return result


def _bools(seq: Optional[Iterable[Any]]) -> list[bool]:
    items = list(seq or ())
    if any(not isinstance(item, bool) for item in items):
        raise TypeError("values must be bool if pred is None")
    return items


def all_of(seq: Optional[Iterable[T]], pred: Optional[Callable[[T], bool]] = None) -> bool:
    """Return True if ``pred`` holds for every value; True when empty.

    Without ``pred`` every value must be a bool.
    """
    if pred is None:
        return all(_bools(seq))
    return all(pred(value) for value in seq or ())


def any_of(seq: Optional[Iterable[T]], pred: Optional[Callable[[T], bool]] = None) -> bool:
    """Return True if ``pred`` holds for some value; False when empty.

    Without ``pred`` every value must be a bool.
    """
    if pred is None:
        return any(_bools(seq))
    return any(pred(value) for value in seq or ())