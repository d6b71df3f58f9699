"""Inserting, deleting and filling values of a list in place."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, TypeVar

T = TypeVar("T")


def insert(seq: Optional[list[T]], index: int, *args: T) -> Optional[list[T]]:
    """Insert ``args`` before ``index`` and return the list.

    An existing list is modified in place. Raises IndexError if ``index`` is
    outside ``0..len(seq)``.
    """
    if seq is None and not args:
        return None
    result = [] if seq is None else seq
    if not 0 <= index <= len(result):
        raise IndexError(f"index {index} out of range for length {len(result)}")
    result[index:index] = args
    return result


def delete(seq: Optional[list[T]], *args: int) -> Optional[list[T]]:
    """Delete the values at the given indexes in place and return the list.

    Repeated indexes count once. Raises IndexError for an index outside the list.
    """
    if seq is None:
        return None
    indexes = sorted(set(args), reverse=True)
    for index in indexes:
        if not 0 <= index < len(seq):
            raise IndexError(f"index {index} out of range for length {len(seq)}")
    for index in indexes:
        del seq[index]
    return seq


def delete_range(seq: Optional[list[T]], start: int, length: int) -> Optional[list[T]]:
    """Delete up to ``length`` values beginning at ``start`` and return the list."""
    if seq is None:
        return None
    end = min(start + length, len(seq))
    return delete(seq, *range(start, end))


def delete_pred(seq: Optional[list[T]], pred: Callable[[T], bool]) -> Optional[list[T]]:
    """Delete the values for which ``pred`` is true and return the list."""
    if seq is None:
        return None
    return delete(seq, *(index for index, item in enumerate(seq) if pred(item)))


def fill(seq: Optional[list[T]], value: T) -> None:
    """Set every value of ``seq`` to ``value`` in place."""
    if seq:
        seq[:] = [value] * len(seq)