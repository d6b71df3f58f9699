"""Building, filtering, reversing and slicing lists.

A ``None`` sequence stands for an absent list; functions that build a list
from one return ``None`` for it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import dropwhile, takewhile
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def clone(seq: Optional[Sequence[T]]) -> Optional[list[T]]:
    """Return a shallow copy of ``seq`` as a new list."""
    return None if seq is None else list(seq)


def concat(*args: Optional[Iterable[T]]) -> Optional[list[T]]:
    """Return the concatenation of all given sequences; None if none are given."""
    if not args:
        return None
    return [item for seq in args for item in seq or ()]


def create(*args: T) -> Optional[list[T]]:
    """Return a list of the given values; None if none are given."""
    return list(args) if args else None


def filter_values(
    seq: Optional[Iterable[T]], pred: Callable[[T], bool]
) -> Optional[list[T]]:
    """Return a new list of the values for which ``pred`` is true."""
    if seq is None:
        return None
    return [item for item in seq if pred(item)]


def filter_index(
    seq: Optional[Iterable[T]], pred: Callable[[int], bool]
) -> Optional[list[T]]:
    """Return a new list of the values whose index satisfies ``pred``."""
    if seq is None:
        return None
    return [item for index, item in enumerate(seq) if pred(index)]


def flatten(seqs: Optional[Iterable[Optional[Iterable[T]]]]) -> Optional[list[T]]:
    """Remove one level of nesting from a sequence of sequences."""
    if seqs is None:
        return None
    return [item for seq in seqs for item in seq or ()]


def repeat(value: T, n: int) -> list[T]:
    """Return a list holding ``value`` ``n`` times. Raises ValueError if n < 0."""
    if n < 0:
        raise ValueError("n must be >= 0")
    return [value] * n


def reverse(seq: Optional[list[Any]]) -> None:
    """Reverse ``seq`` in place."""
    if seq is not None:
        seq.reverse()


def reverse_clone(seq: Optional[Sequence[T]]) -> Optional[list[T]]:
    """Return a reversed copy of ``seq``."""
    return None if seq is None else list(reversed(seq))


def drop_while(
    seq: Optional[Iterable[T]], pred: Callable[[T], bool]
) -> Optional[list[T]]:
    """Drop leading values while ``pred`` is true and return the rest."""
    if seq is None:
        return None
    return list(dropwhile(pred, seq))


def take_while(
    seq: Optional[Iterable[T]], pred: Callable[[T], bool]
) -> Optional[list[T]]:
    """Return the leading values for which ``pred`` is true."""
    if seq is None:
        return None
    return list(takewhile(pred, seq))


def get(seq: Sequence[T], index: int) -> T:
    """Return the value at ``index``; a negative index counts from the end.

    Raises IndexError if the index is out of range.
    """
    if index < 0:
        index += len(seq)
    if index < 0:
        raise IndexError("index out of range")
    return seq[index]


def get_slice(seq: Optional[Sequence[T]], start: int, end: int) -> Optional[list[T]]:
    """Return ``seq[start:end]``; negative bounds count from the end.

    Unlike plain slicing, bounds outside the sequence raise IndexError.
    """
    size = 0 if seq is None else len(seq)
    if start < 0:
        start += size
    if end < 0:
        end += size
    if not 0 <= start <= end <= size:
        raise IndexError(f"slice bounds out of range [{start}:{end}] with length {size}")
    if seq is None:
        return None
    return list(seq[start:end])


def repeat_seq(seq: Optional[Sequence[T]], n: int) -> Optional[list[T]]:
    """Return the values of ``seq`` repeated ``n`` times. Raises ValueError if n < 0."""
    if n < 0:
        raise ValueError("n must be >= 0")
    if seq is None:
        return None
    return list(seq) * n


def create_with(length: int, factory: Callable[[], T]) -> list[T]:
    """Return a list of ``length`` values made by successive calls to ``factory``."""
    if length < 0:
        raise ValueError("length must be >= 0")
    return [factory() for _ in range(length)]


def adjust(
    seq: Optional[Sequence[T]], length: int, fill: Any = None
) -> Optional[list[T]]:
    """Return a copy of ``seq`` cut or padded with ``fill`` to ``length`` values.

    Raises ValueError if length < 0.
    """
    if length < 0:
        raise ValueError("length must be >= 0")
    if seq is None:
        return None
    result = list(seq[:length])
    result.extend([fill] * (length - len(result)))
    return result