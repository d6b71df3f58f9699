"""Lazy iteration over sequences and collecting iterables into lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional, TypeVar

T = TypeVar("T")


def enumerate_items(seq: Optional[Sequence[T]]) -> Iterator[tuple[int, T]]:
    """Yield ``(index, value)`` pairs of ``seq``."""
    yield from enumerate(seq or ())


def values(seq: Optional[Sequence[T]]) -> Iterator[T]:
    """Yield the values of ``seq``."""
    yield from seq or ()


def collect(iterable: Iterable[T]) -> list[T]:
    """Return a new list holding the values of ``iterable``."""
    return list(iterable)