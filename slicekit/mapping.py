"""Mapping the values of one, two or three sequences through a function."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
W = TypeVar("W")


def map_values(seq: Optional[Iterable[T]], func: Callable[[T], U]) -> Optional[list[U]]:
    """Return a new list of ``func(value)`` for each value of ``seq``."""
    if seq is None:
        return None
    return [func(item) for item in seq]


def map2(
    seq1: Optional[Iterable[T]],
    seq2: Optional[Iterable[U]],
    func: Callable[[T, U], V],
) -> Optional[list[V]]:
    """Map pairs of values; stops at the end of the shorter sequence.

    Returns None if either sequence is absent.
    """
    if seq1 is None or seq2 is None:
        return None
    return [func(a, b) for a, b in zip(seq1, seq2)]


def map3(
    seq1: Optional[Iterable[T]],
    seq2: Optional[Iterable[U]],
    seq3: Optional[Iterable[V]],
    func: Callable[[T, U, V], W],
) -> Optional[list[W]]:
    """Map triples of values; stops at the end of the shortest sequence.

    Returns None if any sequence is absent.
    """
    if seq1 is None or seq2 is None or seq3 is None:
        return None
    return [func(a, b, c) for a, b, c in zip(seq1, seq2, seq3)]