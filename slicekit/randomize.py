"""Shuffling lists and making lists of pseudo-random numbers."""

from __future__ import annotations

import random
from typing import Any, Optional

from slicekit.core import create_with

_UNBOUNDED_BITS = 63


def _source(rng: Optional[random.Random]) -> Any:
    return random if rng is None else rng


def shuffle(seq: Optional[list[Any]], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``seq`` in place, using ``rng`` if given."""
    if seq:
        _source(rng).shuffle(seq)


def random_ints(
    length: int, n: int = 0, rng: Optional[random.Random] = None
) -> list[int]:
    """Return ``length`` pseudo-random ints in ``[0, n)``.

    ``n == 0`` means no upper limit other than 2**63. Raises ValueError if
    ``n`` or ``length`` is negative.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    source = _source(rng)
    if n == 0:
        return create_with(length, lambda: source.getrandbits(_UNBOUNDED_BITS))
    return create_with(length, lambda: source.randrange(n))


def random_floats(length: int, rng: Optional[random.Random] = None) -> list[float]:
    """Return ``length`` pseudo-random floats in ``[0.0, 1.0)``."""
    return create_with(length, _source(rng).random)