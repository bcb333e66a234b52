"""Random number helpers used by the game objects."""

from __future__ import annotations

import random

_generator = random.Random()


def seed(value: int | None) -> None:
    """Seed the shared generator so that sequences can be reproduced."""
    _generator.seed(value)


def rand_float(low: float, high: float) -> float:
    """Return a random float between ``low`` and ``high``, both ends included."""
    return _generator.random() * (high - low) + low


def rand_int(low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``.

    When ``high`` is below ``low`` the result lies in ``[low, low + (low - high))``,
    the same spread the range would have the other way round.
    """
    if high == low:
        raise ValueError("rand_int needs a non-empty range")
    return low + _generator.randrange(abs(high - low))