"""Builders for generated vectors (constant, computed and random)."""

from __future__ import annotations

import random
from numbers import Real
from typing import Callable

from .. import config
from ..errors import InvalidParameterProvided, NullArgumentProvided
from ..rounding import Decimals, round_half_up
from .vector import ArrayVector, coerce_scalar


def _require_dimension(dimension: int) -> int:
    if dimension is None:
        raise NullArgumentProvided("The dimension must not be null")
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise InvalidParameterProvided(f"The dimension must be an integer, got {dimension!r}")
    if dimension < 1:
        raise InvalidParameterProvided(f"The dimension must be at least 1, got {dimension}")
    return dimension


def zeros(dimension: int) -> ArrayVector:
    return ArrayVector([0.0] * _require_dimension(dimension))


def ones(dimension: int) -> ArrayVector:
    return ArrayVector([1.0] * _require_dimension(dimension))


def generate(dimension: int, fn: Callable[[int], Real]) -> ArrayVector:
    """Build a vector whose element ``i`` is ``fn(i)``."""
    d = _require_dimension(dimension)
    if fn is None:
        raise NullArgumentProvided("The generator function must not be null")
    return ArrayVector([fn(i) for i in range(d)])


def random_vector(
    dimension: int,
    low: Real = config.DEFAULT_RANDOM_LOW,
    high: Real = config.DEFAULT_RANDOM_HIGH,
    *,
    seed: int | None = config.DEFAULT_SEED,
    rng: random.Random | None = None,
    decimals: int | Decimals | None = None,
) -> ArrayVector:
    """Uniformly distributed elements in ``[low, high)``.

    Rounding is applied after the draw, so with ``decimals`` set an element can
    land on ``high`` itself (or move past either bound by at most half a unit in
    the last kept place when the bounds have more places than ``decimals``).

    Args:
        dimension: Number of elements.
        low: Inclusive lower bound.
        high: Exclusive upper bound, before rounding.
        seed: Seed for a private ``random.Random``; ignored when ``rng`` is given.
        rng: Generator to draw from, for callers sharing one stream.
        decimals: Round every element HALF_UP to this many places.
    """
    d = _require_dimension(dimension)
    lo = coerce_scalar(low, "lower bound")
    hi = coerce_scalar(high, "upper bound")
    if lo >= hi:
        raise InvalidParameterProvided(f"The lower bound {lo} must be below the upper bound {hi}")

    generator = rng if rng is not None else random.Random(seed)
    values = [lo + generator.random() * (hi - lo) for _ in range(d)]
    if decimals is not None:
        values = [round_half_up(value, decimals) for value in values]
    return ArrayVector(values)


__all__ = ["generate", "ones", "random_vector", "zeros"]
