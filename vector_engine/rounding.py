"""HALF_UP decimal rounding helpers.

Binary floats round surprisingly under ``round()`` (``round(2.675, 2)`` is
``2.67``). These helpers go through the shortest decimal representation of
the value, so ``2.675`` rounds to ``2.68`` as written.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum
from numbers import Real

from . import config
from .errors import InvalidParameterProvided, NullArgumentProvided


class Decimals(Enum):
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12


def _places(decimals: int | Decimals | None) -> int:
    if decimals is None:
        return config.DEFAULT_DECIMALS
    if isinstance(decimals, Decimals):
        return decimals.value
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidParameterProvided(f"Decimal places must be an integer, got {decimals!r}")
    if decimals < 0:
        raise InvalidParameterProvided(f"Decimal places must be non-negative, got {decimals}")
    return decimals


def _quantize(value: float, places: int) -> Decimal:
    exact = Decimal(repr(value))
    # Enough precision to hold every integer digit plus the requested places.
    context = Context(prec=max(exact.adjusted(), 0) + places + 2, rounding=ROUND_HALF_UP)
    return exact.quantize(Decimal(1).scaleb(-places), context=context)


def is_real(value: object) -> bool:
    """True for real numbers (including Decimal) other than bools."""
    return not isinstance(value, bool) and isinstance(value, (Real, Decimal))


def _as_float(value: Real) -> float:
    if value is None:
        raise NullArgumentProvided("Cannot round a null value")
    if not is_real(value):
        raise InvalidParameterProvided(f"Cannot round non-numeric value {value!r}")
    return float(value)


def round_half_up(value: Real, decimals: int | Decimals | None = None) -> float:
    """Round ``value`` to ``decimals`` places, ties away from zero."""
    number = _as_float(value)
    places = _places(decimals)
    if not math.isfinite(number):
        return number
    return float(_quantize(number, places))


def format_half_up(value: Real, decimals: int | Decimals | None = None) -> str:
    """Render ``value`` with exactly ``decimals`` fractional digits.

    Examples:
        format_half_up(1.2) -> "1.2000"
        format_half_up(1.0, Decimals.ZERO) -> "1"
    """
    number = _as_float(value)
    places = _places(decimals)
    if not math.isfinite(number):
        return repr(number)
    return format(_quantize(number, places), "f")


__all__ = ["Decimals", "format_half_up", "is_real", "round_half_up"]
