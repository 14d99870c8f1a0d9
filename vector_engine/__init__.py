"""Immutable n-dimensional vectors and dimension-checked vector operations."""

from .errors import (
    EmptyVectorProvided,
    ErrorKind,
    InvalidParameterProvided,
    InvalidVectorDimension,
    NullArgumentProvided,
    VectorError,
)
from .math import Angle, ArrayVector, Vector, factories, operations
from .rounding import Decimals, format_half_up, round_half_up
from .settings_schema import VectorSettings, load_last_used, save_last_used

__all__ = [
    "Angle",
    "ArrayVector",
    "Decimals",
    "EmptyVectorProvided",
    "ErrorKind",
    "InvalidParameterProvided",
    "InvalidVectorDimension",
    "NullArgumentProvided",
    "Vector",
    "VectorError",
    "VectorSettings",
    "factories",
    "format_half_up",
    "load_last_used",
    "operations",
    "round_half_up",
    "save_last_used",
]
