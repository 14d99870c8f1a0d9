"""Failure kinds raised by vector construction and vector operations."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NULL_ARGUMENT = "null_argument"
    INVALID_PARAMETER = "invalid_parameter"
    INVALID_DIMENSION = "invalid_dimension"


class VectorError(ValueError):
    """Base class for all input-validation failures of the library.

    Every subclass carries a default message and an ``ErrorKind`` so callers
    can branch on ``err.kind`` without importing each class.
    """

    kind: ErrorKind
    default_message = "Vector operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class NullArgumentProvided(VectorError):
    """A required vector, number or collection argument was ``None``."""

    kind = ErrorKind.NULL_ARGUMENT
    default_message = "Null argument provided"


class InvalidParameterProvided(VectorError):
    """A structural precondition other than dimension compatibility failed."""

    kind = ErrorKind.INVALID_PARAMETER
    default_message = "Invalid parameters"


class EmptyVectorProvided(InvalidParameterProvided):
    default_message = "Empty vector provided"


class InvalidVectorDimension(VectorError):
    """Vectors that must share a dimension do not, or a fixed dimension is violated."""

    kind = ErrorKind.INVALID_DIMENSION
    default_message = "The vector dimension is invalid"


__all__ = [
    "EmptyVectorProvided",
    "ErrorKind",
    "InvalidParameterProvided",
    "InvalidVectorDimension",
    "NullArgumentProvided",
    "VectorError",
]
