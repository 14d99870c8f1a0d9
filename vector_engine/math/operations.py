"""Stateless operations over one or more vectors.

Every function validates its arguments (null checks first, then dimension
compatibility) before touching element data, and returns a new vector or a
float. Nothing here mutates its inputs.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Callable, Sequence

from .. import config
from ..errors import (
    InvalidParameterProvided,
    InvalidVectorDimension,
    NullArgumentProvided,
    VectorError,
)
from .vector import Vector, coerce_scalar, require_same_dimension

logger = logging.getLogger(__name__)


def _fail(error: VectorError) -> VectorError:
    logger.debug("Rejected vector operation: %s (%s)", error.message, error.kind.value)
    return error


def _require_vector(v: Vector, name: str = "vector") -> Vector:
    if v is None:
        raise _fail(NullArgumentProvided(f"The {name} must not be null"))
    if not isinstance(v, Vector):
        raise _fail(InvalidParameterProvided(f"The {name} must be a Vector, got {type(v).__name__}"))
    return v


def _require_pair(v1: Vector, v2: Vector) -> None:
    _require_vector(v1, "first vector")
    _require_vector(v2, "second vector")
    try:
        require_same_dimension(v1, v2)
    except InvalidVectorDimension as exc:
        raise _fail(exc) from None


def _require_nonzero(v: Vector, message: str) -> float:
    mag = v.magnitude
    if mag == 0.0:
        raise _fail(InvalidParameterProvided(message))
    return mag


def _cosine(v1: Vector, v2: Vector, m1: float, m2: float) -> float:
    # Normalize before multiplying so tiny or huge elements cannot underflow or overflow.
    cos = math.fsum((a / m1) * (b / m2) for a, b in zip(v1.elements, v2.elements))
    return max(-1.0, min(1.0, cos))


def _fold(vectors: Sequence[Vector], combine: Callable[[Vector, Vector], Vector]) -> Vector:
    if vectors is None:
        raise _fail(NullArgumentProvided("The list of vectors must not be null"))
    vectors = list(vectors)
    if not vectors:
        raise _fail(InvalidParameterProvided("The list must have at least 1 vector"))

    first = _require_vector(vectors[0], "vector at index 0")
    for index, v in enumerate(vectors[1:], start=1):
        _require_vector(v, f"vector at index {index}")
        if v.dimension != first.dimension:
            raise _fail(
                InvalidVectorDimension(
                    f"Vector at index {index} has dimension {v.dimension}, expected {first.dimension}"
                )
            )

    result = first.clone()
    for v in vectors[1:]:
        result = combine(result, v)
    return result


def get_inverse_vector(v: Vector) -> Vector:
    """Return the additive inverse, so that ``v + inverse(v)`` is the zero vector."""
    return -_require_vector(v)


def add_vector(v1: Vector, v2: Vector) -> Vector:
    _require_pair(v1, v2)
    return v1 + v2


def subtract_vector(v1: Vector, v2: Vector) -> Vector:
    """Elementwise ``v1 - v2``."""
    _require_pair(v1, v2)
    return v1 - v2


def add_vectors(vectors: Sequence[Vector]) -> Vector:
    """Sum a non-empty list of same-dimension vectors, left to right."""
    return _fold(vectors, lambda acc, v: acc + v)


def subtract_vectors(vectors: Sequence[Vector]) -> Vector:
    """Subtract every following vector from the first: ``v1 - v2 - v3 - ...``."""
    return _fold(vectors, lambda acc, v: acc - v)


def scale(v: Vector, factor: Real) -> Vector:
    _require_vector(v)
    try:
        return v.scale(factor)
    except VectorError as exc:
        raise _fail(exc) from None


def add_scalar(v: Vector, scalar: Real) -> Vector:
    _require_vector(v)
    try:
        return v.add_scalar(scalar)
    except VectorError as exc:
        raise _fail(exc) from None


def dot_product(v1: Vector, v2: Vector) -> float:
    _require_pair(v1, v2)
    return math.fsum(a * b for a, b in zip(v1.elements, v2.elements))


def cross_product(v1: Vector, v2: Vector) -> Vector:
    """3-D cross product ``v1 x v2``; note ``v1 x v2 == -(v2 x v1)``."""
    _require_vector(v1, "first vector")
    _require_vector(v2, "second vector")
    if v1.dimension != 3 or v2.dimension != 3:
        raise _fail(
            InvalidVectorDimension(
                "The cross product is only supported for vectors in 3rd dimension, "
                f"got {v1.dimension} and {v2.dimension}"
            )
        )

    a1, a2, a3 = v1.elements
    b1, b2, b3 = v2.elements
    return v1._with_elements(
        (
            a2 * b3 - a3 * b2,
            a3 * b1 - a1 * b3,
            a1 * b2 - a2 * b1,
        )
    )


def angle(v1: Vector, v2: Vector, in_radians: bool = True) -> float:
    """Angle between two vectors, in radians or (``in_radians=False``) degrees.

    The cosine is clamped to [-1, 1] so nearly parallel vectors never push
    ``acos`` out of its domain.
    """
    _require_pair(v1, v2)
    m1 = _require_nonzero(v1, "The angle is undefined for a zero vector")
    m2 = _require_nonzero(v2, "The angle is undefined for a zero vector")
    radians = math.acos(_cosine(v1, v2, m1, m2))
    return radians if in_radians else math.degrees(radians)


def transpose(v: Vector, new_dimension: int) -> Vector:
    """Resize ``v`` to ``new_dimension`` by truncating or padding with zeros.

    Not a matrix transpose. Asking for the current dimension returns a copy.
    """
    _require_vector(v)
    if new_dimension is None:
        raise _fail(NullArgumentProvided("The new dimension must not be null"))
    if isinstance(new_dimension, bool) or not isinstance(new_dimension, int):
        raise _fail(InvalidParameterProvided(f"The new dimension must be an integer, got {new_dimension!r}"))
    if new_dimension < 1:
        raise _fail(InvalidParameterProvided(f"The new dimension must be at least 1, got {new_dimension}"))

    elements = v.elements[:new_dimension]
    padding = (0.0,) * (new_dimension - len(elements))
    return v._with_elements(elements + padding)


def normalize(v: Vector) -> Vector:
    _require_vector(v)
    mag = _require_nonzero(v, "Cannot normalize a zero-length vector")
    return v._with_elements(tuple(e / mag for e in v.elements))


def euclidean_distance(v1: Vector, v2: Vector) -> float:
    _require_pair(v1, v2)
    return math.dist(v1.elements, v2.elements)


def scalar_projection(v: Vector, onto: Vector) -> float:
    """Signed length of the projection of ``v`` onto ``onto``: dot(v, onto) / |onto|."""
    _require_pair(v, onto)
    mag = _require_nonzero(onto, "Cannot project onto a zero vector")
    return math.fsum(a * (b / mag) for a, b in zip(v.elements, onto.elements))


def vector_projection(v: Vector, onto: Vector) -> Vector:
    length = scalar_projection(v, onto)
    mag = onto.magnitude
    return onto._with_elements(tuple((b / mag) * length for b in onto.elements))


def vector_rejection(v: Vector, onto: Vector) -> Vector:
    """Component of ``v`` orthogonal to ``onto``: v - projection(v, onto)."""
    return v - vector_projection(v, onto)


def _tolerance(tolerance: Real | None) -> float:
    if tolerance is None:
        return config.DEFAULT_TOLERANCE
    try:
        tol = coerce_scalar(tolerance, "tolerance")
    except VectorError as exc:
        raise _fail(exc) from None
    if tol < 0.0:
        raise _fail(InvalidParameterProvided(f"The tolerance must be non-negative, got {tol}"))
    return tol


def is_orthogonal(v1: Vector, v2: Vector, tolerance: Real | None = None) -> bool:
    """True when the cosine of the angle between the vectors is within ``tolerance`` of 0.

    A zero vector is orthogonal to every vector of the same dimension.
    """
    _require_pair(v1, v2)
    tol = _tolerance(tolerance)
    m1 = v1.magnitude
    m2 = v2.magnitude
    if m1 == 0.0 or m2 == 0.0:
        return True
    return abs(_cosine(v1, v2, m1, m2)) <= tol


def is_parallel(v1: Vector, v2: Vector, tolerance: Real | None = None) -> bool:
    """True when one vector is a scalar multiple of the other.

    A zero vector is parallel to every vector of the same dimension.
    """
    _require_pair(v1, v2)
    tol = _tolerance(tolerance)
    m1 = v1.magnitude
    m2 = v2.magnitude
    if m1 == 0.0 or m2 == 0.0:
        return True
    return abs(abs(_cosine(v1, v2, m1, m2)) - 1.0) <= tol


__all__ = [
    "add_scalar",
    "add_vector",
    "add_vectors",
    "angle",
    "cross_product",
    "dot_product",
    "euclidean_distance",
    "get_inverse_vector",
    "is_orthogonal",
    "is_parallel",
    "normalize",
    "scalar_projection",
    "scale",
    "subtract_vector",
    "subtract_vectors",
    "transpose",
    "vector_projection",
    "vector_rejection",
]
