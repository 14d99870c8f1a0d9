"""Vector types and vector operations."""

from .factories import generate, ones, random_vector, zeros
from .operations import (
    add_scalar,
    add_vector,
    add_vectors,
    angle,
    cross_product,
    dot_product,
    euclidean_distance,
    get_inverse_vector,
    is_orthogonal,
    is_parallel,
    normalize,
    scalar_projection,
    scale,
    subtract_vector,
    subtract_vectors,
    transpose,
    vector_projection,
    vector_rejection,
)
from .vector import Angle, ArrayVector, Vector

__all__ = [
    "Angle",
    "ArrayVector",
    "Vector",
    "add_scalar",
    "add_vector",
    "add_vectors",
    "angle",
    "cross_product",
    "dot_product",
    "euclidean_distance",
    "generate",
    "get_inverse_vector",
    "is_orthogonal",
    "is_parallel",
    "normalize",
    "ones",
    "random_vector",
    "scalar_projection",
    "scale",
    "subtract_vector",
    "subtract_vectors",
    "transpose",
    "vector_projection",
    "vector_rejection",
    "zeros",
]
