"""Immutable n-dimensional vectors over real numbers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from numbers import Real

from ..errors import (
    EmptyVectorProvided,
    InvalidParameterProvided,
    InvalidVectorDimension,
    NullArgumentProvided,
)
from ..rounding import Decimals, format_half_up, is_real, round_half_up


_MISSING = object()


class Angle(Enum):
    DEGREE = "degree"
    RADIAN = "radian"


def coerce_scalar(value: Real, name: str = "scalar") -> float:
    """Validate a real-valued argument and return it as a float."""
    if value is None:
        raise NullArgumentProvided(f"The {name} must not be null")
    if not is_real(value):
        raise InvalidParameterProvided(f"The {name} must be a real number, got {value!r}")
    return float(value)


def coerce_elements(source: Iterable[Real] | Mapping[object, Real]) -> tuple[float, ...]:
    """Normalize any supported vector source into the canonical element tuple.

    Sequences, sets and other iterables are consumed in iteration order;
    mappings contribute their values and the keys are ignored.
    """
    if source is None:
        raise NullArgumentProvided("Cannot build a vector from a null source")
    if isinstance(source, Vector):
        return source.elements
    if isinstance(source, Mapping):
        source = source.values()
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise InvalidParameterProvided(f"Cannot build a vector from {type(source).__name__}")

    elements = []
    for index, value in enumerate(source):
        if value is None:
            raise NullArgumentProvided(f"Vector element {index} is null")
        if not is_real(value):
            raise InvalidParameterProvided(f"Vector element {index} is not a real number: {value!r}")
        elements.append(float(value))

    if not elements:
        raise EmptyVectorProvided()
    return tuple(elements)


def require_same_dimension(v1: "Vector", v2: "Vector") -> None:
    if v1.dimension != v2.dimension:
        raise InvalidVectorDimension(f"Vector dimension mismatch: {v1.dimension} vs {v2.dimension}")


class Vector(ABC):
    """A point in n-dimensional real space that never changes after construction.

    Concrete vectors only provide storage (``elements``) and a way to build a
    sibling from a canonical element tuple; everything else is derived here.
    """

    @property
    @abstractmethod
    def elements(self) -> tuple[float, ...]:
        """The elements in order. Tuples cannot be used to mutate the vector."""

    @abstractmethod
    def _with_elements(self, elements: tuple[float, ...]) -> "Vector":
        """Build a vector of the same concrete type from validated elements."""

    @property
    def dimension(self) -> int:
        return len(self.elements)

    @property
    def magnitude(self) -> float:
        return math.hypot(*self.elements)

    def to_list(self) -> list[float]:
        return list(self.elements)

    def scale(self, factor: Real) -> "Vector":
        s = coerce_scalar(factor, "scale factor")
        return self._with_elements(tuple(e * s for e in self.elements))

    def add_scalar(self, scalar: Real) -> "Vector":
        s = coerce_scalar(scalar)
        return self._with_elements(tuple(e + s for e in self.elements))

    def clone(self) -> "Vector":
        return self._with_elements(tuple(self.elements))

    def rounded(self, decimals: int | Decimals | None = None) -> "Vector":
        return self._with_elements(tuple(round_half_up(e, decimals) for e in self.elements))

    def direction_cosines(self, angle: Angle = Angle.RADIAN) -> tuple[float, ...]:
        """Cosines of the angles between the vector and each coordinate axis.

        With ``Angle.DEGREE`` every cosine is passed through ``math.degrees``.
        """
        if angle is None:
            raise NullArgumentProvided("The angle unit must not be null")
        mag = self.magnitude
        if mag == 0.0:
            raise InvalidParameterProvided("Direction cosines are undefined for a zero vector")
        cosines = tuple(e / mag for e in self.elements)
        if angle is Angle.DEGREE:
            return tuple(math.degrees(c) for c in cosines)
        return cosines

    def format(self, decimals: int | Decimals | None = None) -> str:
        return "<" + ", ".join(format_half_up(e, decimals) for e in self.elements) + ">"

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        return self.elements == other.elements

    def __hash__(self) -> int:
        return hash((self.dimension, self.elements))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        require_same_dimension(self, other)
        return self._with_elements(tuple(a + b for a, b in zip(self.elements, other.elements)))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        require_same_dimension(self, other)
        return self._with_elements(tuple(a - b for a, b in zip(self.elements, other.elements)))

    def __neg__(self) -> "Vector":
        return self._with_elements(tuple(-e for e in self.elements))

    def __mul__(self, scalar: Real) -> "Vector":
        if not is_real(scalar):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: Real) -> "Vector":
        return self.__mul__(scalar)

    def __copy__(self) -> "Vector":
        return self.clone()

    def __deepcopy__(self, memo) -> "Vector":
        return self.clone()

    def __str__(self) -> str:
        return "<" + ", ".join(repr(e) for e in self.elements) + ">"


@dataclass(frozen=True, eq=False)
class ArrayVector(Vector):
    """Dense vector backed by a tuple of floats.

    Accepted sources:
        ArrayVector([1, 2, 3])            sequence, order preserved
        ArrayVector({1, 2, 3})            set, iteration order
        ArrayVector({"x": 1, "y": 2})     mapping values, keys ignored
        ArrayVector(1, 2) / (1, 2, 3)     discrete numbers
    """

    _elements: tuple[float, ...]

    def __init__(self, *values) -> None:
        if len(values) == 1 and not is_real(values[0]):
            source = values[0]
        else:
            source = values
        object.__setattr__(self, "_elements", coerce_elements(source))

    @classmethod
    def _from_elements(cls, elements: tuple[float, ...]) -> "ArrayVector":
        vector = cls.__new__(cls)
        object.__setattr__(vector, "_elements", elements)
        return vector

    @classmethod
    def from_sequence(cls, values: Iterable[Real]) -> "ArrayVector":
        return cls._from_elements(coerce_elements(values))

    @classmethod
    def from_list(cls, values: list[Real]) -> "ArrayVector":
        return cls._from_elements(coerce_elements(values))

    @classmethod
    def from_set(cls, values: set[Real] | frozenset[Real]) -> "ArrayVector":
        return cls._from_elements(coerce_elements(values))

    @classmethod
    def from_mapping(cls, values: Mapping[object, Real]) -> "ArrayVector":
        if values is not None and not isinstance(values, Mapping):
            raise InvalidParameterProvided(f"Expected a mapping, got {type(values).__name__}")
        return cls._from_elements(coerce_elements(values))

    @classmethod
    def of(cls, x: Real, y: Real, z: Real = _MISSING) -> "ArrayVector":
        """Convenience constructor for 2-D and 3-D vectors.

        An explicit ``z=None`` is a null element, not a request for 2-D.
        """
        return cls._from_elements(coerce_elements((x, y) if z is _MISSING else (x, y, z)))

    @property
    def elements(self) -> tuple[float, ...]:
        return self._elements

    @cached_property
    def magnitude(self) -> float:
        return math.hypot(*self._elements)

    def _with_elements(self, elements: tuple[float, ...]) -> "ArrayVector":
        return type(self)._from_elements(elements)

    def __repr__(self) -> str:
        return f"ArrayVector({', '.join(repr(e) for e in self._elements)})"


__all__ = [
    "Angle",
    "ArrayVector",
    "Vector",
    "coerce_elements",
    "coerce_scalar",
    "require_same_dimension",
]
