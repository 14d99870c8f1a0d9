import copy
import dataclasses
import math
import unittest
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction

from vector_engine.errors import (
    EmptyVectorProvided,
    ErrorKind,
    InvalidParameterProvided,
    InvalidVectorDimension,
    NullArgumentProvided,
)
from vector_engine.math.vector import Angle, ArrayVector, Vector


class ArrayVectorConstructionTests(unittest.TestCase):
    def test_construction_paths_converge(self) -> None:
        expected = ArrayVector([1.0, 2.0, 3.0])
        self.assertEqual(ArrayVector((1, 2, 3)), expected)
        self.assertEqual(ArrayVector(1, 2, 3), expected)
        self.assertEqual(ArrayVector.of(1, 2, 3), expected)
        self.assertEqual(ArrayVector.from_sequence(range(1, 4)), expected)
        self.assertEqual(ArrayVector.from_list([1, 2, 3]), expected)
        self.assertEqual(ArrayVector(x for x in (1, 2, 3)), expected)
        self.assertEqual(ArrayVector.of(1, 2), ArrayVector([1, 2]))

    def test_mapping_uses_values_in_order(self) -> None:
        mapping = OrderedDict([("z", 3), ("a", 1), ("m", 2)])
        self.assertEqual(ArrayVector(mapping), ArrayVector(3, 1, 2))
        self.assertEqual(ArrayVector.from_mapping({1: 1, 2: 2}), ArrayVector(1, 2))

    def test_set_elements_follow_iteration_order(self) -> None:
        source = {4, 5, 6}
        v = ArrayVector.from_set(source)
        self.assertEqual(v.elements, tuple(float(x) for x in source))
        self.assertEqual(ArrayVector(frozenset([7])), ArrayVector(7))

    def test_elements_are_normalized_to_float(self) -> None:
        v = ArrayVector(1, Fraction(1, 2), 2.5)
        self.assertEqual(v.elements, (1.0, 0.5, 2.5))
        self.assertTrue(all(type(e) is float for e in v.elements))

    def test_decimal_elements_are_accepted(self) -> None:
        self.assertEqual(ArrayVector([Decimal("1.5"), 2]).elements, (1.5, 2.0))
        self.assertEqual(ArrayVector(Decimal("2.25")).elements, (2.25,))
        self.assertEqual(ArrayVector.of(Decimal("1"), Decimal("-0.5")), ArrayVector(1, -0.5))
        self.assertEqual(ArrayVector(1, 2) * Decimal("0.5"), ArrayVector(0.5, 1))

    def test_single_value_is_one_dimensional(self) -> None:
        v = ArrayVector(5)
        self.assertEqual(v.dimension, 1)
        self.assertEqual(v.elements, (5.0,))

    def test_copying_another_vector(self) -> None:
        original = ArrayVector(1, 2)
        self.assertEqual(ArrayVector(original), original)

    def test_empty_sources_are_rejected(self) -> None:
        for source in ([], (), set(), {}):
            with self.assertRaises(EmptyVectorProvided):
                ArrayVector(source)
        with self.assertRaises(EmptyVectorProvided):
            ArrayVector()
        with self.assertRaises(InvalidParameterProvided):
            ArrayVector.from_list([])

    def test_null_sources_and_elements_are_rejected(self) -> None:
        with self.assertRaises(NullArgumentProvided):
            ArrayVector(None)
        with self.assertRaises(NullArgumentProvided):
            ArrayVector([1, None, 3])
        with self.assertRaises(NullArgumentProvided):
            ArrayVector(None, None)
        with self.assertRaises(NullArgumentProvided):
            ArrayVector.of(1, None)
        with self.assertRaises(NullArgumentProvided):
            ArrayVector.of(1, 2, None)
        with self.assertRaises(NullArgumentProvided):
            ArrayVector.from_mapping({"a": None, "b": 1})

    def test_non_numeric_elements_are_rejected(self) -> None:
        with self.assertRaises(InvalidParameterProvided):
            ArrayVector(["a", "b"])
        with self.assertRaises(InvalidParameterProvided):
            ArrayVector("12")
        with self.assertRaises(InvalidParameterProvided):
            ArrayVector([True, False])
        with self.assertRaises(InvalidParameterProvided):
            ArrayVector([1 + 2j])
        with self.assertRaises(InvalidParameterProvided):
            ArrayVector.from_mapping([1, 2])

    def test_error_kinds(self) -> None:
        with self.assertRaises(NullArgumentProvided) as ctx:
            ArrayVector(None)
        self.assertIs(ctx.exception.kind, ErrorKind.NULL_ARGUMENT)
        with self.assertRaises(EmptyVectorProvided) as ctx:
            ArrayVector([])
        self.assertIs(ctx.exception.kind, ErrorKind.INVALID_PARAMETER)
        self.assertEqual(ctx.exception.message, "Empty vector provided")
        self.assertIsInstance(ctx.exception, ValueError)


class ArrayVectorBehaviourTests(unittest.TestCase):
    def test_dimension_and_magnitude(self) -> None:
        v = ArrayVector(3, 4)
        self.assertEqual(v.dimension, 2)
        self.assertEqual(len(v), 2)
        self.assertAlmostEqual(v.magnitude, 5.0)
        self.assertEqual(ArrayVector(0, 0, 0).magnitude, 0.0)
        self.assertAlmostEqual(ArrayVector(1, 2, 2).magnitude, 3.0)

    def test_elements_cannot_mutate_vector(self) -> None:
        v = ArrayVector([1, 2, 3])
        self.assertIsInstance(v.elements, tuple)
        as_list = v.to_list()
        as_list[0] = 100.0
        self.assertEqual(v.elements, (1.0, 2.0, 3.0))

        source = [1.0, 2.0]
        w = ArrayVector(source)
        source[0] = 9.0
        self.assertEqual(w, ArrayVector(1, 2))

    def test_instances_are_frozen(self) -> None:
        v = ArrayVector(1, 2)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            v._elements = (5.0, 6.0)
        self.assertEqual(v.elements, (1.0, 2.0))

    def test_indexing_and_iteration(self) -> None:
        v = ArrayVector(1, 2, 3)
        self.assertEqual(v[0], 1.0)
        self.assertEqual(v[-1], 3.0)
        self.assertEqual(list(v), [1.0, 2.0, 3.0])

    def test_equality_and_hash(self) -> None:
        a = ArrayVector(3, 4)
        b = ArrayVector([3.0, 4.0])
        self.assertEqual(a, a)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(ArrayVector(1, 2), ArrayVector(2, 1))
        self.assertNotEqual(ArrayVector(1, 2), ArrayVector(1, 2, 0))
        self.assertNotEqual(ArrayVector(1, 2), (1.0, 2.0))
        self.assertEqual(len({a, b, ArrayVector(4, 3)}), 2)

    def test_equality_ignores_concrete_type(self) -> None:
        class TupleVector(Vector):
            def __init__(self, *values: float) -> None:
                self._values = tuple(float(v) for v in values)

            @property
            def elements(self) -> tuple[float, ...]:
                return self._values

            def _with_elements(self, elements: tuple[float, ...]) -> "TupleVector":
                return TupleVector(*elements)

        other = TupleVector(1, 2)
        self.assertEqual(ArrayVector(1, 2), other)
        self.assertEqual(hash(ArrayVector(1, 2)), hash(other))
        self.assertEqual(other.scale(2), ArrayVector(2, 4))
        self.assertIsInstance(other.scale(2), TupleVector)

    def test_scale(self) -> None:
        v = ArrayVector(1, -2, 3)
        self.assertEqual(v.scale(2), ArrayVector(2, -4, 6))
        self.assertEqual(v.scale(0), ArrayVector(0, 0, 0))
        self.assertEqual(v.scale(-0.5), ArrayVector(-0.5, 1, -1.5))
        self.assertEqual(v * 2, ArrayVector(2, -4, 6))
        self.assertEqual(2 * v, ArrayVector(2, -4, 6))
        self.assertEqual(v, ArrayVector(1, -2, 3))
        with self.assertRaises(NullArgumentProvided):
            v.scale(None)
        with self.assertRaises(InvalidParameterProvided):
            v.scale("2")
        with self.assertRaises(TypeError):
            v * "2"

    def test_operators(self) -> None:
        a = ArrayVector(1, 2, 3)
        b = ArrayVector(4, 5, 6)
        self.assertEqual(a + b, ArrayVector(5, 7, 9))
        self.assertEqual(b - a, ArrayVector(3, 3, 3))
        self.assertEqual(-a, ArrayVector(-1, -2, -3))
        with self.assertRaises(InvalidVectorDimension):
            a + ArrayVector(1, 2)
        with self.assertRaises(TypeError):
            a + 1

    def test_add_scalar(self) -> None:
        self.assertEqual(ArrayVector(1, 2).add_scalar(0.5), ArrayVector(1.5, 2.5))

    def test_clone_is_independent_and_equal(self) -> None:
        v = ArrayVector(1, 2, 3)
        for clone in (v.clone(), copy.copy(v), copy.deepcopy(v)):
            self.assertEqual(clone, v)
            self.assertIsNot(clone, v)
            self.assertIsInstance(clone, ArrayVector)

    def test_direction_cosines(self) -> None:
        v = ArrayVector(3, 4)
        self.assertEqual(v.direction_cosines(), (0.6, 0.8))
        degrees = v.direction_cosines(Angle.DEGREE)
        self.assertAlmostEqual(degrees[0], math.degrees(0.6))
        self.assertAlmostEqual(degrees[1], math.degrees(0.8))
        with self.assertRaises(InvalidParameterProvided):
            ArrayVector(0, 0).direction_cosines()

    def test_rounded_and_format(self) -> None:
        v = ArrayVector(1.23456, 2.675)
        self.assertEqual(v.rounded(2), ArrayVector(1.23, 2.68))
        self.assertEqual(v.format(2), "<1.23, 2.68>")
        self.assertEqual(ArrayVector(1.2, 3).format(), "<1.2000, 3.0000>")

    def test_string_rendering(self) -> None:
        v = ArrayVector(1, 2.5)
        self.assertEqual(str(v), "<1.0, 2.5>")
        self.assertEqual(repr(v), "ArrayVector(1.0, 2.5)")


if __name__ == "__main__":
    unittest.main()
