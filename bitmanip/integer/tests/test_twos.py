"""Tests for the twos module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import integers, lists

from bitmanip.errors import EmptyInput, InvalidBitPosition, InvalidValue
from bitmanip.integer.core import ArbitraryInteger, FixedInteger
from bitmanip.integer.operation import is_all_set, is_none_set
from bitmanip.integer.twos import (
    integer_from_bits, negative_integer_from_bits, negative_integer_from_value
)


class TestIntegerFromBits(unittest.TestCase):
    """Tests of integer_from_bits."""

    def test_values(self):
        self.assertEqual(integer_from_bits([1, 8]), 0b10000001)
        self.assertIsInstance(integer_from_bits([53]), ArbitraryInteger)
        self.assertEqual(integer_from_bits([53]), 2 ** 52)

    def test_invalid_args(self):
        with self.assertRaises(EmptyInput):
            integer_from_bits([])
        with self.assertRaises(InvalidBitPosition):
            integer_from_bits([0])


class TestNegativeIntegerFromBits(unittest.TestCase):
    """Tests of negative_integer_from_bits."""

    def test_values(self):
        self.assertEqual(negative_integer_from_bits([1]), -2)
        self.assertEqual(negative_integer_from_bits([2]), -3)
        self.assertEqual(negative_integer_from_bits([1, 2]), -4)
        self.assertEqual(negative_integer_from_bits([8]), -129)
        self.assertIsInstance(negative_integer_from_bits([1]), FixedInteger)

    def test_arbitrary(self):
        result = negative_integer_from_bits([64])
        self.assertIsInstance(result, ArbitraryInteger)
        self.assertEqual(result, -1 - 2 ** 63)

    @given(lists(integers(min_value=1, max_value=100), min_size=1, max_size=8))
    def test_cleared_bits(self, positions):
        result = negative_integer_from_bits(positions)
        self.assertLess(int(result), 0)
        self.assertTrue(is_none_set(result, positions))
        others = [p for p in range(1, 110) if p not in positions]
        self.assertTrue(is_all_set(ArbitraryInteger(int(result)), others))


class TestNegativeIntegerFromValue(unittest.TestCase):
    """Tests of negative_integer_from_value."""

    def test_values(self):
        self.assertEqual(negative_integer_from_value(0), -1)
        self.assertEqual(negative_integer_from_value(0b1), -1)
        self.assertEqual(negative_integer_from_value(0b10), -2)
        self.assertEqual(negative_integer_from_value(0b101), -3)
        self.assertEqual(negative_integer_from_value(0xFFFFFFFE), -2)
        self.assertEqual(negative_integer_from_value(0x80000000), -2 ** 31)
        self.assertEqual(negative_integer_from_value(2 ** 52), -2 ** 52)
        self.assertEqual(negative_integer_from_value(-2), -2)

    def test_representation(self):
        self.assertIsInstance(negative_integer_from_value(0b10), FixedInteger)
        self.assertIsInstance(negative_integer_from_value(2 ** 40), FixedInteger)
        result = negative_integer_from_value(ArbitraryInteger(2 ** 63))
        self.assertIsInstance(result, ArbitraryInteger)
        self.assertEqual(result, -2 ** 63)

    def test_invalid_args(self):
        with self.assertRaises(InvalidValue):
            negative_integer_from_value(None)
        with self.assertRaises(InvalidValue):
            negative_integer_from_value(2.0)

    @given(integers(min_value=1, max_value=2 ** 53 - 1))
    def test_twos_complement(self, x):
        # the value minus 2 ** width, with the most significant bit as the sign
        width = x.bit_length()
        self.assertEqual(negative_integer_from_value(x), x - 2 ** width)

    @given(integers(min_value=1, max_value=2 ** 300))
    def test_twos_complement_arbitrary(self, x):
        width = x.bit_length()
        self.assertEqual(negative_integer_from_value(ArbitraryInteger(x)), x - 2 ** width)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitmanip.integer.twos
    tests.addTests(doctest.DocTestSuite(bitmanip.integer.twos))
    return tests
