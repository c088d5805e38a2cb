"""Tests for the context, printing and serial modules."""
import doctest
import unittest

from bitmanip.errors import InvalidValue, ResultOutOfSafeRange
from bitmanip.integer.context import Cache, FastPath
from bitmanip.integer.core import ArbitraryInteger, FixedInteger
from bitmanip.integer.printing import number_to_binary, number_to_hex
from bitmanip.integer.serial import Serial, serial


class TestContext(unittest.TestCase):
    """Tests of the Cache and FastPath contexts."""

    def test_nested(self):
        self.assertTrue(FastPath.current_context)
        with FastPath(False):
            self.assertFalse(FastPath.current_context)
            with FastPath(True):
                self.assertTrue(FastPath.current_context)
            self.assertFalse(FastPath.current_context)
        self.assertTrue(FastPath.current_context)

    def test_restored_on_error(self):
        with self.assertRaises(ValueError):
            with Cache(False):
                raise ValueError()
        self.assertTrue(Cache.current_context)

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            FastPath(None)
        with self.assertRaises(AssertionError):
            Cache("yes")


class TestPrinting(unittest.TestCase):
    """Tests of number_to_binary and number_to_hex."""

    def test_binary(self):
        self.assertEqual(number_to_binary(0), "0b00000000")
        self.assertEqual(number_to_binary(0b10001111), "0b10001111")
        self.assertEqual(number_to_binary(0b1_0000_0000), "0b00000001_00000000")
        self.assertEqual(number_to_binary(-1), "0b11111111")
        self.assertEqual(number_to_binary(-256), "0b11111111_00000000")
        self.assertEqual(number_to_binary(5, 4, 0, False), "0101")
        self.assertEqual(number_to_binary(ArbitraryInteger(2 ** 64 + 1), 64, 0, False),
                         "0" * 63 + "1" + "0" * 63 + "1")
        self.assertEqual(number_to_binary(2.0), "0b00000010")

    def test_binary_float(self):
        self.assertEqual(number_to_binary(1.5, grouping=0, show_prefix=False),
                         "0011111111111" + "0" * 51)
        self.assertEqual(number_to_binary(float("inf"), grouping=0, show_prefix=False),
                         "0" + "1" * 11 + "0" * 52)

    def test_hex(self):
        self.assertEqual(number_to_hex(0xB00B, 2), "0xB00B")
        self.assertEqual(number_to_hex(0xFF), "0x0000_00FF")
        self.assertEqual(number_to_hex(-1), "0xFFFF_FFFF")
        self.assertEqual(number_to_hex(-2 ** 32), "0xFFFF_FFFF_0000_0000")
        self.assertEqual(number_to_hex(2 ** 32, 4, 0, False), "0000000100000000")
        self.assertEqual(number_to_hex(-0.5), "0xBFE0_0000_0000_0000")

    def test_methods(self):
        self.assertEqual(FixedInteger(0xD00D).hex(2), "0xD00D")
        self.assertEqual(ArbitraryInteger(-1).bin(), "0b11111111")

    def test_invalid_args(self):
        with self.assertRaises(InvalidValue):
            number_to_binary(None)
        with self.assertRaises(InvalidValue):
            number_to_hex("0xFF")


class TestSerial(unittest.TestCase):
    """Tests of the Serial class."""

    def test_chain(self):
        s = serial(0)
        self.assertEqual(s.set_bits([1, 8]).out(), 0b10000001)
        self.assertEqual(s.out(), 0)
        n = (s.set_bits([1, 8]).flip_bits([1, 2]).clear_bits([7, 8])
             .bitwise_xor(0xFF).bitwise_and(0b1111).bitwise_or(0b0110)
             .left_shift(8).right_shift(10).reverse_bit_order(8).bitwise_not())
        self.assertEqual(n.out(), -193)
        self.assertTrue(n.is_all_set([1, 2, 3, 4]))
        self.assertFalse(n.is_any_set([7, 8]))
        self.assertTrue(n.is_none_set([7, 8]))
        self.assertEqual(n.bit_length(), 8)
        self.assertEqual(serial(-1).bitwise_not(8).out(), -256)

    def test_arbitrary(self):
        s = Serial(ArbitraryInteger(0)).set_bits([33, 64]).bitwise_or(1)
        self.assertIsInstance(s.value, ArbitraryInteger)
        self.assertEqual(s.out(), 2 ** 32 + 2 ** 63 + 1)
        with self.assertRaises(ResultOutOfSafeRange):
            Serial(0).set_bits([33, 64])

    def test_out(self):
        s = Serial(0b10001111)
        self.assertEqual(s.out(10), 0b10001111)
        self.assertEqual(s.out(2), "0b10001111")
        self.assertEqual(s.out("binary"), "0b10001111")
        self.assertEqual(s.out(16), "0x0000_008F")
        self.assertEqual(s.out("hex"), "0x0000_008F")
        with self.assertRaises(ValueError):
            s.out(8)

    def test_log(self):
        s = Serial(0b1111)
        with self.assertLogs("bitmanip.integer.serial", level="INFO") as cm:
            self.assertIs(s.log("bin"), s)
        self.assertEqual(cm.output, ["INFO:bitmanip.integer.serial:0b00001111"])

    def test_x(self):
        s = Serial(5)
        self.assertIs(s.x(lambda v: None), s)
        self.assertEqual(s.x(lambda v: ArbitraryInteger(int(v) + 1)).value, ArbitraryInteger(6))
        self.assertEqual(s, Serial(5))
        self.assertEqual(repr(s), "Serial(FixedInteger(5))")

    def test_invalid_args(self):
        with self.assertRaises(InvalidValue):
            Serial(None)
        with self.assertRaises(InvalidValue):
            Serial(2 ** 53)

    def test_documented(self):
        for name in dir(Serial):
            if not name.startswith("_"):
                self.assertTrue(getattr(Serial, name).__doc__, msg=name)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitmanip.integer.context
    import bitmanip.integer.printing
    import bitmanip.integer.serial
    tests.addTests(doctest.DocTestSuite(bitmanip.integer.context))
    tests.addTests(doctest.DocTestSuite(bitmanip.integer.printing))
    tests.addTests(doctest.DocTestSuite(bitmanip.integer.serial))
    return tests
