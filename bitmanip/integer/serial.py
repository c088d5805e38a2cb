"""Chain several bitwise operations on a value."""
import logging

from bitmanip.integer import operation
from bitmanip.integer import printing
from bitmanip.integer.core import classify, integerify

logger = logging.getLogger(__name__)


class Serial(object):
    """Wrap a value to apply several bitwise operations in serial order.

    Each operation returns a new `Serial` with the result; the wrapped
    value itself is never modified. Call `out` to get the result.

        >>> from bitmanip.integer.serial import Serial
        >>> Serial(0).set_bits([1, 8]).bitwise_xor(0xFF).bitwise_and(0b1111).out()
        14
        >>> Serial(0b10000000).set_bits([1, 2, 3, 4]).out("bin")
        '0b10001111'

    """

    __slots__ = ["_value"]

    def __init__(self, value):
        classify(value)
        self._value = integerify(value)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self._value.vrepr())

    def __eq__(self, other):
        return isinstance(other, Serial) and self._value == other._value

    def __hash__(self):
        return hash(self._value)

    @property
    def value(self):
        """The wrapped `Integer`."""
        return self._value

    def x(self, func):
        """Apply a function to the value.

        If the function returns None, the value is kept.

            >>> from bitmanip.integer.serial import Serial
            >>> Serial(3).x(lambda v: int(v) * 2).out()
            6

        """
        result = func(self._value)
        if result is None:
            return self
        return type(self)(result)

    def out(self, base=None):
        """Return the value in the given base.

        The base can be None or 10 (the value itself), 2 (or "bin",
        "binary") and 16 (or "hex", "hexadecimal").
        """
        if base in (None, 10):
            return self._value
        elif base in (2, "bin", "binary"):
            return printing.number_to_binary(self._value)
        elif base in (16, "hex", "hexadecimal"):
            return printing.number_to_hex(self._value)
        else:
            raise ValueError("invalid base {!r}".format(base))

    def log(self, base=None):
        """Log the value in the given base (see `out`)."""
        logger.info("%s", self.out(base))
        return self

    # Bit positions

    def set_bits(self, positions):
        """Set (to 1) the bits in the given positions."""
        return type(self)(operation.set_bits(self._value, positions))

    def clear_bits(self, positions):
        """Clear (to 0) the bits in the given positions."""
        return type(self)(operation.clear_bits(self._value, positions))

    def flip_bits(self, positions):
        """Flip (toggle) the bits in the given positions."""
        return type(self)(operation.flip_bits(self._value, positions))

    def is_any_set(self, positions):
        """Return True if any of the bits in the given positions is set."""
        return operation.is_any_set(self._value, positions)

    def is_all_set(self, positions):
        """Return True if all the bits in the given positions are set."""
        return operation.is_all_set(self._value, positions)

    def is_none_set(self, positions):
        """Return True if none of the bits in the given positions is set."""
        return operation.is_none_set(self._value, positions)

    # Shifts

    def left_shift(self, offset=1):
        """Shift the bits towards the most significant side."""
        return type(self)(operation.left_shift(self._value, offset))

    def right_shift(self, offset):
        """Shift the bits towards the least significant side."""
        return type(self)(operation.right_shift(self._value, offset))

    # Logical operators

    def bitwise_xor(self, other):
        """Bitwise XOR with another integer."""
        return type(self)(operation.bitwise_xor(self._value, other))

    def bitwise_or(self, other):
        """Bitwise OR with another integer."""
        return type(self)(operation.bitwise_or(self._value, other))

    def bitwise_and(self, other):
        """Bitwise AND with another integer."""
        return type(self)(operation.bitwise_and(self._value, other))

    def bitwise_not(self, bit_length=None):
        """Invert the bits (see `operation.bitwise_not`)."""
        return type(self)(operation.bitwise_not(self._value, bit_length))

    # Others

    def reverse_bit_order(self, bit_length=None):
        """Reverse the bit order (see `operation.reverse_bit_order`)."""
        return type(self)(operation.reverse_bit_order(self._value, bit_length))

    def bit_length(self):
        """Return the number of bits needed to represent the value."""
        return operation.bit_length(self._value)


def serial(value):
    """Return the `Serial` wrapping the value.

        >>> from bitmanip.integer.serial import serial
        >>> serial(0b11110000).right_shift(4).reverse_bit_order(8).out()
        240

    """
    return Serial(value)
