"""Convert between bit patterns and two's complement integers."""
from bitmanip.integer.core import (
    FAST_PATH_WIDTH, FixedInteger, classify, integerify, represent
)
from bitmanip.integer.mask import bitmask
from bitmanip.integer.operation import bitwise_not


def integer_from_bits(positions):
    """Return the positive integer with only the given bits set.

        >>> from bitmanip.integer.twos import integer_from_bits
        >>> integer_from_bits([1, 8])
        129

    """
    return bitmask(positions)


def negative_integer_from_bits(positions):
    """Return the negative integer with only the given bits cleared.

        >>> from bitmanip.integer.twos import negative_integer_from_bits
        >>> negative_integer_from_bits([1])
        -2
        >>> negative_integer_from_bits([1, 3])
        -6

    """
    return negative_integer_from_value(bitwise_not(bitmask(positions)))


def negative_integer_from_value(value):
    """Interpret the bits of the value as a negative integer.

    The most significant (set) bit of the value is read as the sign bit
    of a two's complement integer. This is useful when the bits of a
    negative integer were read into an unsigned integer.

        >>> from bitmanip.integer.twos import negative_integer_from_value
        >>> negative_integer_from_value(0b10)
        -2
        >>> negative_integer_from_value(0xFF)
        -1
        >>> negative_integer_from_value(0b1000_0000)
        -128

    """
    width, negative, arbitrary = classify(value)
    value = integerify(value)
    if arbitrary:
        width = abs(value.val).bit_length()

    # start from -1 (all bits set) and clear the bits that are 0
    result = -1
    for i in range(width):
        if not (value.val >> i) & 1:
            result &= ~(1 << i)

    if not arbitrary and not negative and width <= FAST_PATH_WIDTH:
        return FixedInteger(result)
    return represent(result, arbitrary)
