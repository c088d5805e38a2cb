"""Provide the bitwise operations on fixed and arbitrary-precision integers.

Each operation takes the native fast path only when the operand is a
non-negative `FixedInteger` of at most 32 bits and the mask (or the
shifted result) fits in 32 bits. Otherwise the operation is computed in
arbitrary precision and, unless the operand was an `ArbitraryInteger`,
the result is demoted to a `FixedInteger`::

    >>> from bitmanip.integer.core import ArbitraryInteger
    >>> from bitmanip.integer.operation import set_bits, left_shift
    >>> print(set_bits(0, [33, 53]).vrepr())
    FixedInteger(4503603922337792)
    >>> print(set_bits(ArbitraryInteger(0), [1]).vrepr())
    ArbitraryInteger(1)
    >>> left_shift(1, 53)
    Traceback (most recent call last):
     ...
    bitmanip.errors.ResultOutOfSafeRange: the result of 1 << 53 is larger than the maximum safe integer, operate on an ArbitraryInteger instead

"""
from bitmanip.errors import InvalidValue, ResultOutOfSafeRange
from bitmanip.integer import context
from bitmanip.integer.core import (
    FAST_PATH_WIDTH, FAST_PATH_MASK, ArbitraryInteger, FixedInteger,
    _is_int, classify, integerify, is_safe_integer, represent
)
from bitmanip.integer.mask import MAX_SAFE_WIDTH, all_ones_mask, bitmask


def _fast_path(width, negative, arbitrary, mask=None):
    """Return True if the operation can be computed on the 32-bit fast path."""
    return (context.FastPath.current_context and
            not arbitrary and not negative and width <= FAST_PATH_WIDTH and
            not isinstance(mask, ArbitraryInteger))


def _check_offset(offset):
    if not _is_int(offset) or offset < 0:
        raise InvalidValue("invalid offset {}, expected a non-negative integer".format(offset))
    return offset


# Bit positions

def set_bits(value, positions):
    """Set (to 1) the bits in the given positions (others retain their state).

        >>> from bitmanip.integer.operation import set_bits
        >>> set_bits(0b10000000, [1, 2, 3, 4])
        143

    """
    width, negative, arbitrary = classify(value)
    value = integerify(value)
    mask = bitmask(positions)
    if _fast_path(width, negative, arbitrary, mask):
        return FixedInteger((value.val | mask.val) & FAST_PATH_MASK)
    return represent(value.val | mask.val, arbitrary)


def clear_bits(value, positions):
    """Clear (to 0) the bits in the given positions (others retain their state).

        >>> from bitmanip.integer.operation import clear_bits
        >>> clear_bits(0b1111, [1, 4])
        6
        >>> clear_bits(-1, [1])
        -2

    """
    width, negative, arbitrary = classify(value)
    value = integerify(value)
    mask = bitmask(positions)
    if _fast_path(width, negative, arbitrary, mask):
        return FixedInteger(value.val & ~mask.val & FAST_PATH_MASK)
    return represent(value.val & ~mask.val, arbitrary)


def flip_bits(value, positions):
    """Flip (toggle) the bits in the given positions (others retain their state).

        >>> from bitmanip.integer.operation import flip_bits
        >>> flip_bits(0b1000_0001, [1, 2])
        130

    """
    width, negative, arbitrary = classify(value)
    value = integerify(value)
    mask = bitmask(positions)
    if _fast_path(width, negative, arbitrary, mask):
        return FixedInteger((value.val ^ mask.val) & FAST_PATH_MASK)
    return represent(value.val ^ mask.val, arbitrary)


def _masked(value, positions):
    """Return the pair (value & mask, mask) as plain integers."""
    width, _, arbitrary = classify(value)
    value = integerify(value)
    mask = bitmask(positions)
    # negative operands are fine on the fast path since the mask fits in 32 bits
    if _fast_path(width, False, arbitrary, mask):
        return (value.val & mask.val) & FAST_PATH_MASK, mask.val
    return value.val & mask.val, mask.val


def is_any_set(value, positions):
    """Return True if any of the bits in the given positions is set.

        >>> from bitmanip.integer.operation import is_any_set
        >>> is_any_set(0b1100, [1, 3]), is_any_set(0b1100, [1, 2])
        (True, False)

    """
    masked, _ = _masked(value, positions)
    return masked != 0


def is_all_set(value, positions):
    """Return True if all the bits in the given positions are set.

        >>> from bitmanip.integer.operation import is_all_set
        >>> is_all_set(0b1100, [3, 4]), is_all_set(0b1100, [2, 3])
        (True, False)

    """
    masked, mask = _masked(value, positions)
    return masked == mask


def is_none_set(value, positions):
    """Return True if none of the bits in the given positions is set.

        >>> from bitmanip.integer.operation import is_none_set
        >>> is_none_set(0b1100, [1, 2]), is_none_set(0b1100, [1, 3])
        (True, False)

    """
    masked, _ = _masked(value, positions)
    return masked == 0


# Shifts

def left_shift(value, offset=1):
    """Shift the bits towards the most significant side.

    Bits shifted in from the right are set to 0.

        >>> from bitmanip.integer.operation import left_shift
        >>> left_shift(0b1111, 8)
        3840
        >>> left_shift(1, 32)
        4294967296

    """
    width, negative, arbitrary = classify(value)
    value = integerify(value)
    offset = _check_offset(offset)
    # a non-zero value wider than the safe range is rejected before shifting
    if not arbitrary and value.val != 0 and width + offset > MAX_SAFE_WIDTH:
        bound = "less than the minimum" if negative else "larger than the maximum"
        msg = "the result of {} << {} is {} safe integer, " \
              "operate on an ArbitraryInteger instead"
        raise ResultOutOfSafeRange(msg.format(value.val, offset, bound))
    if _fast_path(width + offset, negative, arbitrary):
        return FixedInteger((value.val << offset) & FAST_PATH_MASK)
    return represent(value.val << offset, arbitrary)


def right_shift(value, offset):
    """Shift the bits towards the least significant side.

    Non-negative fixed-precision integers are shifted logically (bits
    shifted in from the left are set to 0). Negative integers and
    arbitrary-precision integers are shifted arithmetically, that is,
    the sign is propagated.

        >>> from bitmanip.integer.operation import right_shift
        >>> right_shift(0b111100000000, 10)
        3
        >>> right_shift(-8, 1)
        -4

    """
    width, negative, arbitrary = classify(value)
    value = integerify(value)
    offset = _check_offset(offset)
    if _fast_path(width, negative, arbitrary):
        return FixedInteger(value.val >> offset)
    return represent(value.val >> offset, arbitrary)


# Logical operators

def _binary_operands(value1, value2):
    classify(value1)
    classify(value2)
    value1, value2 = integerify(value1), integerify(value2)
    arbitrary = isinstance(value1, ArbitraryInteger) or isinstance(value2, ArbitraryInteger)
    return value1.val, value2.val, arbitrary


def bitwise_xor(value1, value2):
    """Bitwise XOR (exclusive or) of two integers.

    The result is an `ArbitraryInteger` if any of the operands is one.

        >>> from bitmanip.integer.operation import bitwise_xor
        >>> bitwise_xor(135, 0xFF)
        120

    """
    x, y, arbitrary = _binary_operands(value1, value2)
    return represent(x ^ y, arbitrary)


def bitwise_or(value1, value2):
    """Bitwise OR of two integers.

        >>> from bitmanip.integer.operation import bitwise_or
        >>> bitwise_or(0b1101, 0b0110)
        15

    """
    x, y, arbitrary = _binary_operands(value1, value2)
    return represent(x | y, arbitrary)


def bitwise_and(value1, value2):
    """Bitwise AND of two integers.

        >>> from bitmanip.integer.operation import bitwise_and
        >>> bitwise_and(0b11111101, 0b1111)
        13

    """
    x, y, arbitrary = _binary_operands(value1, value2)
    return represent(x & y, arbitrary)


def bitwise_not(value, bit_length=None):
    """Bitwise NOT (invert the bits).

    Without *bit_length*, all the bits are inverted, including the
    (virtual) sign bit, so non-negative integers become negative.
    Otherwise, only the *bit_length* least significant bits are inverted.

        >>> from bitmanip.integer.operation import bitwise_not
        >>> bitwise_not(192)
        -193
        >>> bitwise_not(192, 8)
        63
        >>> bitwise_not(-1, 8)
        -256

    """
    classify(value)
    value = integerify(value)
    arbitrary = isinstance(value, ArbitraryInteger)
    if bit_length is None:
        return represent(~value.val, arbitrary)
    return represent(value.val ^ all_ones_mask(bit_length).val, arbitrary)


# Others

def reverse_bit_order(value, bit_length=None):
    """Reverse the bit order within the *bit_length* least significant bits.

    By default, *bit_length* is the bit-length of the value as returned
    by `bit_length`, which does not count the sign of negative values, so
    the bits of -4 (-0b100) reversed by default are its 3 least significant
    ones. The bits of non-negative values above *bit_length* are discarded,
    whereas negative values keep their sign.

        >>> from bitmanip.integer.operation import reverse_bit_order
        >>> hex(reverse_bit_order(0xD00D, 16))
        '0xb00b'
        >>> reverse_bit_order(0b11, 8)
        192
        >>> reverse_bit_order(-2, 2)
        -3
        >>> reverse_bit_order(-4)
        -7

    """
    _, negative, arbitrary = classify(value)
    value = integerify(value)
    if bit_length is None:
        bit_length = abs(value.val).bit_length()
    elif not _is_int(bit_length) or bit_length < 0:
        raise InvalidValue("invalid bit-length {}".format(bit_length))

    n = bit_length
    if _fast_path(n, negative, arbitrary):
        result = 0
        for i in range(n):
            result |= ((value.val >> i) & 1) << (n - 1 - i)
        return FixedInteger(result & FAST_PATH_MASK)

    # negative values are kept to preserve their sign
    result = value.val if negative else 0
    for i in range(n):
        if (value.val >> i) & 1:
            result |= 1 << (n - 1 - i)
        elif negative:
            result &= ~(1 << (n - 1 - i))
    return represent(result, arbitrary)


def bit_length(value):
    """Return the number of bits needed to represent the value.

    The sign bit of negative integers is not counted.

        >>> from bitmanip.integer.core import ArbitraryInteger
        >>> from bitmanip.integer.operation import bit_length
        >>> bit_length(0xFFFFFFFF)
        32
        >>> bit_length(ArbitraryInteger(2 ** 96 - 1))
        96
        >>> bit_length(-4)
        3

    """
    if _is_int(value) and not is_safe_integer(value):
        msg = "{} is not a safe integer, use an ArbitraryInteger for huge integers"
        raise InvalidValue(msg.format(value))
    value = integerify(value)
    return abs(value.val).bit_length()
