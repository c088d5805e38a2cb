"""Read and write the bits of 64-bit floats.

A float is viewed as a `FloatBitView`, that is, its sign bit and the
positions of the set bits of its exponent and significand (often called
the mantissa)::

    >>> from bitmanip.float64.accessor import to_bits, from_bits
    >>> to_bits(-2.5)
    FloatBitView(sign_bit=True, exponent=(11,), significand=(51,))
    >>> from_bits(to_bits(-2.5))
    -2.5

The parts of a float can also be given as a dictionary with the keys
``sign_bit``, ``exponent`` and ``significand``, where the exponent and
the significand are either bit positions or plain integers::

    >>> from_bits({"exponent": 1023})
    1.0
    >>> from_bits({"exponent": 2047})
    Traceback (most recent call last):
     ...
    bitmanip.errors.InvalidFloatResult: the float became Infinity

"""
import collections
import math
from struct import Struct

from bitmanip.errors import (
    InvalidBitPosition, InvalidFloatResult, InvalidValue, MalformedPartsArgument
)
from bitmanip.integer.core import Integer, _is_int
from bitmanip.integer.mask import bitmask, check_position

EXPONENT_WIDTH = 11
SIGNIFICAND_WIDTH = 52
SIGN_POSITION = 1 + EXPONENT_WIDTH + SIGNIFICAND_WIDTH

_double = Struct("<d")
_uint64 = Struct("<Q")


FloatBitView = collections.namedtuple("FloatBitView", "sign_bit exponent significand")
FloatBitView.__doc__ = """The bits of a 64-bit float.

Attributes:
    sign_bit: True if the sign bit is set.
    exponent: the positions (from 1 to 11) of the set bits of the exponent.
    significand: the positions (from 1 to 52) of the set bits of the
        significand.
"""


def _check_float(value):
    if isinstance(value, float):
        return value
    if _is_int(value):
        try:
            return float(value)
        except OverflowError:
            raise InvalidValue("{} is too large to be converted to a float".format(value))
    msg = "expected a float, got '{}'"
    raise InvalidValue(msg.format(type(value).__name__))


def float_to_pattern(value):
    """Return the 64-bit pattern of the float as an unsigned integer.

        >>> from bitmanip.float64.accessor import float_to_pattern
        >>> hex(float_to_pattern(1.0))
        '0x3ff0000000000000'

    """
    return _uint64.unpack(_double.pack(_check_float(value)))[0]


def pattern_to_float(pattern):
    """Return the float with the given 64-bit pattern.

        >>> from bitmanip.float64.accessor import pattern_to_float
        >>> pattern_to_float(0xC000000000000000)
        -2.0

    """
    if not (_is_int(pattern) or isinstance(pattern, Integer)):
        msg = "the pattern must be an integer, got '{}'"
        raise InvalidValue(msg.format(type(pattern).__name__))
    pattern = int(pattern)
    if not 0 <= pattern < 2 ** SIGN_POSITION:
        raise InvalidValue("{} is not a 64-bit pattern".format(pattern))
    return _double.unpack(_uint64.pack(pattern))[0]


def to_bits(value):
    """Return the `FloatBitView` of a float."""
    pattern = float_to_pattern(value)

    sign_bit = bool(pattern >> (SIGN_POSITION - 1))
    exponent = tuple(
        i - SIGNIFICAND_WIDTH + 1 for i in range(SIGNIFICAND_WIDTH, SIGN_POSITION - 1)
        if (pattern >> i) & 1
    )
    significand = tuple(i + 1 for i in range(SIGNIFICAND_WIDTH) if (pattern >> i) & 1)

    return FloatBitView(sign_bit, exponent, significand)


def _field_mask(name, field, width, offset):
    """Return the mask of an exponent or significand field."""
    if field is None:
        return 0
    elif _is_int(field) or isinstance(field, Integer):
        field = int(field)
        if not 0 <= field < 2 ** width:
            raise InvalidValue("the {} is only {} bits".format(name, width))
        return field << offset
    elif isinstance(field, (collections.abc.Sequence, collections.abc.Set)) and \
            not isinstance(field, (str, bytes)):
        for position in field:
            check_position(position)
            if position > width:
                raise InvalidBitPosition("the {} is only {} bits".format(name, width))
        if len(field) == 0:
            return 0
        return int(bitmask([position + offset for position in field]))
    else:
        msg = "the {} must be an integer or a collection of bit positions, got '{}'"
        raise MalformedPartsArgument(msg.format(name, type(field).__name__))


def _parts_mask(parts):
    """Return the 64-bit mask with the bits given in the parts."""
    if parts is None:
        raise MalformedPartsArgument("the parts of the float are missing")
    elif isinstance(parts, FloatBitView):
        parts = parts._asdict()
    elif not isinstance(parts, collections.abc.Mapping):
        msg = "the parts must be a FloatBitView or a mapping, got '{}'"
        raise MalformedPartsArgument(msg.format(type(parts).__name__))

    if "mantissa" in parts:
        raise MalformedPartsArgument('use the synonym "significand" instead of "mantissa"')
    unknown = [str(key) for key in parts if key not in FloatBitView._fields]
    if unknown:
        raise MalformedPartsArgument("unknown parts: {}".format(", ".join(sorted(unknown))))

    mask = 0

    sign_bit = parts.get("sign_bit")
    if sign_bit is True or (_is_int(sign_bit) and sign_bit == 1):
        mask |= int(bitmask([SIGN_POSITION]))
    elif not (sign_bit is None or sign_bit is False or sign_bit == 0):
        msg = "the sign_bit must be a boolean, got '{}'"
        raise MalformedPartsArgument(msg.format(type(sign_bit).__name__))

    mask |= _field_mask("exponent", parts.get("exponent"), EXPONENT_WIDTH, SIGNIFICAND_WIDTH)
    mask |= _field_mask("significand", parts.get("significand"), SIGNIFICAND_WIDTH, 0)

    return mask


def _check_result(pattern):
    value = pattern_to_float(pattern)
    if math.isnan(value):
        raise InvalidFloatResult('the float became "Not a Number" (NaN)')
    if math.isinf(value):
        raise InvalidFloatResult("the float became Infinity")
    return value


def from_bits(parts):
    """Return the float with the bits given in the parts.

    Args:
        parts: a `FloatBitView` or a mapping with the (optional) keys
            ``sign_bit``, ``exponent`` and ``significand``.

    ::

        >>> from bitmanip.float64.accessor import from_bits
        >>> from_bits({"sign_bit": True, "exponent": 1024, "significand": [52]})
        -3.0

    """
    return _check_result(_parts_mask(parts))


def set_bits(value, *parts):
    """Set (to 1) the bits given in the parts of the float.

        >>> from bitmanip.float64.accessor import set_bits
        >>> set_bits(1.5, {"sign_bit": True})
        -1.5
        >>> set_bits(1.0, {"significand": [52]})
        1.5

    """
    if len(parts) != 1:
        raise MalformedPartsArgument("expected the arguments: value, parts")
    pattern = float_to_pattern(value)
    return _check_result(pattern | _parts_mask(parts[0]))


def clear_bits(value, *parts):
    """Clear (to 0) the bits given in the parts of the float.

        >>> from bitmanip.float64.accessor import clear_bits
        >>> clear_bits(-1.5, {"sign_bit": True})
        1.5
        >>> clear_bits(1.5, {"significand": [52]})
        1.0

    """
    if len(parts) != 1:
        raise MalformedPartsArgument("expected the arguments: value, parts")
    pattern = float_to_pattern(value)
    return _check_result(pattern & ~_parts_mask(parts[0]))
