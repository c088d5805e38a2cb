"""Manage the representation of integers and floats."""
import math

from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str


def _twos_complement(val, padding_bits):
    """Return the non-negative integer with the two's complement bits of val.

    Negative values are masked to a multiple of padding_bits wide
    enough to hold their sign bit.
    """
    if val >= 0:
        return val
    width = abs(val).bit_length() + 1
    overflow = width % padding_bits if width > padding_bits else 0
    if overflow:
        padding_bits = width + (padding_bits - overflow)
    return val & (2 ** max(width, padding_bits) - 1)


def _pad_and_group(digits, pad_size, grouping):
    """Zero pad digits to a multiple of pad_size and split them in groups."""
    overflow = len(digits) % pad_size if len(digits) > pad_size else 0
    if overflow:
        pad_size = len(digits) + (pad_size - overflow)
    digits = digits.rjust(pad_size, "0")

    if grouping:
        head = len(digits) % grouping
        groups = [digits[:head]] if head else []
        for i in range(head, len(digits), grouping):
            groups.append(digits[i:i + grouping])
        digits = "_".join(groups)

    return digits


def _is_float_pattern(number):
    """Return True if the float is printed as its IEEE-754 bit pattern."""
    return not math.isfinite(number) or not number.is_integer()


# noinspection PyPep8Naming,PyMethodMayBeStatic
class IntStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `Integer`."""

    def _print_Integer(self, n):
        return str(n.val)


# noinspection PyPep8Naming,PyMethodMayBeStatic
class IntReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `Integer.vrepr` method."""

    def _print_Integer(self, n):
        return "{}({})".format(type(n).__name__, n.val)


# noinspection PyPep8Naming
class BinaryPrinter(sympy_str.StrPrinter):
    """Printing class that handles the binary representation.

    Integers are printed in two's complement and floats with a fractional
    part in the IEEE-754 double-precision format (the sign bit, followed by
    the exponent and the significand).

        >>> from bitmanip.integer.printing import BinaryPrinter
        >>> BinaryPrinter().doprint(-193)
        '0b11111111_00111111'
        >>> BinaryPrinter(dict(padding_bits=4, grouping=4)).doprint(0b10001)
        '0b0001_0001'
        >>> BinaryPrinter(dict(grouping=0)).doprint(-0.5)
        '0b1011111111100000000000000000000000000000000000000000000000000000'

    """

    _default_settings = dict(
        sympy_str.StrPrinter._default_settings,
        padding_bits=8,
        grouping=8,
        show_prefix=True,
    )

    def _prefixed(self, digits):
        padded = _pad_and_group(digits, self._settings["padding_bits"], self._settings["grouping"])
        return ("0b" if self._settings["show_prefix"] else "") + padded

    def _print_Integer(self, n):
        return self._print_int(n.val)

    def _print_int(self, n):
        val = _twos_complement(n, self._settings["padding_bits"])
        return self._prefixed(format(val, "b"))

    def _print_float(self, x):
        if not _is_float_pattern(x):
            return self._print_int(int(x))
        from bitmanip.float64 import accessor
        return self._prefixed(format(accessor.float_to_pattern(x), "064b"))


# noinspection PyPep8Naming
class HexPrinter(sympy_str.StrPrinter):
    """Printing class that handles the hexadecimal representation.

        >>> from bitmanip.integer.printing import HexPrinter
        >>> HexPrinter().doprint(0xFF)
        '0x0000_00FF'
        >>> HexPrinter(dict(padding_bytes=1, show_prefix=False)).doprint(-1)
        'FF'
        >>> HexPrinter().doprint(1.5)
        '0x3FF8_0000_0000_0000'

    """

    _default_settings = dict(
        sympy_str.StrPrinter._default_settings,
        padding_bytes=4,
        grouping=4,
        show_prefix=True,
    )

    def _prefixed(self, digits):
        padded = _pad_and_group(digits, 2 * self._settings["padding_bytes"], self._settings["grouping"])
        return ("0x" if self._settings["show_prefix"] else "") + padded

    def _print_Integer(self, n):
        return self._print_int(n.val)

    def _print_int(self, n):
        val = _twos_complement(n, 8 * self._settings["padding_bytes"])
        return self._prefixed(format(val, "X"))

    def _print_float(self, x):
        if not _is_float_pattern(x):
            return self._print_int(int(x))
        from bitmanip.float64 import accessor
        return self._prefixed(format(accessor.float_to_pattern(x), "016X"))


def _check_number(number):
    if isinstance(number, float):
        return number
    from bitmanip.integer import core
    return core.integerify(number)


def number_to_binary(number, padding_bits=8, grouping=8, show_prefix=True):
    """Return the binary representation of an integer or a float.

    Args:
        number: an integer (plain or `Integer`) or a float.
        padding_bits: the output is zero padded to a multiple of this size.
        grouping: the digits are split in groups of this size (0 disables it).
        show_prefix: whether to prefix the output with ``0b``.

    ::

        >>> from bitmanip.integer.printing import number_to_binary
        >>> number_to_binary(0b10001111)
        '0b10001111'
        >>> number_to_binary(2 ** 32 + 1, padding_bits=64, grouping=0, show_prefix=False)
        '0000000000000000000000000000000100000000000000000000000000000001'

    """
    assert padding_bits > 0 and grouping >= 0
    settings = dict(padding_bits=padding_bits, grouping=grouping, show_prefix=show_prefix)
    return BinaryPrinter(settings).doprint(_check_number(number))


def number_to_hex(number, padding_bytes=4, grouping=4, show_prefix=True):
    """Return the hexadecimal representation of an integer or a float.

    Args:
        number: an integer (plain or `Integer`) or a float.
        padding_bytes: the output is zero padded to a multiple of this
            number of bytes.
        grouping: the digits are split in groups of this size (0 disables it).
        show_prefix: whether to prefix the output with ``0x``.

    ::

        >>> from bitmanip.integer.printing import number_to_hex
        >>> number_to_hex(0xB00B, 2)
        '0xB00B'
        >>> number_to_hex(-2)
        '0xFFFF_FFFE'

    """
    assert padding_bytes > 0 and grouping >= 0
    settings = dict(padding_bytes=padding_bytes, grouping=grouping, show_prefix=show_prefix)
    return HexPrinter(settings).doprint(_check_number(number))
