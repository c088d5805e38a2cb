"""Provide the fixed and arbitrary-precision integer types."""
from sympy import Atom

from bitmanip.errors import InvalidValue, ResultOutOfSafeRange

MAX_SAFE_INTEGER = 2 ** 53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

# widest non-negative value handled by the native fast path
FAST_PATH_WIDTH = 32
FAST_PATH_MASK = 2 ** FAST_PATH_WIDTH - 1


def _is_int(val):
    return isinstance(val, int) and not isinstance(val, bool)


def is_safe_integer(val):
    """Return True if *val* is an integer exactly representable in a double.

        >>> from bitmanip.integer.core import is_safe_integer
        >>> is_safe_integer(2 ** 53 - 1), is_safe_integer(2 ** 53)
        (True, False)
        >>> is_safe_integer(1.0)
        False

    """
    return _is_int(val) and MIN_SAFE_INTEGER <= val <= MAX_SAFE_INTEGER


class Integer(Atom):
    """Represent integer values.

    Integers are either a `FixedInteger` or an `ArbitraryInteger`;
    the class of the object is the tag selecting the representation.

    This class is not meant to be instantiated but to provide a base
    class for the two representations.

    An `Integer` is equal to a plain `int` with the same value, but two
    integers are only equal if they have the same representation.

        >>> from bitmanip.integer.core import FixedInteger, ArbitraryInteger
        >>> FixedInteger(3) == 3, ArbitraryInteger(3) == 3
        (True, True)
        >>> FixedInteger(3) == ArbitraryInteger(3)
        False

    """

    __slots__ = ["_val"]

    def __new__(cls, val):
        if not _is_int(val):
            msg = "expected an integer, got '{}'"
            raise InvalidValue(msg.format(type(val).__name__))
        obj = Atom.__new__(cls)
        obj._val = val
        return obj

    def __int__(self):
        return self.val

    __index__ = __int__

    def __hash__(self):
        return hash(self.val)

    def __eq__(self, other):
        """Override == operator."""
        if _is_int(other):
            return self.val == other
        elif isinstance(other, Integer) and type(self) == type(other):
            return self.val == other.val
        else:
            return False

    def __ne__(self, other):
        return not self == other

    def __str__(self):
        """Return the non-verbose string representation."""
        from bitmanip.integer import printing
        return (printing.IntStrPrinter()).doprint(self)

    __repr__ = __str__

    def _hashable_content(self):
        """Return a tuple of information about self to compute its hash."""
        return (self.val, )

    @property
    def val(self):
        """The integer represented by the object."""
        return self._val

    def vrepr(self):
        """Return a verbose string representation."""
        from bitmanip.integer import printing
        return (printing.IntReprPrinter()).doprint(self)

    def bin(self, padding_bits=8, grouping=8, show_prefix=True):
        """Return the (two's complement) binary representation.

            >>> from bitmanip.integer.core import FixedInteger
            >>> print(FixedInteger(3).bin())
            0b00000011
            >>> print(FixedInteger(-2).bin(padding_bits=4))
            0b1110

        """
        from bitmanip.integer import printing
        return printing.number_to_binary(self, padding_bits, grouping, show_prefix)

    def hex(self, padding_bytes=4, grouping=4, show_prefix=True):
        """Return the (two's complement) hexadecimal representation.

            >>> from bitmanip.integer.core import ArbitraryInteger
            >>> print(ArbitraryInteger(0xD00D).hex(padding_bytes=2))
            0xD00D

        """
        from bitmanip.integer import printing
        return printing.number_to_hex(self, padding_bytes, grouping, show_prefix)


class FixedInteger(Integer):
    """Represent fixed-precision integers.

    Fixed-precision integers are restricted to the safe integer range,
    that is, integers with a magnitude of at most :math:`2^{53} - 1`.
    Larger values must be represented with `ArbitraryInteger`.

        >>> from bitmanip.integer.core import FixedInteger
        >>> FixedInteger(135)
        135
        >>> FixedInteger(135).vrepr()
        'FixedInteger(135)'
        >>> FixedInteger(2 ** 53)
        Traceback (most recent call last):
         ...
        bitmanip.errors.InvalidValue: 9007199254740992 is not a safe integer, use an ArbitraryInteger instead

    """

    __slots__ = []

    def __new__(cls, val):
        if _is_int(val) and not is_safe_integer(val):
            msg = "{} is not a safe integer, use an ArbitraryInteger instead"
            raise InvalidValue(msg.format(val))
        return super().__new__(cls, val)


class ArbitraryInteger(Integer):
    """Represent arbitrary-precision integers.

        >>> from bitmanip.integer.core import ArbitraryInteger
        >>> ArbitraryInteger(2 ** 64)
        18446744073709551616
        >>> ArbitraryInteger(-1).vrepr()
        'ArbitraryInteger(-1)'

    """

    __slots__ = []


def integerify(value):
    """Convert the argument *value* to an `Integer`.

    Plain integers are read as `FixedInteger`.

        >>> from bitmanip.integer.core import integerify
        >>> print(integerify(8).vrepr())
        FixedInteger(8)
        >>> integerify(0.5)
        Traceback (most recent call last):
         ...
        bitmanip.errors.InvalidValue: cannot convert 'float' to an integer

    """
    if value is None:
        raise InvalidValue("the value to operate on is missing")
    elif isinstance(value, Integer):
        return value
    elif _is_int(value):
        return FixedInteger(value)
    else:
        msg = "cannot convert '{}' to an integer"
        raise InvalidValue(msg.format(type(value).__name__))


def classify(value):
    """Return the bit-width, sign and representation of *value*.

    Return a tuple ``(bit_width, is_negative, is_arbitrary)``.
    The bit-width of an `ArbitraryInteger` is not computed and
    is reported as 0.

        >>> from bitmanip.integer.core import classify, ArbitraryInteger
        >>> classify(0xFF)
        (8, False, False)
        >>> classify(-4)
        (3, True, False)
        >>> classify(ArbitraryInteger(-4))
        (0, True, True)

    """
    value = integerify(value)
    if isinstance(value, ArbitraryInteger):
        return 0, value.val < 0, True
    return abs(value.val).bit_length(), value.val < 0, False


def demote(value):
    """Convert *value* to a `FixedInteger` if it is a safe integer.

        >>> from bitmanip.integer.core import demote
        >>> print(demote(2 ** 32).vrepr())
        FixedInteger(4294967296)
        >>> demote(-2 ** 60)
        Traceback (most recent call last):
         ...
        bitmanip.errors.ResultOutOfSafeRange: the result -1152921504606846976 is less than the minimum safe integer, operate on an ArbitraryInteger instead

    """
    val = int(value)
    if val < MIN_SAFE_INTEGER:
        msg = "the result {} is less than the minimum safe integer, " \
              "operate on an ArbitraryInteger instead"
        raise ResultOutOfSafeRange(msg.format(val))
    if val > MAX_SAFE_INTEGER:
        msg = "the result {} is larger than the maximum safe integer, " \
              "operate on an ArbitraryInteger instead"
        raise ResultOutOfSafeRange(msg.format(val))
    return FixedInteger(val)


def represent(val, arbitrary):
    """Return *val* as an `ArbitraryInteger` if *arbitrary* or demoted otherwise."""
    if arbitrary:
        return ArbitraryInteger(val)
    return demote(val)
