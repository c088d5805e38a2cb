"""Provide the bitmask constructors."""
import collections

from sympy.core import cache

from bitmanip.errors import EmptyInput, InvalidBitPosition, InvalidValue
from bitmanip.integer import context
from bitmanip.integer.core import (
    FAST_PATH_WIDTH, FAST_PATH_MASK, ArbitraryInteger, FixedInteger, _is_int
)

# widest all-ones mask that is still a safe integer
MAX_SAFE_WIDTH = 53


def _cacheit(func):
    """Cache functions if `Cache` context is enabled."""
    cfunc = cache.cacheit(func)

    def cached_func(*args, **kwargs):
        if context.Cache.current_context:
            return cfunc(*args, **kwargs)
        else:
            return func(*args, **kwargs)

    return cached_func


def _tuplify(positions):
    if isinstance(positions, collections.abc.Iterable) and not isinstance(positions, (str, bytes)):
        return tuple(positions)
    else:
        return tuple([positions])


def check_position(position):
    """Return *position* if it is a valid 1-indexed bit position."""
    if not _is_int(position):
        msg = "bit position must be an integer, got '{}'"
        raise InvalidBitPosition(msg.format(type(position).__name__))
    if position == 0:
        raise InvalidBitPosition('there is no "bit 0", the least significant bit is bit 1')
    if position < 0:
        raise InvalidBitPosition("invalid bit position {}".format(position))
    return position


@_cacheit
def _bitmask(positions):
    mask = 0
    promoted = False
    for p in positions:
        if p > FAST_PATH_WIDTH:
            promoted = True
        mask |= 1 << (p - 1)

    if promoted:
        return ArbitraryInteger(mask)
    return FixedInteger(mask & FAST_PATH_MASK)


def bitmask(positions):
    """Return the value with the bits in the given positions set.

    The mask is a `FixedInteger` when every position is at most 32 and an
    `ArbitraryInteger` otherwise.

        >>> from bitmanip.integer.mask import bitmask
        >>> bitmask([1, 2, 3])
        7
        >>> print(bitmask([1, 33]).vrepr())
        ArbitraryInteger(4294967297)
        >>> bitmask([])
        Traceback (most recent call last):
         ...
        bitmanip.errors.EmptyInput: no bit positions were given

    A single position is also accepted:

        >>> bitmask(8)
        128

    """
    positions = _tuplify(positions)
    if len(positions) == 0:
        raise EmptyInput("no bit positions were given")
    for p in positions:
        check_position(p)
    return _bitmask(positions)


def all_ones_mask(width):
    """Return the mask with the *width* least significant bits set.

    The mask is an `ArbitraryInteger` when *width* is more than 53.

        >>> from bitmanip.integer.mask import all_ones_mask
        >>> all_ones_mask(32) == 0xFFFFFFFF
        True
        >>> print(all_ones_mask(54).vrepr())
        ArbitraryInteger(18014398509481983)

    """
    if not _is_int(width) or width < 0:
        raise InvalidValue("invalid bit-width {}".format(width))
    if width <= MAX_SAFE_WIDTH:
        return FixedInteger(2 ** width - 1)
    return ArbitraryInteger(2 ** width - 1)
