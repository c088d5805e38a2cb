"""Provide context managers to modify the default behaviour."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class Cache(StatefulContext):
    """Control the Cache context.

    Control whether or not the bitmasks built from bit positions are
    memoized. By default, the cache is enabled.

        >>> from bitmanip.integer.context import Cache
        >>> from bitmanip.integer.mask import bitmask
        >>> bitmask([1, 8]) is bitmask([1, 8])
        True
        >>> with Cache(False):
        ...     bitmask([1, 8]) is bitmask([1, 8])
        False

    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)


class FastPath(StatefulContext):
    """Control the FastPath context.

    Control whether or not operations on small non-negative fixed-precision
    integers are computed on the 32-bit fast path. By default, the fast path
    is enabled.

    When the FastPath context is disabled, every operation is computed
    in arbitrary precision and the result demoted to a `FixedInteger`
    when the operand was one. The results are the same; disabling the
    context is only useful to check that both paths agree.

        >>> from bitmanip.integer.context import FastPath
        >>> from bitmanip.integer.operation import set_bits
        >>> set_bits(0b10000000, [1, 2, 3, 4])
        143
        >>> with FastPath(False):
        ...     set_bits(0b10000000, [1, 2, 3, 4])
        143

    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)
