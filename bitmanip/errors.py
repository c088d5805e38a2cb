"""Provide the exceptions raised by the bit manipulation functions."""


class BitManipulationError(Exception):
    """Base class of the errors raised by bitmanip."""


class InvalidValue(BitManipulationError, ValueError):
    """The value is missing, not an integer or not exactly representable."""


class InvalidBitPosition(BitManipulationError, ValueError):
    """A bit position is 0, negative or out of range for its field."""


class EmptyInput(BitManipulationError, ValueError):
    """No bit positions were given where at least one is required."""


class ResultOutOfSafeRange(BitManipulationError, OverflowError):
    """The result cannot be represented as a fixed-precision integer.

    Redo the operation on an `ArbitraryInteger` to get the exact result.
    """


class InvalidFloatResult(BitManipulationError, ValueError):
    """Assembling the bits of a float produced Infinity or NaN."""


class MalformedPartsArgument(BitManipulationError, TypeError):
    """The parts of a float are absent, wrongly shaped or use an alias."""
