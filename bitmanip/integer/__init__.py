"""Manipulate the bits of fixed and arbitrary-precision integers.

Values are either a `FixedInteger`, restricted to the safe integer range,
or an `ArbitraryInteger` of unbounded width. Plain Python integers are
accepted everywhere a value is expected and read as `FixedInteger`.

Bit positions are 1-indexed: position 1 is the least significant bit.

"""
