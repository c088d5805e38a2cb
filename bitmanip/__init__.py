"""Manipulate the bits of integers and 64-bit floats.

The `integer` package operates on two numeric domains: fixed-precision
integers bounded to the *safe integer* range (magnitude at most
:math:`2^{53} - 1`) and arbitrary-precision integers. Each operation
decides whether a 32-bit fast path suffices or whether it has to be
promoted to arbitrary precision to remain exact.

The `float64` package gives access to the sign, exponent and
significand bits of IEEE-754 double-precision floats.

"""
