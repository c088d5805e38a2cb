"""Manipulate the bits of 64-bit floats.

See `Double-precision floating-point format
<https://en.wikipedia.org/wiki/Double-precision_floating-point_format>`_
for the layout of the sign, exponent and significand fields.

"""
