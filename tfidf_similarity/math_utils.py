"""Single-precision and IEEE-754 helpers for TF-IDF scoring.

Python floats are doubles and Python arithmetic raises on division by zero,
while the scoring model is defined in terms of 32-bit floats whose degenerate
inputs produce infinities and NaNs. These helpers bridge the two.
"""

import math
import struct

_FLOAT32 = struct.Struct(">f")
_UINT32 = struct.Struct(">I")
_INT32 = struct.Struct(">i")


def to_float32(value):
    """Round a number to the nearest IEEE single, as a narrowing cast does.

    Magnitudes beyond the single-precision range become signed infinity.
    """
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def float_to_int_bits(value):
    """Signed 32-bit integer holding the IEEE single bit pattern of value."""
    return _INT32.unpack(_FLOAT32.pack(to_float32(value)))[0]


def int_bits_to_float(bits):
    """Interpret the low 32 bits of an integer as an IEEE single."""
    return _FLOAT32.unpack(_UINT32.pack(bits & 0xFFFFFFFF))[0]


def ieee_divide(a, b):
    """Division with IEEE semantics for a zero divisor (inf or nan)."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def ieee_sqrt(x):
    """Square root returning nan for negative input instead of raising."""
    if x < 0:
        return math.nan
    return math.sqrt(x)


def ieee_log(x):
    """Natural log returning -inf at zero and nan below zero."""
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return math.log(x)
