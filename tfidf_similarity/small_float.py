"""Floating point numbers smaller than 32 bits.

A small float keeps the sign-less top bits of an IEEE single: the exponent
and the leading mantissa bits, rebased around a chosen zero-exponent point.
Conversion truncates, so the mapping from float to byte is monotonic.
"""

from tfidf_similarity.math_utils import float_to_int_bits, int_bits_to_float


def float_to_byte(f, num_mantissa_bits, zero_exp):
    """Convert a float to an 8-bit small float (0-255).

    Values less than zero are all mapped to zero. Values are truncated
    (rounded down) to the nearest representable value. Positive values too
    small to represent become the smallest positive value (1), values too
    large become the largest (255).

    Args:
        f: The value to encode.
        num_mantissa_bits: Number of mantissa bits kept in the byte.
        zero_exp: The zero-point in the range of exponent values.
    """
    # Adjustment from a float zero exponent to our zero exponent,
    # shifted over to our exponent position.
    fzero = (63 - zero_exp) << num_mantissa_bits
    bits = float_to_int_bits(f)
    smallfloat = bits >> (24 - num_mantissa_bits)
    if smallfloat <= fzero:
        # Negative numbers and zero (including -0.0) map to 0,
        # underflow maps to 1.
        return 0 if bits <= 0 else 1
    if smallfloat >= fzero + 0x100:
        return 0xFF
    return smallfloat - fzero


def byte_to_float(b, num_mantissa_bits, zero_exp):
    """Convert an 8-bit small float back to a float."""
    b &= 0xFF
    if b == 0:
        return 0.0
    bits = b << (24 - num_mantissa_bits)
    bits += (63 - zero_exp) << 24
    return int_bits_to_float(bits)


def float_to_byte315(f):
    """float_to_byte(f, num_mantissa_bits=3, zero_exp=15).

    smallest non-zero value = 5.820766E-10,
    largest value = 7.5161928E9, epsilon = 0.125
    """
    return float_to_byte(f, 3, 15)


def byte315_to_float(b):
    """byte_to_float(b, num_mantissa_bits=3, zero_exp=15)"""
    return byte_to_float(b, 3, 15)


def float_to_byte52(f):
    """float_to_byte(f, num_mantissa_bits=5, zero_exp=2).

    smallest nonzero value = 0.033203125,
    largest value = 1984.0, epsilon = 0.03125
    """
    return float_to_byte(f, 5, 2)


def byte52_to_float(b):
    """byte_to_float(b, num_mantissa_bits=5, zero_exp=2)"""
    return byte_to_float(b, 5, 2)
