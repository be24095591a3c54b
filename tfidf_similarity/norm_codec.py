"""Single-byte compression of per-document length normalization factors.

Norms are encoded with three mantissa bits, five exponent bits and the
zero-exponent point at 15, covering roughly 5.8e-10 to 7.5e9 with about one
significant decimal digit of accuracy. Zero is also represented.
"""

from tfidf_similarity.small_float import float_to_byte315, byte315_to_float

# Cache of decoded bytes, filled once when the module is first imported.
NORM_TABLE = tuple(byte315_to_float(i) for i in range(256))


def encode_norm_value(f):
    """Encode a normalization factor for storage in an index.

    Negative numbers are rounded up to zero. Values too large to represent
    are rounded down to the largest representable value. Positive values too
    small to represent are rounded up to the smallest positive representable
    value.
    """
    return float_to_byte315(f)


def decode_norm_value(norm):
    """Decode a stored norm byte; signed bytes are masked into 0-255."""
    return NORM_TABLE[norm & 0xFF]
