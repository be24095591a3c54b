"""TF-IDF similarity - default vector-space scoring with single-byte norms."""

from tfidf_similarity.math_utils import (
    to_float32,
    float_to_int_bits,
    int_bits_to_float,
    ieee_divide,
    ieee_sqrt,
    ieee_log,
)
from tfidf_similarity.small_float import (
    float_to_byte,
    byte_to_float,
    float_to_byte315,
    byte315_to_float,
    float_to_byte52,
    byte52_to_float,
)
from tfidf_similarity.norm_codec import (
    NORM_TABLE,
    encode_norm_value,
    decode_norm_value,
)
from tfidf_similarity.scoring import (
    coord,
    query_norm,
    tf,
    idf,
    sloppy_freq,
    score_payload,
    length_norm,
)
from tfidf_similarity.field_state import FieldInvertState
from tfidf_similarity.explanation import Explanation
from tfidf_similarity.term_scorer import TermWeight, TermScorer, score_document
from tfidf_similarity.similarity import TFIDFSimilarity, DefaultSimilarity
from tfidf_similarity.experiments import ExperimentRunner

__all__ = [
    "to_float32",
    "float_to_int_bits",
    "int_bits_to_float",
    "ieee_divide",
    "ieee_sqrt",
    "ieee_log",
    "float_to_byte",
    "byte_to_float",
    "float_to_byte315",
    "byte315_to_float",
    "float_to_byte52",
    "byte52_to_float",
    "NORM_TABLE",
    "encode_norm_value",
    "decode_norm_value",
    "coord",
    "query_norm",
    "tf",
    "idf",
    "sloppy_freq",
    "score_payload",
    "length_norm",
    "FieldInvertState",
    "Explanation",
    "TermWeight",
    "TermScorer",
    "score_document",
    "TFIDFSimilarity",
    "DefaultSimilarity",
    "ExperimentRunner",
]
