"""Vector-space TF-IDF scoring primitives.

score(q, d) = coord(q, d) * queryNorm(q)
              * sum over t in q of tf(t in d) * idf(t)^2 * boost(t) * norm(t, d)

Every function rounds its result to single precision. Degenerate inputs
(zero denominators, zero documents) are not guarded: they produce inf or nan,
which the caller is expected to avoid upstream.
"""

from tfidf_similarity.math_utils import (
    to_float32,
    ieee_divide,
    ieee_sqrt,
    ieee_log,
)


def coord(overlap, max_overlap):
    """Fraction of query clauses matched: overlap / max_overlap."""
    return to_float32(ieee_divide(to_float32(overlap), to_float32(max_overlap)))


def query_norm(sum_of_squared_weights):
    """Query vector normalization: 1 / sqrt(sumOfSquaredWeights).

    Does not change ranking within a query, only makes scores of different
    queries comparable.
    """
    sum_of_squared_weights = to_float32(sum_of_squared_weights)
    return to_float32(ieee_divide(1.0, ieee_sqrt(sum_of_squared_weights)))


def tf(freq):
    """Term frequency damping: sqrt(freq)."""
    return to_float32(ieee_sqrt(to_float32(freq)))


def idf(doc_freq, num_docs):
    """Inverse document frequency: log(numDocs / (docFreq + 1)) + 1."""
    return to_float32(ieee_log(ieee_divide(num_docs, doc_freq + 1)) + 1.0)


def sloppy_freq(distance):
    """Proximity decay for sloppy phrase matches: 1 / (distance + 1)."""
    return to_float32(ieee_divide(1.0, distance + 1))


def score_payload(doc, start, end, payload):
    """Payload weight of a posting; the default ignores the payload."""
    return 1.0


def length_norm(field_boost, length, num_overlap, discount_overlaps=True):
    """Field length normalization: boost * 1 / sqrt(numTerms).

    numTerms is length - num_overlap when discount_overlaps is set, else
    length. A field of only overlap tokens gives numTerms == 0 and inf.
    """
    if discount_overlaps:
        num_terms = length - num_overlap
    else:
        num_terms = length
    norm = to_float32(ieee_divide(1.0, ieee_sqrt(num_terms)))
    return to_float32(to_float32(field_boost) * norm)
