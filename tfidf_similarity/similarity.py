"""TF-IDF similarity strategies.

A similarity is used at two points in time. At index time, compute_norm turns
a field's token statistics into the one-byte norm stored per document per
field. At query time, the stored byte is decoded and combined with tf, idf,
coord, query_norm and the proximity decays to score documents.
"""

import copy

from tfidf_similarity import norm_codec
from tfidf_similarity import scoring
from tfidf_similarity.explanation import Explanation
from tfidf_similarity.math_utils import to_float32
from tfidf_similarity.term_scorer import TermWeight, TermScorer


class TFIDFSimilarity:
    """Base class of vector-space similarities.

    Subclasses supply the scoring primitives; this class combines them into
    norms, query weights and posting scorers.
    """

    def coord(self, overlap, max_overlap):
        raise NotImplementedError

    def query_norm(self, sum_of_squared_weights):
        raise NotImplementedError

    def tf(self, freq):
        raise NotImplementedError

    def idf(self, doc_freq, num_docs):
        raise NotImplementedError

    def sloppy_freq(self, distance):
        raise NotImplementedError

    def score_payload(self, doc, start, end, payload):
        raise NotImplementedError

    def length_norm(self, state):
        raise NotImplementedError

    def encode_norm_value(self, f):
        raise NotImplementedError

    def decode_norm_value(self, norm):
        raise NotImplementedError

    def compute_norm(self, state):
        """Encoded norm of a field: encode_norm_value(length_norm(state))."""
        return self.encode_norm_value(self.length_norm(state))

    def idf_explain(self, doc_freq, num_docs):
        """Explanation of the idf of a single term."""
        return Explanation(
            self.idf(doc_freq, num_docs),
            "idf(docFreq=%d, maxDocs=%d)" % (doc_freq, num_docs),
        )

    def idf_explain_terms(self, doc_freqs, num_docs):
        """Explanation of the idf of a phrase: the sum over its terms."""
        details = [self.idf_explain(df, num_docs) for df in doc_freqs]
        total = 0.0
        for detail in details:
            total = to_float32(total + detail.value)
        return Explanation(total, "idf(), sum of:", details)

    def compute_weight(self, query_boost, num_docs, doc_freqs, field=None):
        """Build the query weight of a term (one doc_freq) or phrase."""
        if len(doc_freqs) == 1:
            idf = self.idf_explain(doc_freqs[0], num_docs)
        else:
            idf = self.idf_explain_terms(doc_freqs, num_docs)
        return TermWeight(idf, query_boost=query_boost, field=field)

    def sim_scorer(self, weight, norms=None):
        return TermScorer(self, weight, norms)


class DefaultSimilarity(TFIDFSimilarity):
    """Default TF-IDF scoring with single-byte norms.

    Norms lose precision when encoded: decode(encode(x)) == x does not hold
    in general, e.g. decode(encode(0.89)) == 0.875. Only big differences in
    field length survive, which is all ranking needs.

    Args:
        discount_overlaps: Whether tokens with a position increment of zero
            are left out of the field length used by length_norm.
    """

    def __init__(self, discount_overlaps=True):
        self._discount_overlaps = discount_overlaps

    @property
    def discount_overlaps(self):
        """True if overlap tokens are discounted from the field length."""
        return self._discount_overlaps

    def with_discount_overlaps(self, discount_overlaps):
        """Copy of this similarity using a different discount_overlaps.

        The copy is shallow, so subclass state carries over unchanged.
        """
        other = copy.copy(self)
        other._discount_overlaps = discount_overlaps
        return other

    def coord(self, overlap, max_overlap):
        return scoring.coord(overlap, max_overlap)

    def query_norm(self, sum_of_squared_weights):
        return scoring.query_norm(sum_of_squared_weights)

    def tf(self, freq):
        return scoring.tf(freq)

    def idf(self, doc_freq, num_docs):
        return scoring.idf(doc_freq, num_docs)

    def sloppy_freq(self, distance):
        return scoring.sloppy_freq(distance)

    def score_payload(self, doc, start, end, payload):
        return scoring.score_payload(doc, start, end, payload)

    def length_norm(self, state):
        """state.boost * 1 / sqrt(numTerms) for a FieldInvertState."""
        return scoring.length_norm(
            state.boost, state.length, state.num_overlap, self._discount_overlaps
        )

    def encode_norm_value(self, f):
        return norm_codec.encode_norm_value(f)

    def decode_norm_value(self, norm):
        return norm_codec.decode_norm_value(norm)

    def __str__(self):
        return "DefaultSimilarity"

    def __repr__(self):
        return "DefaultSimilarity(discount_overlaps=%r)" % self._discount_overlaps
