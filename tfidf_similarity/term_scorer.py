"""Per-term query weights and posting scorers for TF-IDF ranking."""

from tfidf_similarity.explanation import Explanation
from tfidf_similarity.math_utils import to_float32


class TermWeight:
    """Query-side statistics of one term (or phrase) of a query.

    query_weight starts as idf * query_boost. Once the whole query is known,
    normalize() folds in the query norm and sets value, the factor every
    matching posting is multiplied by.
    """

    def __init__(self, idf, query_boost=1.0, field=None):
        self.field = field
        # idf is an Explanation so that scores can be explained later
        self.idf = idf
        self.query_boost = query_boost
        self.query_norm = 1.0
        self.query_weight = to_float32(idf.value * query_boost)
        self.value = 0.0

    def value_for_normalization(self):
        """Squared query weight, summed over clauses to compute query_norm."""
        return to_float32(self.query_weight * self.query_weight)

    def normalize(self, query_norm, top_level_boost=1.0):
        self.query_norm = to_float32(query_norm * top_level_boost)
        self.query_weight = to_float32(self.query_weight * self.query_norm)
        self.value = to_float32(self.query_weight * self.idf.value)


class TermScorer:
    """Scores postings of one term against documents.

    Args:
        similarity: The TF-IDF strategy supplying tf, norms and decays.
        weight: A normalized TermWeight.
        norms: Optional sequence of encoded norms indexed by document
            (e.g. a bytes object). Without norms, length is ignored.
    """

    def __init__(self, similarity, weight, norms=None):
        self.similarity = similarity
        self.weight = weight
        self.norms = norms

    def score(self, doc, freq):
        """tf(freq) * weight.value * norm(doc)."""
        raw = to_float32(self.similarity.tf(freq) * self.weight.value)
        if self.norms is None:
            return raw
        return to_float32(
            raw * self.similarity.decode_norm_value(self.norms[doc])
        )

    def compute_slop_factor(self, distance):
        return self.similarity.sloppy_freq(distance)

    def compute_payload_factor(self, doc, start, end, payload):
        return self.similarity.score_payload(doc, start, end, payload)

    def explain(self, doc, freq):
        """Break the score of doc into query weight and field weight."""
        sim = self.similarity
        weight = self.weight
        result = Explanation(
            0.0, "score(doc=%d,freq=%s), product of:" % (doc, freq)
        )

        query_expl = Explanation(0.0, "queryWeight, product of:")
        if weight.query_boost != 1.0:
            query_expl.add_detail(Explanation(weight.query_boost, "boost"))
        query_expl.add_detail(weight.idf)
        query_expl.add_detail(Explanation(weight.query_norm, "queryNorm"))
        query_expl.value = to_float32(
            weight.query_boost * weight.idf.value * weight.query_norm
        )
        result.add_detail(query_expl)

        tf_expl = Explanation(
            sim.tf(freq),
            "tf(freq=%s), with freq of:" % freq,
            [Explanation(freq, "termFreq=%s" % freq)],
        )
        if self.norms is not None:
            field_norm = sim.decode_norm_value(self.norms[doc])
        else:
            field_norm = 1.0
        field_expl = Explanation(
            to_float32(tf_expl.value * weight.idf.value * field_norm),
            "fieldWeight in %d, product of:" % doc,
            [
                tf_expl,
                weight.idf,
                Explanation(field_norm, "fieldNorm(doc=%d)" % doc),
            ],
        )
        result.add_detail(field_expl)

        # combine them
        result.value = to_float32(query_expl.value * field_expl.value)
        if query_expl.value == 1.0:
            return field_expl
        return result


def score_document(similarity, scorers, doc, freqs):
    """Sum term scores of one document, scaled by the coordination factor.

    freqs holds the document's frequency for each scorer's term, in order;
    a frequency of zero means the term does not match.
    """
    if len(freqs) != len(scorers):
        raise ValueError(
            "expected %d term frequencies, got %d" % (len(scorers), len(freqs))
        )
    total = 0.0
    overlap = 0
    for scorer, freq in zip(scorers, freqs):
        if freq <= 0:
            continue
        overlap += 1
        total = to_float32(total + scorer.score(doc, freq))
    if overlap == 0:
        return 0.0
    return to_float32(total * similarity.coord(overlap, len(scorers)))
