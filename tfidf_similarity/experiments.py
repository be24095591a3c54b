"""Experiments validating the numeric properties of TF-IDF scoring."""

import math

from tfidf_similarity.math_utils import to_float32
from tfidf_similarity.norm_codec import NORM_TABLE
from tfidf_similarity.similarity import DefaultSimilarity
from tfidf_similarity.term_scorer import score_document

EPSILON = 1e-5


class ExperimentRunner:
    """Runs experiments over a set of fields and term queries.

    Args:
        fields: FieldInvertState per document, indexed by document number.
        queries: List of dicts with keys text, doc_freqs (per term) and
            freqs (per document, a list of per-term frequencies).
        num_docs: Collection size used for idf.
    """

    def __init__(self, fields, queries, num_docs=None, similarity=None):
        self.fields = fields
        self.queries = queries
        self.num_docs = num_docs if num_docs is not None else len(fields)
        self.similarity = similarity or DefaultSimilarity()
        self.norms = bytes(self.similarity.compute_norm(f) for f in fields)

    def run_all(self):
        """Run all experiments and return (name, passed, details) tuples."""
        experiments = [
            ("1. Lossy Norm Compression", self.exp1_lossy_compression),
            ("2. Encode Monotonicity", self.exp2_encode_monotonicity),
            ("3. Decode Table Monotonicity", self.exp3_table_monotonicity),
            ("4. Clamping and Saturation", self.exp4_clamping),
            ("5. IDF Properties", self.exp5_idf_properties),
            ("6. Overlap Discounting", self.exp6_overlap_discount),
            ("7. Norm Order Survives Compression", self.exp7_norm_order),
            ("8. Degenerate Inputs", self.exp8_degenerate_inputs),
            ("9. Explanations Match Scores", self.exp9_explanations),
        ]
        results = []
        for name, func in experiments:
            passed, details = func()
            results.append((name, passed, details))
        return results

    def exp1_lossy_compression(self):
        """decode(encode(x)) lands on a table value no larger than x."""
        sim = self.similarity
        fixture = sim.decode_norm_value(sim.encode_norm_value(0.89))
        passed = fixture == 0.875
        lossy = 0
        for field in self.fields:
            norm = sim.length_norm(field)
            decoded = sim.decode_norm_value(sim.encode_norm_value(norm))
            if decoded not in NORM_TABLE or decoded > norm:
                passed = False
            if decoded != norm:
                lossy += 1
        details = "decode(encode(0.89))=%s, %d/%d field norms lossy" % (
            fixture, lossy, len(self.fields)
        )
        return passed, details

    def exp2_encode_monotonicity(self):
        """x1 <= x2 implies encode(x1) <= encode(x2) over a geometric sweep."""
        sim = self.similarity
        values = [0.0]
        x = 1e-12
        while x < 1e12:
            values.append(x)
            x *= 1.07
        violations = []
        previous = sim.encode_norm_value(values[0])
        for value in values[1:]:
            encoded = sim.encode_norm_value(value)
            if encoded < previous:
                violations.append("%.3e" % value)
            previous = encoded
        passed = not violations
        details = "%d values checked, %d violations" % (len(values), len(violations))
        if violations:
            details += ": " + ", ".join(violations[:3])
        return passed, details

    def exp3_table_monotonicity(self):
        """Decoded values never decrease as the byte grows."""
        decreasing = [
            b for b in range(1, 256) if NORM_TABLE[b] < NORM_TABLE[b - 1]
        ]
        passed = len(NORM_TABLE) == 256 and not decreasing
        details = "range=[%s, %s], decreasing steps=%d" % (
            NORM_TABLE[1], NORM_TABLE[255], len(decreasing)
        )
        return passed, details

    def exp4_clamping(self):
        """Negatives map to 0, underflow to 1, overflow to 255."""
        sim = self.similarity
        checks = [
            ("negative", sim.encode_norm_value(-3.5), 0),
            ("-0.0", sim.encode_norm_value(-0.0), 0),
            ("zero", sim.encode_norm_value(0.0), 0),
            ("underflow", sim.encode_norm_value(1e-30), 1),
            ("overflow", sim.encode_norm_value(1e30), 255),
            ("infinity", sim.encode_norm_value(math.inf), 255),
        ]
        failed = [name for name, got, expected in checks if got != expected]
        return not failed, "failed: %s" % (", ".join(failed) or "none")

    def exp5_idf_properties(self):
        """idf strictly decreases with document frequency."""
        sim = self.similarity
        n = self.num_docs
        idfs = [sim.idf(df, n) for df in range(n)]
        passed = all(idfs[i] > idfs[i + 1] for i in range(len(idfs) - 1))
        details = "N=%d, idf(0)=%.4f, idf(N-1)=%.4f" % (n, idfs[0], idfs[-1])
        return passed, details

    def exp6_overlap_discount(self):
        """Discounting overlaps never lowers a norm; without overlaps it is a no-op."""
        discounting = self.similarity.with_discount_overlaps(True)
        counting = self.similarity.with_discount_overlaps(False)
        passed = True
        with_overlaps = 0
        for field in self.fields:
            if field.length - field.num_overlap <= 0:
                continue
            discounted = discounting.length_norm(field)
            plain = counting.length_norm(field)
            if field.num_overlap == 0:
                passed = passed and discounted == plain
            else:
                with_overlaps += 1
                passed = passed and discounted > plain
        return passed, "%d fields with overlap tokens" % with_overlaps

    def exp7_norm_order(self):
        """A smaller norm never decodes to a larger value than a bigger norm."""
        sim = self.similarity
        fields = sorted(self.fields, key=sim.length_norm, reverse=True)
        decoded = [sim.decode_norm_value(sim.compute_norm(f)) for f in fields]
        inversions = sum(
            1 for i in range(len(decoded) - 1) if decoded[i] < decoded[i + 1]
        )
        distinct = len(set(decoded))
        details = "%d fields, %d distinct norms, %d inversions" % (
            len(fields), distinct, inversions
        )
        return inversions == 0, details

    def exp8_degenerate_inputs(self):
        """Zero denominators give IEEE special values instead of errors."""
        sim = self.similarity
        results = {
            "coord(1,0)": sim.coord(1, 0),
            "queryNorm(0)": sim.query_norm(0.0),
            "idf(0,0)": sim.idf(0, 0),
            "sloppyFreq(-1)": sim.sloppy_freq(-1),
        }
        passed = (
            results["coord(1,0)"] == math.inf
            and results["queryNorm(0)"] == math.inf
            and results["idf(0,0)"] == -math.inf
            and results["sloppyFreq(-1)"] == math.inf
            and math.isnan(sim.coord(0, 0))
        )
        details = ", ".join("%s=%s" % item for item in sorted(results.items()))
        return passed, details

    def exp9_explanations(self):
        """Explained values equal scored values for every matching posting."""
        sim = self.similarity
        max_diff = 0.0
        comparisons = 0
        matched_docs = 0
        for query in self.queries:
            weights = [
                sim.compute_weight(1.0, self.num_docs, [df])
                for df in query["doc_freqs"]
            ]
            sum_sq = 0.0
            for w in weights:
                sum_sq = to_float32(sum_sq + w.value_for_normalization())
            norm = sim.query_norm(sum_sq)
            for w in weights:
                w.normalize(norm)
            scorers = [sim.sim_scorer(w, self.norms) for w in weights]
            for doc, freqs in enumerate(query["freqs"]):
                for scorer, freq in zip(scorers, freqs):
                    if freq <= 0:
                        continue
                    score = scorer.score(doc, freq)
                    explained = scorer.explain(doc, freq).value
                    diff = abs(score - explained) / max(1.0, abs(score))
                    max_diff = max(max_diff, diff)
                    comparisons += 1
                if score_document(sim, scorers, doc, freqs) > 0.0:
                    matched_docs += 1
        passed = max_diff < EPSILON
        details = "max_diff=%.2e across %d postings, %d matching documents" % (
            max_diff, comparisons, matched_docs
        )
        return passed, details
