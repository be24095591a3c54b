"""Tests for query weights, posting scores and explanations."""

import pytest

from tfidf_similarity.explanation import Explanation
from tfidf_similarity.field_state import FieldInvertState
from tfidf_similarity.similarity import DefaultSimilarity
from tfidf_similarity.term_scorer import TermWeight, TermScorer, score_document


def make_weight(idf_value, query_boost=1.0):
    return TermWeight(Explanation(idf_value, "idf"), query_boost=query_boost)


class TestTermWeight:

    def test_initial_weight(self):
        weight = make_weight(2.0, query_boost=3.0)
        assert weight.query_weight == 6.0
        assert weight.value_for_normalization() == 36.0
        assert weight.query_norm == 1.0

    def test_normalize(self):
        sim = DefaultSimilarity()
        weight = make_weight(2.0)
        norm = sim.query_norm(weight.value_for_normalization())
        assert norm == 0.5
        weight.normalize(norm)
        assert weight.query_norm == 0.5
        assert weight.query_weight == 1.0
        assert weight.value == 2.0

    def test_normalize_with_top_level_boost(self):
        weight = make_weight(2.0)
        weight.normalize(0.5, top_level_boost=4.0)
        assert weight.query_norm == 2.0
        assert weight.query_weight == 4.0
        assert weight.value == 8.0


class TestTermScorer:

    def setup_method(self):
        self.sim = DefaultSimilarity()
        self.weight = make_weight(2.0)
        self.weight.normalize(0.5)

    def test_score_without_norms(self):
        scorer = TermScorer(self.sim, self.weight)
        assert scorer.score(0, 4) == 4.0
        assert scorer.score(7, 1) == 2.0

    def test_score_with_norms(self):
        norms = bytes([
            self.sim.encode_norm_value(0.5),
            self.sim.encode_norm_value(1.0),
            self.sim.encode_norm_value(0.89),
        ])
        scorer = TermScorer(self.sim, self.weight, norms)
        assert scorer.score(0, 4) == 2.0
        assert scorer.score(1, 4) == 4.0
        assert scorer.score(2, 1) == 2.0 * 0.875

    def test_shorter_fields_score_higher(self):
        norms = bytes([
            self.sim.compute_norm(FieldInvertState("body", length=2)),
            self.sim.compute_norm(FieldInvertState("body", length=100)),
        ])
        scorer = TermScorer(self.sim, self.weight, norms)
        assert scorer.score(0, 2) > scorer.score(1, 2)

    def test_slop_and_payload_factors(self):
        scorer = TermScorer(self.sim, self.weight)
        assert scorer.compute_slop_factor(0) == 1.0
        assert scorer.compute_slop_factor(1) == 0.5
        assert scorer.compute_payload_factor(3, 0, 2, b"\x01") == 1.0


class TestExplain:

    def test_normalized_query_returns_field_weight(self):
        sim = DefaultSimilarity()
        weight = make_weight(2.0)
        weight.normalize(0.5)
        scorer = TermScorer(sim, weight, bytes([sim.encode_norm_value(0.5)]))
        expl = scorer.explain(0, 4)
        assert expl.description == "fieldWeight in 0, product of:"
        assert expl.value == scorer.score(0, 4)
        assert [d.description for d in expl.details] == [
            "tf(freq=4), with freq of:", "idf", "fieldNorm(doc=0)",
        ]

    def test_full_explanation(self):
        sim = DefaultSimilarity()
        weight = make_weight(2.0, query_boost=3.0)
        weight.normalize(1.0)
        scorer = TermScorer(sim, weight)
        expl = scorer.explain(5, 1)
        assert expl.description == "score(doc=5,freq=1), product of:"
        assert expl.value == scorer.score(5, 1) == 12.0
        query_expl, field_expl = expl.details
        assert query_expl.value == 6.0
        assert query_expl.details[0].description == "boost"
        assert field_expl.value == 2.0
        assert expl.is_match()

    def test_to_string_is_indented(self):
        expl = Explanation(1.0, "root", [Explanation(0.5, "child")])
        assert str(expl) == "1.0 = root\n  0.5 = child"


class TestScoreDocument:

    def setup_method(self):
        self.sim = DefaultSimilarity()
        weights = [make_weight(2.0), make_weight(1.0)]
        for w in weights:
            w.normalize(1.0)
        self.scorers = [TermScorer(self.sim, w) for w in weights]

    def test_all_terms_match(self):
        total = score_document(self.sim, self.scorers, 0, [1, 4])
        assert total == 4.0 + 2.0

    def test_coord_scales_partial_matches(self):
        total = score_document(self.sim, self.scorers, 0, [1, 0])
        assert total == pytest.approx(4.0 * 0.5)

    def test_no_match(self):
        assert score_document(self.sim, self.scorers, 0, [0, 0]) == 0.0

    def test_frequency_count_must_match_scorers(self):
        with pytest.raises(ValueError):
            score_document(self.sim, self.scorers, 0, [1])
        with pytest.raises(ValueError):
            score_document(self.sim, self.scorers, 0, [1, 1, 1])
