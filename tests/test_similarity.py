"""Tests for the TF-IDF similarity strategies."""

import math

import pytest

from tfidf_similarity import scoring
from tfidf_similarity.field_state import FieldInvertState
from tfidf_similarity.math_utils import to_float32
from tfidf_similarity.similarity import TFIDFSimilarity, DefaultSimilarity
from tfidf_similarity.term_scorer import TermScorer, TermWeight


class TestFieldInvertState:

    def test_from_position_increments(self):
        state = FieldInvertState.from_position_increments("body", [1, 0, 1, 1, 0])
        assert state.field == "body"
        assert state.length == 5
        assert state.num_overlap == 2
        assert state.boost == 1.0

    def test_empty_stream(self):
        state = FieldInvertState.from_position_increments("body", [], boost=3.0)
        assert state.length == 0
        assert state.num_overlap == 0
        assert state.boost == 3.0


class TestDiscountOverlaps:

    def test_default_is_true(self):
        assert DefaultSimilarity().discount_overlaps is True

    def test_with_discount_overlaps_returns_new_strategy(self):
        sim = DefaultSimilarity()
        counting = sim.with_discount_overlaps(False)
        assert counting.discount_overlaps is False
        assert sim.discount_overlaps is True
        assert counting is not sim

    def test_with_discount_overlaps_keeps_subclass_state(self):
        class FieldAwareSimilarity(DefaultSimilarity):
            def __init__(self, field, discount_overlaps=True):
                super().__init__(discount_overlaps)
                self.field = field

        sim = FieldAwareSimilarity("title")
        counting = sim.with_discount_overlaps(False)
        assert isinstance(counting, FieldAwareSimilarity)
        assert counting.field == "title"
        assert counting.discount_overlaps is False
        assert sim.discount_overlaps is True

    def test_flag_is_read_only(self):
        with pytest.raises(AttributeError):
            DefaultSimilarity().discount_overlaps = False

    def test_length_norm_uses_flag(self):
        state = FieldInvertState("body", length=9, num_overlap=4)
        assert DefaultSimilarity().length_norm(state) == to_float32(1.0 / math.sqrt(5))
        assert DefaultSimilarity(discount_overlaps=False).length_norm(state) == (
            to_float32(1.0 / 3.0)
        )

    def test_length_norm_uses_boost(self):
        state = FieldInvertState("title", length=4, boost=2.0)
        assert DefaultSimilarity().length_norm(state) == 1.0


class TestDefaultSimilarity:

    def test_delegates_to_scoring_functions(self):
        sim = DefaultSimilarity()
        assert sim.tf(4) == scoring.tf(4)
        assert sim.idf(3, 100) == scoring.idf(3, 100)
        assert sim.coord(1, 3) == scoring.coord(1, 3)
        assert sim.query_norm(2.0) == scoring.query_norm(2.0)
        assert sim.sloppy_freq(2) == scoring.sloppy_freq(2)
        assert sim.score_payload(1, 0, 4, b"x") == 1.0

    def test_norm_codec(self):
        sim = DefaultSimilarity()
        assert sim.encode_norm_value(0.89) == 123
        assert sim.decode_norm_value(123) == 0.875
        assert sim.encode_norm_value(-2.0) == 0

    def test_compute_norm(self):
        sim = DefaultSimilarity()
        assert sim.compute_norm(FieldInvertState("body", length=4)) == 120
        assert sim.decode_norm_value(sim.compute_norm(FieldInvertState("body", length=1))) == 1.0

    def test_compute_norm_saturates_for_overlap_only_field(self):
        sim = DefaultSimilarity()
        assert sim.compute_norm(FieldInvertState("body", length=2, num_overlap=2)) == 255

    def test_str(self):
        assert str(DefaultSimilarity()) == "DefaultSimilarity"
        assert "discount_overlaps=False" in repr(DefaultSimilarity(False))


class TestIdfExplain:

    def test_single_term(self):
        expl = DefaultSimilarity().idf_explain(3, 10)
        assert expl.value == scoring.idf(3, 10)
        assert expl.description == "idf(docFreq=3, maxDocs=10)"

    def test_phrase_sums_terms(self):
        sim = DefaultSimilarity()
        expl = sim.idf_explain_terms([1, 4], 10)
        assert expl.description == "idf(), sum of:"
        assert len(expl.details) == 2
        assert expl.value == pytest.approx(sim.idf(1, 10) + sim.idf(4, 10))

    def test_compute_weight(self):
        sim = DefaultSimilarity()
        weight = sim.compute_weight(2.0, 10, [3], field="body")
        assert isinstance(weight, TermWeight)
        assert weight.field == "body"
        assert weight.idf.value == sim.idf(3, 10)
        assert weight.query_weight == to_float32(sim.idf(3, 10) * 2.0)

    def test_sim_scorer(self):
        sim = DefaultSimilarity()
        weight = sim.compute_weight(1.0, 10, [3])
        scorer = sim.sim_scorer(weight, b"\x7c")
        assert isinstance(scorer, TermScorer)
        assert scorer.norms == b"\x7c"


class TestAbstractSimilarity:

    def test_primitives_are_abstract(self):
        sim = TFIDFSimilarity()
        with pytest.raises(NotImplementedError):
            sim.tf(1)
        with pytest.raises(NotImplementedError):
            sim.compute_norm(FieldInvertState("body", length=1))

    def test_subclass_overrides_payload_hook(self):
        class PayloadSimilarity(DefaultSimilarity):
            def score_payload(self, doc, start, end, payload):
                return float(payload[0]) if payload else 1.0

        sim = PayloadSimilarity()
        scorer = sim.sim_scorer(sim.compute_weight(1.0, 10, [1]))
        assert scorer.compute_payload_factor(0, 0, 1, b"\x03") == 3.0
        assert scorer.compute_payload_factor(0, 0, 1, None) == 1.0
