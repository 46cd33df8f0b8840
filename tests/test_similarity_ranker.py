# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: test_similarity_ranker.py
# -----------------------------------------------------------------------------
import math
import random

import pytest

from ranking.ScoredRecord import NoRelevantResults
from ranking.SimilarityRanker import SimilarityRanker, cosine_similarity
from utility.errors import DimensionMismatchError
from vectorstore.DocRecord import DocRecord


def _unit_at(score: float):
    """2-d unit vector whose cosine with (1, 0) is `score`."""
    return [score, math.sqrt(1.0 - score * score)]


def _record(text: str, vector) -> DocRecord:
    return DocRecord.create(source_id=f"{text}.txt", text=text, embedding=vector)


def test_cosine_is_symmetric_and_self_similar():
    rng = random.Random(7)
    for _ in range(20):
        a = [rng.uniform(-1, 1) for _ in range(16)]
        b = [rng.uniform(-1, 1) for _ in range(16)]
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))
        assert cosine_similarity(a, a) == pytest.approx(1.0)
        assert -1.0 <= cosine_similarity(a, b) <= 1.0


def test_cosine_with_zero_vector_is_zero():
    assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0
    assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0


def test_cosine_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])


def test_top_k_orders_by_descending_score():
    records = [
        _record("a", _unit_at(0.9)),
        _record("b", _unit_at(0.95)),
        _record("c", _unit_at(0.3)),
    ]

    top = SimilarityRanker().top_k([1.0, 0.0], records, 2)

    assert [s.record.text for s in top] == ["b", "a"]
    assert top[0].score == pytest.approx(0.95, abs=1e-6)
    assert top[1].score == pytest.approx(0.9, abs=1e-6)


def test_top_k_length_and_sorting():
    rng = random.Random(3)
    records = [_record(f"r{i}", [rng.uniform(-1, 1) for _ in range(8)]) for i in range(25)]
    query = [rng.uniform(-1, 1) for _ in range(8)]
    ranker = SimilarityRanker()

    for k in (1, 5, 25, 40):
        top = ranker.top_k(query, records, k)
        assert len(top) == min(k, len(records))
        scores = [s.score for s in top]
        assert scores == sorted(scores, reverse=True)


def test_ties_keep_insertion_order():
    records = [_record(f"t{i}", [1.0, 1.0]) for i in range(4)] + [_record("best", [1.0, 0.0])]

    top = SimilarityRanker().top_k([1.0, 0.0], records, 5)

    assert [s.record.text for s in top] == ["best", "t0", "t1", "t2", "t3"]


def test_zero_magnitude_record_scores_zero():
    records = [_record("zero", [0.0, 0.0]), _record("neg", [-1.0, 0.0])]
    top = SimilarityRanker().top_k([1.0, 0.0], records, 2)

    assert [(s.record.text, s.score) for s in top] == [("zero", 0.0), ("neg", -1.0)]


def test_record_dimension_mismatch_is_fatal():
    records = [_record("ok", [1.0, 0.0]), _record("bad", [1.0, 0.0, 0.0])]
    with pytest.raises(DimensionMismatchError):
        SimilarityRanker().top_k([1.0, 0.0], records, 1)


def test_k_zero_and_negative():
    records = [_record("a", [1.0, 0.0])]
    assert SimilarityRanker().top_k([1.0, 0.0], records, 0) == []
    with pytest.raises(ValueError):
        SimilarityRanker().top_k([1.0, 0.0], records, -1)


def test_search_on_empty_corpus_signals_no_relevant_results():
    result = SimilarityRanker().search([1.0, 0.0], [], 5)

    assert isinstance(result, NoRelevantResults)
    assert result.corpus_size == 0
    assert not result


def test_search_applies_min_score():
    records = [_record("low", _unit_at(0.2)), _record("high", _unit_at(0.8))]
    ranker = SimilarityRanker(min_score=0.5)

    result = ranker.search([1.0, 0.0], records, 5)
    assert [s.record.text for s in result] == ["high"]

    nothing = SimilarityRanker(min_score=0.95).search([1.0, 0.0], records, 5)
    assert isinstance(nothing, NoRelevantResults)
    assert nothing.best_score == pytest.approx(0.8, abs=1e-6)
    assert nothing.corpus_size == 2


def test_score_equal_to_min_score_is_dropped():
    records = [_record("exact", [1.0, 0.0])]

    result = SimilarityRanker(min_score=1.0).search([1.0, 0.0], records, 1)

    assert isinstance(result, NoRelevantResults)
    assert result.best_score == pytest.approx(1.0)
    assert len(SimilarityRanker(min_score=0.999).search([1.0, 0.0], records, 1)) == 1
