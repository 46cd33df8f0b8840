# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-06
# Description: SimilarityRanker
# -----------------------------------------------------------------------------
import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from ranking.ScoredRecord import NoRelevantResults, ScoredRecord
from utility.errors import DimensionMismatchError
from utility.logging_utils import get_class_logger
from vectorstore.DocRecord import DocRecord


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    dot(a, b) / (|a| * |b|), clipped to [-1, 1].
    Returns 0.0 when either vector has zero magnitude.
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise DimensionMismatchError(expected=va.shape[0], actual=vb.shape[0])

    norm = np.linalg.norm(va) * np.linalg.norm(vb)
    if norm == 0.0:
        return 0.0
    return float(np.clip(np.dot(va, vb) / norm, -1.0, 1.0))


class SimilarityRanker:
    """
    Brute-force cosine ranking over a full record scan, O(n*d) per query.
    Equal scores keep input (insertion) order.
    """

    def __init__(self, *, min_score: Optional[float] = None, logger: logging.Logger | None = None):
        self.min_score = min_score
        self.logger = logger or get_class_logger(self.__class__)

    def score_all(self, query: Sequence[float], records: Sequence[DocRecord]) -> np.ndarray:
        q = np.asarray(query, dtype=np.float64)
        if q.ndim != 1 or q.size == 0:
            raise ValueError("query must be a non-empty 1-d vector")
        if not records:
            return np.empty(0, dtype=np.float64)

        dim = q.shape[0]
        for rec in records:
            if rec.dimension != dim:
                raise DimensionMismatchError(expected=dim, actual=rec.dimension, record_id=rec.id)

        matrix = np.vstack([rec.embedding for rec in records]).astype(np.float64)
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)
        dots = matrix @ q

        scores = np.zeros(len(records), dtype=np.float64)
        nonzero = norms > 0
        scores[nonzero] = dots[nonzero] / norms[nonzero]
        return np.clip(scores, -1.0, 1.0)

    def top_k(self, query: Sequence[float], records: Sequence[DocRecord], k: int) -> List[ScoredRecord]:
        if k < 0:
            raise ValueError(f"k ({k}) must be >= 0")

        scores = self.score_all(query, records)
        if k == 0 or scores.size == 0:
            return []

        # stable sort on the negated scores keeps insertion order for ties
        order = np.argsort(-scores, kind="stable")[:k]
        return [ScoredRecord(record=records[i], score=float(scores[i])) for i in order]

    def search(
        self, query: Sequence[float], records: Sequence[DocRecord], k: int
    ) -> Union[List[ScoredRecord], NoRelevantResults]:
        """
        top_k() plus the caller-facing empty signal: NoRelevantResults when the
        corpus is empty or no score exceeds `min_score`.
        """
        if k <= 0:
            raise ValueError(f"k ({k}) must be > 0")

        if not records:
            self.logger.info("search: empty corpus")
            return NoRelevantResults(reason="empty corpus", corpus_size=0)

        ranked = self.top_k(query, records, k)
        best = ranked[0].score if ranked else None

        if self.min_score is not None:
            ranked = [s for s in ranked if s.score > self.min_score]

        if not ranked:
            self.logger.info(
                "search: no record exceeded min_score=%s (corpus=%d, best=%s)",
                self.min_score,
                len(records),
                best,
            )
            return NoRelevantResults(
                reason="no record exceeded the minimum relevance score",
                corpus_size=len(records),
                best_score=best,
            )

        self.logger.info(
            "search: corpus=%d k=%d returned=%d best=%.4f", len(records), k, len(ranked), ranked[0].score
        )
        return ranked
