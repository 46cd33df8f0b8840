# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-06
# Description: ScoredRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from vectorstore.DocRecord import DocRecord


@dataclass(frozen=True)
class ScoredRecord:
    """A record paired with its cosine similarity to one query."""
    record: DocRecord
    score: float


@dataclass(frozen=True)
class NoRelevantResults:
    """
    Returned instead of a ranking when nothing is worth passing on:
    an empty corpus, or no record reaching the minimum relevance score.
    """
    reason: str
    corpus_size: int = 0
    best_score: float | None = None

    def __bool__(self) -> bool:
        return False
