# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-08
# Description: DocQueryService
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from context.ContextAssembler import ContextAssembler
from embedding.DocEmbeddingGateway import DocEmbeddingGateway
from ranking.ScoredRecord import NoRelevantResults, ScoredRecord
from ranking.SimilarityRanker import SimilarityRanker
from utility.logging_utils import get_class_logger
from vectorstore.DocVectorStore import DocVectorStore


@dataclass
class DocQueryService:
    gateway: DocEmbeddingGateway
    store: DocVectorStore
    ranker: SimilarityRanker = field(default_factory=SimilarityRanker)
    assembler: ContextAssembler = field(default_factory=ContextAssembler)
    default_k: int = 5
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def retrieve(
        self, question: str, n_results: int | None = None
    ) -> Union[List[ScoredRecord], NoRelevantResults]:
        """
        Embed the question, scan the whole store and rank it.
        Any embedding/storage failure propagates: a question either gets a
        full answer set or an error.
        """
        q = (question or "").strip()
        if not q:
            raise ValueError("question must not be empty")

        k = self.default_k if n_results is None else n_results
        if k <= 0:
            raise ValueError(f"n_results ({k}) must be > 0")

        self.logger.info("retrieve: query='%s' k=%d (start)", q[:120], k)

        query_vector = self.gateway.embed(q)
        records = self.store.scan_all()
        result = self.ranker.search(query_vector, records, k)

        if isinstance(result, NoRelevantResults):
            self.logger.info("retrieve: no relevant results (%s)", result.reason)
        else:
            self.logger.info("retrieve: hits=%d (done)", len(result))
        return result

    def build_context(self, scored: Sequence[ScoredRecord]) -> str:
        return self.assembler.assemble(scored)

    @staticmethod
    def to_hits(scored: Sequence[ScoredRecord], include_text: bool = True) -> List[Dict[str, Any]]:
        """Flatten ranked records into plain dicts for the API layer."""
        hits: List[Dict[str, Any]] = []
        for item in scored:
            rec = item.record
            hit: Dict[str, Any] = {
                "record_id": rec.id,
                "source_id": rec.source_id,
                "score": item.score,
                "created_at": rec.created_at.isoformat(),
            }
            if include_text:
                hit["text"] = rec.text
            hits.append(hit)
        return hits
