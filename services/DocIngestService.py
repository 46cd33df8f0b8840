# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-08
# Description: DocIngestService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from chunking.DocChunker import DocChunker
from chunking.DocSegment import DocSegment
from embedding.DocEmbeddingGateway import DocEmbeddingGateway
from extractor.DocTextExtractor import DocTextExtractor
from utility.errors import UnsupportedFormat
from utility.logging_utils import get_class_logger
from vectorstore.DocRecord import DocRecord
from vectorstore.DocVectorStore import DocVectorStore

STATUS_INGESTED = "ingested"
STATUS_CHUNKED = "chunked"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"


@dataclass
class FileIngestResult:
    filename: str
    status: str = STATUS_FAILED
    segments: int = 0
    records: int = 0
    chunks: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class IngestReport:
    files: List[FileIngestResult] = field(default_factory=list)

    def count(self, status: str) -> int:
        return sum(1 for f in self.files if f.status == status)

    @property
    def records(self) -> int:
        return sum(f.records for f in self.files)


class DocIngestService:
    """
    Owns the ingest/index pipeline:
      - extract text (DocTextExtractor)
      - chunk (DocChunker)
      - embed in fixed-size batches (DocEmbeddingGateway)
      - append each batch to the vector store before the next is embedded

    Files are processed one at a time. A failing file stops at its failing
    batch (earlier batches stay stored) and never aborts its siblings.
    """

    def __init__(
        self,
        *,
        extractor: DocTextExtractor,
        chunker: DocChunker,
        gateway: DocEmbeddingGateway,
        store: DocVectorStore,
        logger: logging.Logger | None = None,
    ) -> None:
        self.extractor = extractor
        self.chunker = chunker
        self.gateway = gateway
        self.store = store
        self.logger = logger or get_class_logger(self.__class__)

    def ingest_text(self, source_id: str, text: str) -> int:
        """Chunk, embed and store `text`. Returns the number of records stored."""
        progress = FileIngestResult(filename=source_id)
        segments = self.chunker.split(text, source_id=source_id)
        self._store_segments(segments, progress)
        return progress.records

    def ingest_file(self, filename: str, data: bytes, *, index: bool = True) -> FileIngestResult:
        result = FileIngestResult(filename=filename)
        self.logger.info("Processing file '%s' (%d bytes, index=%s)", filename, len(data), index)

        try:
            text = self.extractor.extract(filename, data)
            segments = self.chunker.split(text, source_id=filename)
            result.segments = len(segments)
            result.chunks = [s.text for s in segments]

            if not index:
                result.status = STATUS_CHUNKED
                return result

            self._store_segments(segments, result)
            result.status = STATUS_INGESTED
            self.logger.info("Ingested '%s': segments=%d records=%d", filename, result.segments, result.records)

        except UnsupportedFormat as e:
            result.status = STATUS_SKIPPED
            result.error = str(e)
            self.logger.warning("Skipping '%s': %s", filename, e)

        except Exception as e:
            result.status = STATUS_FAILED
            result.error = str(e)
            self.logger.error(
                "Failed ingest for '%s' after %d/%d records: %s",
                filename,
                result.records,
                result.segments,
                e,
                exc_info=True,
            )

        return result

    def ingest_files(self, files: Iterable[Tuple[str, bytes]], *, index: bool = True) -> IngestReport:
        report = IngestReport()
        for filename, data in files:
            report.files.append(self.ingest_file(filename, data, index=index))

        self.logger.info(
            "Ingest complete: %d ingested, %d chunked, %d skipped, %d failed (%d records)",
            report.count(STATUS_INGESTED),
            report.count(STATUS_CHUNKED),
            report.count(STATUS_SKIPPED),
            report.count(STATUS_FAILED),
            report.records,
        )
        return report

    def _store_segments(self, segments: Sequence[DocSegment], progress: FileIngestResult) -> None:
        if not segments:
            self.logger.warning("No segments to embed for '%s'", progress.filename)
            return

        for batch, vectors in self.gateway.iter_batches(segments):
            records = [
                DocRecord.create(source_id=seg.source_id, text=seg.text, embedding=vec)
                for seg, vec in zip(batch, vectors)
            ]
            progress.records += self.store.append(records)
