# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Description: InMemoryDocVectorStore
# -----------------------------------------------------------------------------
import logging
import threading
from typing import List, Sequence

from utility.errors import StorageError
from utility.logging_utils import get_class_logger
from vectorstore.DocRecord import DocRecord


class InMemoryDocVectorStore:
    """Process-local DocVectorStore. The whole batch is validated before anything is stored."""

    def __init__(self, *, logger: logging.Logger | None = None):
        self._records: List[DocRecord] = []
        self._ids: set[str] = set()
        self._lock = threading.Lock()
        self.logger = logger or get_class_logger(self.__class__)

    def append(self, records: Sequence[DocRecord]) -> int:
        batch = list(records)
        if not batch:
            return 0

        with self._lock:
            seen: set[str] = set()
            for rec in batch:
                if not isinstance(rec, DocRecord):
                    raise StorageError(f"Expected DocRecord, got {type(rec).__name__}")
                if rec.id in self._ids or rec.id in seen:
                    raise StorageError(f"Duplicate record id '{rec.id}'")
                seen.add(rec.id)

            self._records.extend(batch)
            self._ids.update(seen)
            total = len(self._records)

        self.logger.info("Appended %d records (total=%d)", len(batch), total)
        return len(batch)

    def scan_all(self) -> List[DocRecord]:
        with self._lock:
            return list(self._records)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def test_connection(self) -> bool:
        return True
