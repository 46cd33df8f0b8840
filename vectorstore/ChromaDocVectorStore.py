# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Description: ChromaDocVectorStore
# -----------------------------------------------------------------------------
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import chromadb
from chromadb import ClientAPI
from chromadb.api.models import Collection

from utility.errors import StorageError
from utility.logging_utils import get_class_logger
from vectorstore.DocRecord import DocRecord


@dataclass
class ChromaDocVectorStore:
    """
    DocVectorStore backed by a Chroma collection.

    Ranking is brute force over scan_all(), so Chroma is only used as durable
    storage here. Each record carries a `seq` metadata value so scan_all() can
    return records in insertion order.
    """
    collection_name: str = "doc_chunks"
    persist_path: str = ""
    client: Optional[ClientAPI] = None
    logger: Any = None
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if self.client is None:
            if self.persist_path:
                self.logger.info("Initialising persistent Chroma client (path=%s)", self.persist_path)
                self.client = chromadb.PersistentClient(path=self.persist_path)
            else:
                self.logger.info("Initialising ephemeral Chroma client")
                self.client = chromadb.EphemeralClient()

        self.collection: Collection = self.client.get_or_create_collection(name=self.collection_name)

        # records are only ever added, so the count is the next free sequence number
        self._next_seq = self.collection.count()
        self.logger.info(
            "Chroma collection ready: '%s' (records=%d)", self.collection_name, self._next_seq
        )

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma and our collection?
        """
        try:
            _ = self.collection.count()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    def append(self, records: Sequence[DocRecord]) -> int:
        batch = list(records)
        if not batch:
            return 0

        ids: List[str] = [rec.id for rec in batch]
        if len(set(ids)) != len(ids):
            raise StorageError("Duplicate record ids within one append call")

        with self._lock:
            try:
                existing = self.collection.get(ids=ids, include=[])
            except Exception as e:
                self.logger.error("Failed to check ids in collection '%s': %s", self.collection_name, e)
                raise StorageError(f"Chroma lookup failed: {e}") from e

            if existing.get("ids"):
                raise StorageError(f"Record ids already stored: {existing['ids']}")

            documents: List[str] = []
            embeddings: List[List[float]] = []
            metadatas: List[Dict[str, Any]] = []
            for i, rec in enumerate(batch):
                meta = rec.to_metadata()
                meta["seq"] = self._next_seq + i
                documents.append(rec.text)
                embeddings.append(rec.embedding.tolist())
                metadatas.append(meta)

            try:
                self.collection.add(
                    ids=ids,
                    documents=documents,
                    embeddings=embeddings,
                    metadatas=metadatas,
                )
            except Exception as e:
                self.logger.error(
                    "Failed to add %d records to collection '%s': %s", len(batch), self.collection_name, e
                )
                raise StorageError(f"Chroma add failed: {e}") from e

            self._next_seq += len(batch)

        self.logger.info(
            "Appended %d records into Chroma collection '%s'", len(batch), self.collection_name
        )
        return len(batch)

    def scan_all(self) -> List[DocRecord]:
        try:
            res: Dict[str, Any] = self.collection.get(include=["documents", "embeddings", "metadatas"])
        except Exception as e:
            self.logger.error("Failed to scan collection '%s': %s", self.collection_name, e)
            raise StorageError(f"Chroma scan failed: {e}") from e

        ids = res.get("ids") or []
        documents = res.get("documents")
        embeddings = res.get("embeddings")
        metadatas = res.get("metadatas")

        # embeddings may come back as a numpy array, so no truthiness checks here
        if ids and (documents is None or embeddings is None or metadatas is None):
            raise StorageError("Chroma scan returned incomplete columns")

        rows = []
        for i, rec_id in enumerate(ids):
            meta = metadatas[i] or {}
            record = DocRecord(
                id=rec_id,
                source_id=str(meta.get("source_id", "")),
                text=documents[i] or "",
                embedding=embeddings[i],
                created_at=datetime.fromisoformat(meta["created_at"]),
            )
            rows.append((int(meta.get("seq", i)), record))

        rows.sort(key=lambda r: r[0])
        self.logger.debug("Scanned %d records from '%s'", len(rows), self.collection_name)
        return [record for _, record in rows]

    def count(self) -> int:
        try:
            return self.collection.count()
        except Exception as e:
            raise StorageError(f"Chroma count failed: {e}") from e
