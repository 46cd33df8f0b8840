# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: test_vector_stores.py
# -----------------------------------------------------------------------------
import uuid
from datetime import datetime, timezone

import numpy as np
import pytest

from utility.errors import StorageError
from vectorstore.ChromaDocVectorStore import ChromaDocVectorStore
from vectorstore.DocRecord import DocRecord
from vectorstore.DocVectorStore import DocVectorStore
from vectorstore.InMemoryDocVectorStore import InMemoryDocVectorStore


def _records(n: int, source_id: str = "doc.txt", offset: int = 0):
    return [
        DocRecord.create(source_id=source_id, text=f"segment {offset + i}", embedding=[float(offset + i), 1.0, 0.5])
        for i in range(n)
    ]


@pytest.fixture(params=["memory", "chroma"])
def store(request) -> DocVectorStore:
    if request.param == "memory":
        return InMemoryDocVectorStore()
    # ephemeral clients share one in-process system, so isolate by collection name
    return ChromaDocVectorStore(collection_name=f"test_{uuid.uuid4().hex}")


def test_store_satisfies_protocol(store):
    assert isinstance(store, DocVectorStore)


def test_append_then_scan_all_in_insertion_order(store):
    first = _records(3)
    second = _records(4, source_id="other.pdf", offset=3)

    assert store.append(first) == 3
    assert store.append(second) == 4

    scanned = store.scan_all()
    assert [r.id for r in scanned] == [r.id for r in first + second]
    assert [r.text for r in scanned] == [f"segment {i}" for i in range(7)]
    assert scanned[3].source_id == "other.pdf"
    assert store.count() == 7


def test_scan_round_trips_record_fields(store):
    created = datetime(2026, 10, 1, 12, 30, tzinfo=timezone.utc)
    rec = DocRecord.create("a.pdf", "some text", [0.25, -1.5, 3.0], created_at=created)
    store.append([rec])

    (got,) = store.scan_all()
    assert got.id == rec.id
    assert got.source_id == "a.pdf"
    assert got.text == "some text"
    assert got.created_at == created
    np.testing.assert_allclose(got.embedding, [0.25, -1.5, 3.0])


def test_empty_append_is_a_no_op(store):
    assert store.append([]) == 0
    assert store.scan_all() == []


def test_duplicate_ids_reject_the_whole_batch(store):
    existing = _records(2)
    store.append(existing)

    batch = _records(2, offset=10) + [existing[0]]
    with pytest.raises(StorageError):
        store.append(batch)

    assert store.count() == 2
    assert [r.id for r in store.scan_all()] == [r.id for r in existing]


def test_in_memory_rejects_non_records():
    store = InMemoryDocVectorStore()
    with pytest.raises(StorageError):
        store.append(_records(1) + ["not a record"])
    assert store.count() == 0


def test_chroma_storage_failure_is_wrapped():
    store = ChromaDocVectorStore(collection_name=f"test_{uuid.uuid4().hex}")

    class BrokenCollection:
        def get(self, **kwargs):
            raise RuntimeError("disk full")

    store.collection = BrokenCollection()
    with pytest.raises(StorageError):
        store.scan_all()
    with pytest.raises(StorageError):
        store.append(_records(1))


def test_record_is_immutable():
    rec = _records(1)[0]
    with pytest.raises(ValueError):
        rec.embedding[0] = 42.0
    with pytest.raises(AttributeError):
        rec.text = "changed"


def test_record_rejects_empty_vector():
    with pytest.raises(ValueError):
        DocRecord.create("a", "b", [])


def test_reachable_store_passes_connection_check(store):
    assert store.test_connection() is True


def test_chroma_connection_check_fails_when_collection_is_unusable():
    store = ChromaDocVectorStore(collection_name=f"test_{uuid.uuid4().hex}")

    class DeadCollection:
        def count(self):
            raise RuntimeError("connection refused")

    store.collection = DeadCollection()
    assert store.test_connection() is False
