# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Description: DocVectorStore
# -----------------------------------------------------------------------------

from typing import List, Protocol, Sequence, runtime_checkable

from vectorstore.DocRecord import DocRecord


@runtime_checkable
class DocVectorStore(Protocol):
    """
    Append-only record collection used by the retrieval pipeline.

    append() stores every record of the call or none of them (StorageError).
    scan_all() returns every stored record in insertion order.
    test_connection() reports whether the backend is reachable (health checks).
    """

    def append(self, records: Sequence[DocRecord]) -> int:
        ...

    def scan_all(self) -> List[DocRecord]:
        ...

    def count(self) -> int:
        ...

    def test_connection(self) -> bool:
        ...
