# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: conftest.py
# -----------------------------------------------------------------------------

import string
import sys
from io import BytesIO
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import docx
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from embedding.DocEmbeddingGateway import DocEmbeddingGateway  # noqa: E402
from embedding.EmbeddingCache import EmbeddingCache  # noqa: E402


def letter_vector(text: str) -> List[float]:
    """26-d letter-count vector: deterministic and cheap, good enough to rank by."""
    counts = [0.0] * 26
    for ch in text.lower():
        idx = string.ascii_lowercase.find(ch)
        if idx >= 0:
            counts[idx] += 1.0
    return counts


def docx_bytes(*paragraphs: str, table=None) -> bytes:
    """Build a .docx in memory; `table` is a list of rows (lists of cell strings)."""
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if table:
        grid = document.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    buf = BytesIO()
    document.save(buf)
    return buf.getvalue()


class FakeEmbeddingProvider:
    """
    Scripted stand-in for the external embedding service.
    `failures` is consumed one item per call: an exception instance is raised,
    None lets the call succeed.
    """

    def __init__(
        self,
        embed_fn: Callable[[str], List[float]] = letter_vector,
        failures: Optional[List[Optional[Exception]]] = None,
    ):
        self.embed_fn = embed_fn
        self.failures = list(failures or [])
        self.calls: List[List[str]] = []

    def embed_many(self, texts: Sequence[str]) -> List[List[float]]:
        self.calls.append(list(texts))
        if self.failures:
            failure = self.failures.pop(0)
            if failure is not None:
                raise failure
        return [self.embed_fn(t) for t in texts]

    @property
    def texts_sent(self) -> List[str]:
        return [t for call in self.calls for t in call]


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def sleeper() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def gateway(provider, sleeper) -> DocEmbeddingGateway:
    return DocEmbeddingGateway(
        provider,
        cache=EmbeddingCache(max_entries=1000),
        batch_size=5,
        max_retry_attempts=5,
        backoff_base_seconds=1.0,
        sleep=sleeper,
    )
