# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: test_integration_openai.py
# -----------------------------------------------------------------------------
import os

import pytest

from chunking.DocChunker import DocChunker
from config.Config import Config
from embedding.DocEmbeddingGateway import DocEmbeddingGateway
from embedding.EmbeddingProvider import OpenAIEmbeddingProvider
from extractor.DocTextExtractor import DocTextExtractor
from ranking.ScoredRecord import NoRelevantResults
from services.DocIngestService import DocIngestService, STATUS_INGESTED
from services.DocQueryService import DocQueryService
from vectorstore.InMemoryDocVectorStore import InMemoryDocVectorStore

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def cfg():
    if not os.getenv("OPENAI_API_KEY"):
        pytest.skip("OPENAI_API_KEY not set")
    return Config.from_env()


def test_ingest_then_query_against_openai(cfg):
    gateway = DocEmbeddingGateway(OpenAIEmbeddingProvider(cfg=cfg), batch_size=5)
    store = InMemoryDocVectorStore()
    ingest = DocIngestService(
        extractor=DocTextExtractor(),
        chunker=DocChunker(),
        gateway=gateway,
        store=store,
    )

    report = ingest.ingest_files(
        [
            ("cats.txt", b"Cats are small domesticated felines that purr and chase mice."),
            ("rockets.txt", b"Rockets burn propellant to produce thrust and reach orbit."),
        ]
    )
    assert report.count(STATUS_INGESTED) == 2

    result = DocQueryService(gateway=gateway, store=store).retrieve("What animal purrs?", n_results=1)

    assert not isinstance(result, NoRelevantResults)
    assert result[0].record.source_id == "cats.txt"
    assert gateway.dimension == result[0].record.dimension
