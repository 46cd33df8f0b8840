# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: test_openai_embedding_provider.py
# -----------------------------------------------------------------------------
from types import SimpleNamespace

import httpx
import openai
import pytest
from openai import AzureOpenAI, OpenAI

from config.Config import Config
from embedding.EmbeddingProvider import EmbeddingProvider, OpenAIEmbeddingProvider
from utility.errors import EmbeddingProviderError, ProviderRateLimited

EMBEDDINGS_URL = "https://api.openai.com/v1/embeddings"


class FakeEmbeddingsAPI:
    def __init__(self, outcome):
        self.outcome = outcome
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def _provider(outcome) -> tuple[OpenAIEmbeddingProvider, FakeEmbeddingsAPI]:
    api = FakeEmbeddingsAPI(outcome)
    client = SimpleNamespace(embeddings=api)
    cfg = Config(openai_api_key="sk-test", openai_embed_model="text-embedding-3-small")
    return OpenAIEmbeddingProvider(cfg, client=client), api


def test_returns_vectors_in_input_order():
    resp = SimpleNamespace(
        data=[
            SimpleNamespace(index=1, embedding=[0.0, 1.0]),
            SimpleNamespace(index=0, embedding=[1.0, 0.0]),
        ]
    )
    provider, api = _provider(resp)

    vectors = provider.embed_many(["first", "second"])

    assert vectors == [[1.0, 0.0], [0.0, 1.0]]
    assert api.requests == [{"model": "text-embedding-3-small", "input": ["first", "second"]}]


def test_empty_input_skips_the_request():
    provider, api = _provider(SimpleNamespace(data=[]))
    assert provider.embed_many([]) == []
    assert api.requests == []


def test_rate_limit_becomes_provider_rate_limited():
    response = httpx.Response(
        429,
        request=httpx.Request("POST", EMBEDDINGS_URL),
        headers={"retry-after": "3"},
    )
    err = openai.RateLimitError("Rate limit reached", response=response, body=None)
    provider, _ = _provider(err)

    with pytest.raises(ProviderRateLimited) as exc_info:
        provider.embed_many(["x"])

    assert exc_info.value.retry_after == 3.0
    assert exc_info.value.__cause__ is err


def test_other_openai_errors_become_provider_error():
    err = openai.APIConnectionError(request=httpx.Request("POST", EMBEDDINGS_URL))
    provider, _ = _provider(err)

    with pytest.raises(EmbeddingProviderError) as exc_info:
        provider.embed_many(["x"])

    assert not isinstance(exc_info.value, ProviderRateLimited)


def test_sdk_retries_are_disabled():
    provider = OpenAIEmbeddingProvider(Config(openai_api_key="sk-test"))
    assert isinstance(provider.client, OpenAI)
    assert provider.client.max_retries == 0
    assert isinstance(provider, EmbeddingProvider)


def test_azure_endpoint_selects_azure_client():
    cfg = Config(
        openai_api_key="azure-key",
        openai_embed_model="my-embeddings-deployment",
        openai_azure_endpoint="https://example.openai.azure.com",
    )
    provider = OpenAIEmbeddingProvider(cfg)

    assert isinstance(provider.client, AzureOpenAI)
    assert provider.client.max_retries == 0
    assert provider.model == "my-embeddings-deployment"
