# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-03
# Description: EmbeddingProvider
# -----------------------------------------------------------------------------
import logging
import time
from typing import List, Optional, Protocol, Sequence, runtime_checkable

import openai
from openai import AzureOpenAI, OpenAI

from config.Config import Config
from utility.errors import EmbeddingProviderError, ProviderRateLimited
from utility.logging_utils import get_class_logger


@runtime_checkable
class EmbeddingProvider(Protocol):
    """
    External embedding service. Implementations raise ProviderRateLimited for
    rate-limit signals and EmbeddingProviderError for everything else.
    """

    def embed_many(self, texts: Sequence[str]) -> List[List[float]]:
        ...


def _retry_after_seconds(err: openai.APIStatusError) -> Optional[float]:
    response = getattr(err, "response", None)
    if response is None:
        return None
    value = response.headers.get("retry-after")
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class OpenAIEmbeddingProvider:
    """
    OpenAI / Azure OpenAI embeddings client.

    The SDK's own retries are disabled (max_retries=0): retry policy belongs
    to DocEmbeddingGateway.
    """

    def __init__(
        self,
        cfg: Config,
        *,
        client: OpenAI | AzureOpenAI | None = None,
        logger: logging.Logger | None = None,
    ):
        self.cfg = cfg
        self.model = cfg.openai_embed_model
        self.logger = logger or get_class_logger(self.__class__)
        self.client = client or self._init_client()
        self.logger.info(
            "OpenAIEmbeddingProvider initialised (model=%s, azure=%s)", self.model, cfg.uses_azure
        )

    def _init_client(self) -> OpenAI | AzureOpenAI:
        if self.cfg.uses_azure:
            # On Azure the model name is the embeddings deployment name
            return AzureOpenAI(
                api_key=self.cfg.openai_api_key,
                azure_endpoint=self.cfg.openai_azure_endpoint,
                api_version=self.cfg.openai_azure_api_version,
                max_retries=0,
            )

        kwargs = {"api_key": self.cfg.openai_api_key, "max_retries": 0}
        if self.cfg.openai_base_url:
            kwargs["base_url"] = self.cfg.openai_base_url
        return OpenAI(**kwargs)

    def embed_many(self, texts: Sequence[str]) -> List[List[float]]:
        if not texts:
            return []

        start = time.time()
        try:
            resp = self.client.embeddings.create(model=self.model, input=list(texts))
        except openai.RateLimitError as e:
            retry_after = _retry_after_seconds(e)
            self.logger.warning("Embedding request rate limited (retry-after=%s): %s", retry_after, e)
            raise ProviderRateLimited(str(e), retry_after=retry_after) from e
        except openai.OpenAIError as e:
            self.logger.error("Embedding request failed: %s", e)
            raise EmbeddingProviderError(f"Embedding request failed: {e}") from e

        data = sorted(resp.data, key=lambda d: d.index)
        elapsed = (time.time() - start) * 1000.0
        self.logger.debug("Embedded %d texts (model=%s, %.1f ms)", len(data), self.model, elapsed)
        return [list(d.embedding) for d in data]
