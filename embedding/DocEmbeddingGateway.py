# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-03
# Updated: 2026-10-12
# Description: DocEmbeddingGateway
# -----------------------------------------------------------------------------
import logging
import math
import time
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from chunking.DocSegment import DocSegment
from embedding.EmbeddingCache import EmbeddingCache
from embedding.EmbeddingProvider import EmbeddingProvider
from utility.errors import EmbeddingProviderError, ProviderRateLimited, RateLimitExceeded
from utility.logging_utils import get_class_logger


class DocEmbeddingGateway:
    """
    Single entry point for text -> vector.

      - exact-text cache lookup before any provider call
      - one provider call per batch for the distinct cache misses
      - bounded retry loop on rate limits: attempt n waits base * 2**n seconds
      - other provider errors fail at once as EmbeddingProviderError
    """

    def __init__(
        self,
        provider: EmbeddingProvider,
        *,
        cache: EmbeddingCache | None = None,
        batch_size: int = 5,
        max_retry_attempts: int = 5,
        backoff_base_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger | None = None,
    ):
        if batch_size <= 0:
            raise ValueError(f"batch_size ({batch_size}) must be > 0")
        if max_retry_attempts <= 0:
            raise ValueError(f"max_retry_attempts ({max_retry_attempts}) must be > 0")
        if backoff_base_seconds < 0:
            raise ValueError(f"backoff_base_seconds ({backoff_base_seconds}) must be >= 0")

        self.provider = provider
        self.cache = cache if cache is not None else EmbeddingCache()
        self.batch_size = batch_size
        self.max_retry_attempts = max_retry_attempts
        self.backoff_base_seconds = backoff_base_seconds
        self._sleep = sleep
        self.logger = logger or get_class_logger(self.__class__)

        # Fixed by the first provider response; every later vector must match
        self.dimension: Optional[int] = None

    def backoff_delay(self, attempt: int) -> float:
        """Delay after the 0-based `attempt` was rate limited."""
        return self.backoff_base_seconds * (2 ** attempt)

    def embed(self, text: str) -> List[float]:
        return self.embed_batch([text])[0]

    def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        """
        Embed `texts` preserving input order. Duplicates and cached texts are
        never sent to the provider.
        """
        results: List[Optional[List[float]]] = [None] * len(texts)
        missing: Dict[str, List[int]] = {}

        for i, text in enumerate(texts):
            cached = self.cache.get(text)
            if cached is not None:
                results[i] = cached
            else:
                missing.setdefault(text, []).append(i)

        if missing:
            distinct = list(missing)
            vectors = self._call_with_backoff(distinct)
            for text, vector in zip(distinct, vectors):
                self.cache.put(text, vector)
                for i in missing[text]:
                    results[i] = list(vector)

        self.logger.debug(
            "embed_batch: texts=%d cache_hits=%d provider_texts=%d",
            len(texts),
            len(texts) - sum(len(ix) for ix in missing.values()),
            len(missing),
        )
        return results  # type: ignore[return-value]

    def iter_batches(
        self, segments: Iterable[DocSegment]
    ) -> Iterator[Tuple[List[DocSegment], List[List[float]]]]:
        """
        Yield (segments, vectors) one batch of `batch_size` at a time. The next
        batch is only embedded once the caller asks for it, so callers persist
        each batch before more vectors are held in memory.
        """
        items = list(segments)
        total_batches = math.ceil(len(items) / self.batch_size) if items else 0
        self.logger.info("Embedding %d segments (batch=%d, batches=%d)", len(items), self.batch_size, total_batches)

        for batch_no, offset in enumerate(range(0, len(items), self.batch_size), start=1):
            batch = items[offset:offset + self.batch_size]
            vectors = self.embed_batch([s.text for s in batch])
            self.logger.debug("Batch %d/%d embedded (%d segments)", batch_no, total_batches, len(batch))
            yield batch, vectors

    def _call_with_backoff(self, texts: List[str]) -> List[List[float]]:
        total_delay = 0.0

        for attempt in range(self.max_retry_attempts):
            try:
                vectors = self.provider.embed_many(texts)
            except ProviderRateLimited as e:
                if attempt + 1 >= self.max_retry_attempts:
                    self.logger.error(
                        "Rate limited on final attempt %d/%d: %s", attempt + 1, self.max_retry_attempts, e
                    )
                    break
                delay = self.backoff_delay(attempt)
                self.logger.warning(
                    "Rate limited (attempt %d/%d); backing off %.1fs",
                    attempt + 1,
                    self.max_retry_attempts,
                    delay,
                )
                self._sleep(delay)
                total_delay += delay
                continue
            except EmbeddingProviderError:
                raise
            except Exception as e:
                self.logger.error("Embedding provider failed: %s", e, exc_info=True)
                raise EmbeddingProviderError(f"Embedding provider failed: {e}") from e

            return self._validate(texts, vectors)

        raise RateLimitExceeded(attempts=self.max_retry_attempts, total_delay=total_delay)

    def _validate(self, texts: List[str], vectors: List[List[float]]) -> List[List[float]]:
        if len(vectors) != len(texts):
            raise EmbeddingProviderError(
                f"Provider returned {len(vectors)} vectors for {len(texts)} texts"
            )

        for vector in vectors:
            dim = len(vector)
            if dim == 0:
                raise EmbeddingProviderError("Provider returned an empty vector")
            if self.dimension is None:
                self.dimension = dim
                self.logger.info("Embedding dimension fixed at %d", dim)
            elif dim != self.dimension:
                raise EmbeddingProviderError(
                    f"Provider returned a {dim}-d vector; corpus dimension is {self.dimension}"
                )

        return vectors
