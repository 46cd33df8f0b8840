# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-02
# Description: errors.py
# -----------------------------------------------------------------------------
from typing import Optional


class DocChatError(Exception):
    """Base class for every error raised by the DocChat pipeline."""


class UnsupportedFormat(DocChatError):
    """The extractor has no reader for this file type. Ingestion skips the file."""

    def __init__(self, filename: str, extension: str):
        self.filename = filename
        self.extension = extension
        super().__init__(f"Unsupported file format '{extension or '<none>'}' for '{filename}'")


class ExtractionError(DocChatError):
    """The file type is supported but its text could not be read."""


class EmbeddingProviderError(DocChatError):
    """Non rate-limit failure from the embedding provider. Never retried."""


class ProviderRateLimited(EmbeddingProviderError):
    """
    Rate-limit signal from the embedding provider.
    Only the embedding gateway handles this; it retries with backoff.
    """

    def __init__(self, message: str = "embedding provider rate limited", retry_after: Optional[float] = None):
        self.retry_after = retry_after
        super().__init__(message)


class RateLimitExceeded(DocChatError):
    """Retries were exhausted while the provider kept signalling a rate limit."""

    def __init__(self, attempts: int, total_delay: float):
        self.attempts = attempts
        self.total_delay = total_delay
        super().__init__(
            f"Embedding provider still rate limited after {attempts} attempts "
            f"({total_delay:.1f}s total backoff)"
        )


class StorageError(DocChatError):
    """Bulk insert or scan against the vector store failed."""


class DimensionMismatchError(ValueError):
    """Query and record vectors differ in length."""

    def __init__(self, expected: int, actual: int, record_id: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.record_id = record_id
        where = f" (record {record_id})" if record_id else ""
        super().__init__(f"Embedding dimension mismatch: expected {expected}, got {actual}{where}")


class ChatProviderError(DocChatError):
    """The chat-completions call failed or returned something unusable."""
