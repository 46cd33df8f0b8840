# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-03
# Description: EmbeddingCache
# -----------------------------------------------------------------------------
import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, List, Optional, Tuple

from utility.logging_utils import get_class_logger


class EmbeddingCache:
    """
    Process-lifetime map from exact text to its embedding vector.

    Bounded by `max_entries` (least recently used entry is evicted first) and,
    when `ttl_seconds` > 0, by age. All reads and writes go through one lock,
    so concurrent first-writes of the same key cannot corrupt the mapping.
    """

    def __init__(
        self,
        *,
        max_entries: int = 10_000,
        ttl_seconds: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
        logger: logging.Logger | None = None,
    ):
        if max_entries <= 0:
            raise ValueError(f"max_entries ({max_entries}) must be > 0")
        if ttl_seconds < 0:
            raise ValueError(f"ttl_seconds ({ttl_seconds}) must be >= 0")

        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, Tuple[float, ...]]]" = OrderedDict()
        self._lock = threading.Lock()
        self.logger = logger or get_class_logger(self.__class__)

        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, text: str) -> Optional[List[float]]:
        with self._lock:
            entry = self._entries.get(text)
            if entry is None:
                self.misses += 1
                return None

            stored_at, vector = entry
            if self._expired(stored_at):
                del self._entries[text]
                self.misses += 1
                return None

            self._entries.move_to_end(text)
            self.hits += 1
            return list(vector)

    def put(self, text: str, vector: List[float]) -> None:
        # stored as a tuple so callers cannot mutate the cached value
        frozen = tuple(float(x) for x in vector)
        with self._lock:
            self._entries[text] = (self._clock(), frozen)
            self._entries.move_to_end(text)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                self.evictions += 1
                self.logger.debug("Evicted cache entry (chars=%d, size=%d)", len(evicted), len(self._entries))

    def stats(self) -> dict:
        with self._lock:
            return {
                "entries": len(self._entries),
                "max_entries": self.max_entries,
                "ttl_seconds": self.ttl_seconds,
                "hits": self.hits,
                "misses": self.misses,
                "evictions": self.evictions,
            }

    def __contains__(self, text: object) -> bool:
        with self._lock:
            entry = self._entries.get(text)  # type: ignore[arg-type]
            return entry is not None and not self._expired(entry[0])

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _expired(self, stored_at: float) -> bool:
        return self.ttl_seconds > 0 and (self._clock() - stored_at) >= self.ttl_seconds
