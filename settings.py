# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-01
# Updated: 2026-10-14
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

# Pick up DOCCHAT_* values from .env the same way Config does
load_dotenv(find_dotenv(usecwd=True), override=True)


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_optional_float(name: str) -> Optional[float]:
    v = _env(name, "")
    if v == "":
        return None
    return _env_float(name, 0.0)


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Chunking
# -----------------------------------------------------------------------------
CHUNK_MAX_LEN = _env_int("DOCCHAT_CHUNK_MAX_LEN", 1000)
CHUNK_OVERLAP = _env_int("DOCCHAT_CHUNK_OVERLAP", 200)


# -----------------------------------------------------------------------------
# Embedding gateway
# -----------------------------------------------------------------------------
EMBED_BATCH_SIZE = _env_int("DOCCHAT_EMBED_BATCH_SIZE", 5)
EMBED_MAX_RETRY_ATTEMPTS = _env_int("DOCCHAT_EMBED_MAX_RETRY_ATTEMPTS", 5)
EMBED_BACKOFF_BASE_SECONDS = _env_float("DOCCHAT_EMBED_BACKOFF_BASE_SECONDS", 1.0)

# 0 disables the TTL; entries then only leave the cache through LRU eviction
EMBED_CACHE_MAX_ENTRIES = _env_int("DOCCHAT_EMBED_CACHE_MAX_ENTRIES", 10_000)
EMBED_CACHE_TTL_SECONDS = _env_float("DOCCHAT_EMBED_CACHE_TTL_SECONDS", 0.0)


# -----------------------------------------------------------------------------
# Vector storage
# -----------------------------------------------------------------------------
# "memory" or "chroma"
VECTOR_BACKEND = _env("DOCCHAT_VECTOR_BACKEND", "memory").lower()
VECTOR_COLLECTION = _env("DOCCHAT_VECTOR_COLLECTION", "doc_chunks")


# -----------------------------------------------------------------------------
# Retrieval / answer defaults
# -----------------------------------------------------------------------------
DEFAULT_TOP_K = _env_int("DOCCHAT_DEFAULT_TOP_K", 5)

# Unset means every scored record is eligible
MIN_RELEVANCE_SCORE = _env_optional_float("DOCCHAT_MIN_RELEVANCE_SCORE")

MAX_CONTEXT_CHARS = _env_int("DOCCHAT_MAX_CONTEXT_CHARS", 12000)

CHAT_TEMPERATURE = _env_float("DOCCHAT_CHAT_TEMPERATURE", 0.5)
CHAT_MAX_TOKENS = _env_int("DOCCHAT_CHAT_MAX_TOKENS", 512)


# -----------------------------------------------------------------------------
# Upload limits
# -----------------------------------------------------------------------------
UPLOAD_MAX_FILES = _env_int("DOCCHAT_UPLOAD_MAX_FILES", 10)
UPLOAD_MAX_BYTES = _env_int("DOCCHAT_UPLOAD_MAX_BYTES", 100 * 1024 * 1024)

# Extract and index uploads; when off, /documents/upload only reports the chunk counts
UPLOAD_INDEX_ENABLED = _env_bool("DOCCHAT_UPLOAD_INDEX_ENABLED", True)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if CHUNK_MAX_LEN <= 0:
    raise RuntimeError("DOCCHAT_CHUNK_MAX_LEN must be > 0")

if not 0 <= CHUNK_OVERLAP < CHUNK_MAX_LEN:
    raise RuntimeError(
        f"DOCCHAT_CHUNK_OVERLAP ({CHUNK_OVERLAP}) must be >= 0 and < DOCCHAT_CHUNK_MAX_LEN ({CHUNK_MAX_LEN})"
    )

if EMBED_BATCH_SIZE <= 0:
    raise RuntimeError("DOCCHAT_EMBED_BATCH_SIZE must be > 0")

if EMBED_MAX_RETRY_ATTEMPTS <= 0:
    raise RuntimeError("DOCCHAT_EMBED_MAX_RETRY_ATTEMPTS must be > 0")

if VECTOR_BACKEND not in ("memory", "chroma"):
    raise RuntimeError(f"DOCCHAT_VECTOR_BACKEND must be 'memory' or 'chroma', got {VECTOR_BACKEND!r}")
