# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-11
# Description: api/routers/errors.py
# -----------------------------------------------------------------------------
from fastapi import HTTPException

from utility.errors import ChatProviderError, DimensionMismatchError, EmbeddingProviderError, RateLimitExceeded


def to_http_exception(action: str, e: Exception) -> HTTPException:
    """Map a pipeline failure to the HTTP status the API reports for it."""
    if isinstance(e, RateLimitExceeded):
        status = 503
    elif isinstance(e, (EmbeddingProviderError, ChatProviderError)):
        status = 502
    elif isinstance(e, DimensionMismatchError):
        # stored vectors and the embedding model disagree: a server-side fault
        status = 500
    elif isinstance(e, ValueError):
        status = 400
    else:
        status = 500
    return HTTPException(status_code=status, detail=f"{action} failed: {e}")
