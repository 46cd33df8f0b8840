# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-11
# Description: health.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_embedding_cache, get_vector_store
from api.schemas.health import DeepHealthResponse, HealthResponse
from embedding.EmbeddingCache import EmbeddingCache
from vectorstore.DocVectorStore import DocVectorStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message="Server is running for documents chat!")


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    response: Response,
    store: DocVectorStore = Depends(get_vector_store),
    cache: EmbeddingCache = Depends(get_embedding_cache),
) -> DeepHealthResponse:
    logger.info("GET /health/deep (start) store=%s", type(store).__name__)

    store_ok = store.test_connection()
    records = store.count() if store_ok else 0
    status = "ok" if store_ok else "degraded"
    if not store_ok:
        response.status_code = 503

    logger.info("GET /health/deep (done) status=%s records=%d", status, records)
    return DeepHealthResponse(
        status=status,
        results={"vector_store": store_ok},
        records=records,
        embedding_cache=cache.stats(),
    )
