# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-11
# Description: query router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_query_service
from api.routers.errors import to_http_exception
from api.schemas.query import QueryRequest, QueryResponse, QueryHit
from ranking.ScoredRecord import NoRelevantResults
from services.DocQueryService import DocQueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("", response_model=QueryResponse)
def post_query(
    req: QueryRequest,
    svc: DocQueryService = Depends(get_query_service),
) -> QueryResponse:
    query_text = (req.query or "").strip()
    if not query_text:
        raise HTTPException(status_code=400, detail="query must not be empty")

    logger.info("POST /query (start) query_len=%d n_results=%d", len(query_text), req.n_results)

    try:
        result = svc.retrieve(query_text, n_results=req.n_results)
    except Exception as e:
        logger.exception("Query failed: %s", e)
        raise to_http_exception("query", e)

    if isinstance(result, NoRelevantResults):
        logger.info("POST /query (done) no relevant results: %s", result.reason)
        return QueryResponse(query=query_text, n_results=req.n_results, no_relevant_results=True)

    hits = [QueryHit(**h) for h in svc.to_hits(result, include_text=req.include_text)]
    logger.info("POST /query (done) hits=%d", len(hits))

    return QueryResponse(
        query=query_text,
        n_results=req.n_results,
        results=hits,
        context=svc.build_context(result),
    )
