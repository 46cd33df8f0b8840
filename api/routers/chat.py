# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-11
# Description: chat.py
# -----------------------------------------------------------------------------
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_chat_service
from api.routers.errors import to_http_exception
from api.schemas.chat import ChatRequest, ChatResponse
from api.schemas.query import QueryHit
from services.DocChatService import DocChatService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

@router.post("", response_model=ChatResponse)
def post_chat(
        req: ChatRequest,
        svc: DocChatService = Depends(get_chat_service),
) -> ChatResponse:
    question = (req.question or "").strip()
    if not question:
        raise HTTPException(status_code=400, detail="question must not be empty")

    logger.info("POST /chat (start) question_len=%d n_results=%d", len(question), req.n_results)

    try:
        out: Dict[str, Any] = svc.ask(
            question=question,
            n_results=req.n_results,
            temperature=req.temperature,
            max_tokens=req.max_tokens,
        )
    except Exception as e:
        logger.exception("post_chat failed: %s", e)
        raise to_http_exception("chat", e)

    sources = [QueryHit(**s) for s in out.get("sources", []) or []]

    logger.info("POST /chat (done) answer_len=%d sources=%d", len(out.get("answer", "") or ""), len(sources))

    return ChatResponse(
        question=out["question"],
        answer=out["answer"],
        n_results=req.n_results,
        no_relevant_results=out.get("no_relevant_results", False),
        sources=sources,
        model=out.get("model"),
    )
