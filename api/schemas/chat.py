# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: api/schemas/chat.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from api.schemas.query import QueryHit


class ChatRequest(BaseModel):
    question: str = Field(..., min_length=1)

    # Retrieval controls (mirror /query)
    n_results: int = Field(5, ge=1, le=50)

    # Model controls; unset means the service defaults
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(None, ge=1, le=4096)


class ChatResponse(BaseModel):
    question: str
    answer: str
    n_results: int
    no_relevant_results: bool = False
    sources: List[QueryHit] = Field(default_factory=list)
    model: Optional[str] = None
