# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: query.py
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import Field, BaseModel

class QueryRequest(BaseModel):
    query: str = Field(..., min_length=1)
    n_results: int = Field(5, ge=1, le=50)
    include_text: bool = True

class QueryHit(BaseModel):
    record_id: str
    source_id: str
    score: float
    created_at: Optional[str] = None
    text: Optional[str] = None

class QueryResponse(BaseModel):
    query: str
    n_results: int
    no_relevant_results: bool = False
    results: List[QueryHit] = Field(default_factory=list)
    context: str = ""
