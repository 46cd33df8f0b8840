# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Any, Dict

from pydantic import BaseModel, Field

class HealthResponse(BaseModel):
    status: str
    message: str

class DeepHealthResponse(BaseModel):
    status: str  # ok | degraded
    results: Dict[str, bool]
    records: int = 0
    embedding_cache: Dict[str, Any] = Field(default_factory=dict)
