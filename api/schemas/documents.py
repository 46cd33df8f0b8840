# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-10
# Description: documents.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class UploadedFileResult(BaseModel):
    filename: str
    status: str  # ingested | chunked | skipped | failed
    segments: int = 0
    records: int = 0
    chunks: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class UploadDocumentsResponse(BaseModel):
    requested: int
    ingested: int
    chunked: int = 0
    skipped: int
    failed: int
    records: int
    files: List[UploadedFileResult] = Field(default_factory=list)
