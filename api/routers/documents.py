# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-11
# Description: documents.py
# -----------------------------------------------------------------------------
import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

import settings
from api.dependencies import get_ingest_service
from api.routers.errors import to_http_exception
from api.schemas.documents import UploadDocumentsResponse, UploadedFileResult
from services.DocIngestService import (
    DocIngestService,
    STATUS_CHUNKED,
    STATUS_FAILED,
    STATUS_INGESTED,
    STATUS_SKIPPED,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/upload", response_model=UploadDocumentsResponse)
async def upload_documents(
    files: List[UploadFile] = File(...),
    svc: DocIngestService = Depends(get_ingest_service),
) -> UploadDocumentsResponse:
    if not files:
        raise HTTPException(status_code=400, detail="No files were uploaded.")
    if len(files) > settings.UPLOAD_MAX_FILES:
        raise HTTPException(
            status_code=413,
            detail=f"Too many files: {len(files)} (limit {settings.UPLOAD_MAX_FILES})",
        )

    logger.info("POST /documents/upload (start) files=%d", len(files))

    limit = settings.UPLOAD_MAX_BYTES
    payload: List[Tuple[str, bytes]] = []
    for f in files:
        filename = (f.filename or "").strip() or "upload.bin"
        try:
            # never buffer more than limit + 1 bytes of one file
            if f.size is not None and f.size > limit:
                data, size = b"", f.size
            else:
                data = await f.read(limit + 1)
                size = len(data)
        finally:
            await f.close()

        if size > limit:
            logger.warning("POST /documents/upload -> 413 filename='%s' bytes>=%d", filename, size)
            raise HTTPException(
                status_code=413,
                detail=f"File '{filename}' exceeds {limit} bytes",
            )
        payload.append((filename, data))

    try:
        # embedding and backoff block, so keep them off the event loop
        report = await run_in_threadpool(
            svc.ingest_files, payload, index=settings.UPLOAD_INDEX_ENABLED
        )
    except Exception as e:
        logger.exception("upload_documents failed: %s", e)
        raise to_http_exception("upload", e)

    resp = UploadDocumentsResponse(
        requested=len(payload),
        ingested=report.count(STATUS_INGESTED),
        chunked=report.count(STATUS_CHUNKED),
        skipped=report.count(STATUS_SKIPPED),
        failed=report.count(STATUS_FAILED),
        records=report.records,
        files=[
            UploadedFileResult(
                filename=r.filename,
                status=r.status,
                segments=r.segments,
                records=r.records,
                chunks=r.chunks,
                error=r.error,
            )
            for r in report.files
        ],
    )
    logger.info(
        "POST /documents/upload (done) ingested=%d chunked=%d skipped=%d failed=%d records=%d",
        resp.ingested, resp.chunked, resp.skipped, resp.failed, resp.records,
    )
    return resp
