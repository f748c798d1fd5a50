from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from resume_check.core.config import Settings
from resume_check.core.errors import UploadTooLargeError

logger = logging.getLogger(__name__)

# Room for the job description and multipart boundaries on top of the file.
FORM_OVERHEAD_BYTES = 1024 * 1024


def request_too_large(content_length: str | None, max_upload_bytes: int) -> bool:
    if not content_length:
        return False
    try:
        declared = int(content_length)
    except ValueError:
        return False
    return declared > max_upload_bytes + FORM_OVERHEAD_BYTES


def install_request_size_limit(app: FastAPI, settings: Settings) -> None:
    max_upload_bytes = settings.max_upload_bytes

    # Runs before the multipart body is parsed; bodies over the cap are never read.
    @app.middleware("http")
    async def reject_oversized_requests(request: Request, call_next):
        content_length = request.headers.get("content-length")
        if request_too_large(content_length, max_upload_bytes):
            error = UploadTooLargeError(max_upload_bytes)
            logger.info(
                "request_too_large path=%s content_length=%s max_upload_bytes=%s",
                request.url.path,
                content_length,
                max_upload_bytes,
            )
            return JSONResponse(status_code=error.status_code, content={"message": error.message})
        return await call_next(request)
