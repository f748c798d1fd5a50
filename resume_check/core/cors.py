from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_check.core.config import Settings

logger = logging.getLogger(__name__)

CORS_REJECTED_MESSAGE = "Not allowed by CORS"


def origin_allowed(origin: str | None, allowed_origins: tuple[str, ...]) -> bool:
    if not origin:
        return True
    return origin.rstrip("/") in allowed_origins


def install_cors(app: FastAPI, settings: Settings) -> None:
    allowed = tuple(origin.rstrip("/") for origin in settings.cors_allowed_origins)

    # Runs inside CORSMiddleware: preflight requests never reach this check.
    @app.middleware("http")
    async def reject_unknown_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        logger.debug("request_origin origin=%s path=%s", origin, request.url.path)
        if not origin_allowed(origin, allowed):
            logger.warning("cors_blocked origin=%s path=%s", origin, request.url.path)
            return JSONResponse(status_code=403, content={"message": CORS_REJECTED_MESSAGE})
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
