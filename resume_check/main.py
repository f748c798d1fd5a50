import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import sentry_sdk
import uvicorn

from resume_check import __version__
from resume_check.ai.factory import get_ai_client
from resume_check.ai.types import AIClient
from resume_check.api.analyze import router as analyze_router
from resume_check.api.health import router as health_router
from resume_check.core.config import Settings, settings as default_settings
from resume_check.core.cors import install_cors
from resume_check.core.errors import INTERNAL_ERROR, AnalysisError, InternalError, UpstreamError
from resume_check.core.lifespan import lifespan
from resume_check.core.limits import install_request_size_limit
from resume_check.services.analysis_service import ResumeAnalyzer

logger = logging.getLogger(__name__)


async def _analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        logger.error("ai_request_failed path=%s error=%s", request.url.path, exc, exc_info=exc.__cause__)
    elif isinstance(exc, InternalError):
        logger.error("server_error path=%s", request.url.path, exc_info=exc.__cause__)
    else:
        logger.info("request_rejected path=%s status=%s message=%s", request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_malformed path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "Malformed request"})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("server_error path=%s", request.url.path)
    return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR})


def create_app(settings: Settings | None = None, ai_client: AIClient | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Resume Check API", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.analyzer = ResumeAnalyzer(ai_client or get_ai_client(settings))

    install_request_size_limit(app, settings)
    install_cors(app, settings)
    app.add_exception_handler(AnalysisError, _analysis_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health_router, tags=["Health"])
    app.include_router(analyze_router, tags=["Analysis"])
    return app


logging.basicConfig(level=default_settings.log_level, format="%(levelname)s %(name)s: %(message)s")
if default_settings.sentry_dsn:
    sentry_sdk.init(dsn=default_settings.sentry_dsn)

app = create_app()


def run() -> None:
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
