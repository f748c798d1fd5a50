from contextlib import asynccontextmanager
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    settings = app.state.settings
    logger.info(
        "resume_check_startup provider=%s model=%s port=%s allowed_origins=%s",
        settings.ai_provider,
        settings.ai_model,
        settings.port,
        ",".join(settings.cors_allowed_origins),
    )
    yield
    logger.info("resume_check_shutdown")
