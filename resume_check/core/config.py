from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_AI_MODELS = {
    "gemini": "gemini-1.5-flash-latest",
    "openai": "gpt-4o-mini",
}
SUPPORTED_AI_PROVIDERS = set(DEFAULT_AI_MODELS)


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    ai_provider: str
    ai_model: str
    gemini_api_key: str | None
    openai_api_key: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    max_upload_bytes: int
    log_level: str
    sentry_dsn: str | None


def load_settings() -> Settings:
    ai_provider = (_get_env("AI_PROVIDER", "gemini") or "gemini").strip().lower()
    if ai_provider not in SUPPORTED_AI_PROVIDERS:
        raise RuntimeError(
            f"AI_PROVIDER must be one of: {', '.join(sorted(SUPPORTED_AI_PROVIDERS))}."
        )

    return Settings(
        host=_get_env("HOST", "0.0.0.0") or "0.0.0.0",
        port=_get_env_int("PORT", 5000),
        ai_provider=ai_provider,
        ai_model=(_get_env("AI_MODEL") or "").strip() or DEFAULT_AI_MODELS[ai_provider],
        gemini_api_key=_get_env("GOOGLE_GEMINI_API_KEY") or _get_env("GEMINI_API_KEY"),
        openai_api_key=_get_env("OPENAI_API_KEY"),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "https://ai-resume-check.netlify.app",
                "http://localhost:5173",
            ],
        ),
        cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", True),
        max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
    )


settings = load_settings()
