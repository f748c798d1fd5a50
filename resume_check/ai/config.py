from dataclasses import dataclass

from resume_check.core.config import Settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None


def load_ai_config(settings: Settings) -> AIConfig:
    if settings.ai_provider == "openai":
        api_key = settings.openai_api_key
    else:
        api_key = settings.gemini_api_key
    return AIConfig(provider=settings.ai_provider, model=settings.ai_model, api_key=api_key)
