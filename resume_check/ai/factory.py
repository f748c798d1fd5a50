from resume_check.ai.config import load_ai_config
from resume_check.ai.types import AIClient
from resume_check.core.config import Settings

from resume_check.ai.providers.gemini_provider import GeminiProvider
from resume_check.ai.providers.openai_provider import OpenAIProvider


def get_ai_client(settings: Settings) -> AIClient:
    cfg = load_ai_config(settings)

    if cfg.provider == "gemini":
        return GeminiProvider(model=cfg.model, api_key=cfg.api_key)

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model, api_key=cfg.api_key)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
