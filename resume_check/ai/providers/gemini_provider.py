from __future__ import annotations

import logging
from typing import Any, Optional

from google import genai

from resume_check.ai.types import Completion
from resume_check.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class GeminiProvider:
    provider = "gemini"

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        client: Any | None = None,
    ):
        self._model = model
        key = (api_key or "").strip()
        if client is not None:
            self._client = client
        elif key:
            self._client = genai.Client(api_key=key)
        else:
            logger.warning("gemini_api_key_missing model=%s; analysis requests will fail", model)
            self._client = None

    async def generate(self, prompt: str) -> Completion:
        if self._client is None:
            raise UpstreamError("GOOGLE_GEMINI_API_KEY is missing", provider=self.provider)

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
            )
        except Exception as exc:
            raise UpstreamError(f"generate_content failed: {exc}", provider=self.provider) from exc

        if response is None:
            return Completion.empty()
        return Completion(text=getattr(response, "text", None))
