from __future__ import annotations

import logging
from typing import Any, Optional

from openai import AsyncOpenAI

from resume_check.ai.types import Completion
from resume_check.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class OpenAIProvider:
    provider = "openai"

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Any | None = None,
    ):
        self._model = model
        key = (api_key or "").strip()
        if client is not None:
            self._client = client
        elif key:
            self._client = AsyncOpenAI(api_key=key, base_url=base_url, max_retries=0)
        else:
            logger.warning("openai_api_key_missing model=%s; analysis requests will fail", model)
            self._client = None

    async def generate(self, prompt: str) -> Completion:
        if self._client is None:
            raise UpstreamError("OPENAI_API_KEY is missing", provider=self.provider)

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            raise UpstreamError(f"chat.completions.create failed: {exc}", provider=self.provider) from exc

        if response is None or not response.choices:
            return Completion.empty()
        return Completion(text=response.choices[0].message.content)
