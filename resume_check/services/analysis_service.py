from __future__ import annotations

import asyncio
import logging
import time

from resume_check.ai.types import AIClient
from resume_check.core.errors import (
    NO_JOB_DESCRIPTION,
    NO_READABLE_TEXT,
    NO_RESUME,
    UpstreamError,
    ValidationError,
)
from resume_check.parsing.models import Upload
from resume_check.parsing.pdf import extract_resume_text
from resume_check.prompts import build_analysis_prompt
from resume_check.schemas.analysis import AnalysisResponse

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """Validate, extract, prompt, call the model. One instance per process."""

    def __init__(self, ai_client: AIClient):
        self._ai_client = ai_client

    async def analyze(self, upload: Upload | None, job_description: str | None) -> AnalysisResponse:
        if upload is None:
            raise ValidationError(NO_RESUME)
        if not (job_description or "").strip():
            raise ValidationError(NO_JOB_DESCRIPTION)

        extracted = await asyncio.to_thread(extract_resume_text, upload)
        if extracted.is_empty:
            raise ValidationError(NO_READABLE_TEXT)

        prompt = build_analysis_prompt(job_description, extracted.text)

        provider = self._ai_client.provider
        started = time.perf_counter()
        logger.info("ai_request_start provider=%s prompt_len=%s", provider, len(prompt))
        completion = await self._ai_client.generate(prompt)
        if not completion.has_text:
            raise UpstreamError("response contained no text", provider=provider)

        logger.info(
            "ai_response_received provider=%s latency_ms=%s chars=%s",
            provider,
            int((time.perf_counter() - started) * 1000),
            len(completion.text),
        )
        return AnalysisResponse(analysis=completion.text)
