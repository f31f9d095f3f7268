from __future__ import annotations

import logging
from typing import Optional

from openai import AsyncOpenAI

from ..config import LlmSettings, get_settings
from ..domain.errors import ProviderError
from .base import PlanRequest
from .prompts import SYSTEM_PROMPT, render_plan_prompt

logger = logging.getLogger(__name__)


class OpenAIPlanProvider:
    """Asks an OpenAI chat model for the day entries of a plan.

    The raw message content is returned untouched; parsing and validation of
    the JSON belong to the plan builder.
    """

    def __init__(self, settings: Optional[LlmSettings] = None, *, client: Optional[AsyncOpenAI] = None) -> None:
        self.settings = settings or get_settings().llm
        self._client = client

    def _ensure_client(self) -> AsyncOpenAI:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise ProviderError(f"OpenAI is not configured. Missing: {missing}")
        self._client = AsyncOpenAI(
            api_key=self.settings.api_key,
            base_url=self.settings.base_url,
            organization=self.settings.organization,
            project=self.settings.project,
            timeout=self.settings.timeout_seconds,
        )
        return self._client

    async def generate(self, request: PlanRequest) -> str:
        client = self._ensure_client()
        prompt = render_plan_prompt(
            exam_name=request.exam_name,
            exam_date=request.exam_date.isoformat(),
            day_count=request.day_count,
            syllabus=request.syllabus,
        )
        logger.debug("Requesting %d plan days from model %s", request.day_count, self.settings.model)
        completion = await client.chat.completions.create(
            model=self.settings.model,
            temperature=0.4,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
        return completion.choices[0].message.content or ""
