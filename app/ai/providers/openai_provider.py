from __future__ import annotations

import logging
from typing import Optional, Sequence

from openai import AsyncOpenAI, OpenAIError

from app.ai.types import ChatMessage, LLMProviderError

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """Chat completions against any OpenAI-compatible endpoint (OpenAI, OpenRouter)."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        timeout_s: float = 90.0,
        max_retries: int = 2,
        temperature: float = 0.2,
    ):
        self._temperature = temperature
        key = (api_key or "").strip()
        if not key:
            raise LLMProviderError("LLM provider API key is missing.", code="llm_disabled")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=max_retries,
        )

    async def complete(self, messages: Sequence[ChatMessage], *, model: str) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=payload,
                temperature=self._temperature,
            )
        except OpenAIError as exc:
            logger.warning("llm_completion_failed model=%s: %s", model, exc)
            raise LLMProviderError(f"LLM request failed: {exc}", code="llm_exception") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise LLMProviderError("LLM returned an empty response.", code="empty_response")
        return str(content)
