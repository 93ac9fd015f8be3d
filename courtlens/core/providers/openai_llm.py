"""OpenAI LLM provider — GPT-4o / GPT-4o-mini implementation."""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI

from courtlens.config import Settings
from courtlens.core.protocols import LLMResponse, Message
from courtlens.core.registry import register_provider

logger = logging.getLogger(__name__)


class OpenAILLMProvider:
    """OpenAI chat completion provider."""

    def __init__(self, settings: Settings) -> None:
        self._client = AsyncOpenAI(api_key=settings.openai_api_key)
        self._default_model = settings.llm_model
        self._fast_model = settings.llm_model_fast

    @staticmethod
    def _to_openai_messages(messages: list[Message]) -> list[dict[str, Any]]:
        """Convert protocol Messages to OpenAI format."""
        return [{"role": msg.role, "content": msg.content} for msg in messages]

    async def complete(
        self,
        messages: list[Message],
        *,
        model: str | None = None,
        temperature: float = 0.0,
        max_tokens: int = 1024,
        response_format: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> LLMResponse:
        """Generate a chat completion.

        ``fast=True`` in kwargs selects the fast model when no explicit
        model is given; summaries and explanations are short.
        """
        target_model = model or (self._fast_model if kwargs.get("fast") else self._default_model)

        params: dict[str, Any] = {
            "model": target_model,
            "messages": self._to_openai_messages(messages),
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if response_format:
            params["response_format"] = response_format

        response = await self._client.chat.completions.create(**params)
        choice = response.choices[0]

        return LLMResponse(
            content=choice.message.content or "",
            model=response.model,
            usage={
                "prompt_tokens": response.usage.prompt_tokens if response.usage else 0,
                "completion_tokens": response.usage.completion_tokens if response.usage else 0,
            },
            finish_reason=choice.finish_reason or "stop",
            raw=response.model_dump(),
        )


# Self-register on import
register_provider("openai", OpenAILLMProvider)
