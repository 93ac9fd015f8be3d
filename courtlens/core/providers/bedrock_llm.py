"""AWS Bedrock LLM Provider implementation."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from courtlens.config import Settings
from courtlens.core.protocols import LLMResponse, Message
from courtlens.core.registry import register_provider

logger = logging.getLogger(__name__)


class BedrockLLMProvider:
    """LLM provider using AWS Bedrock Converse API (Claude 3.5 Sonnet)."""

    def __init__(self, settings: Settings) -> None:
        self.client = boto3.client("bedrock-runtime", region_name=settings.aws_region)
        self.model_id = settings.bedrock_llm_model_id

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
        """Generate a completion using Bedrock Converse API.

        Converse has no JSON mode; ``response_format`` is ignored and the
        prompts themselves ask for JSON.
        """
        target_model = model or self.model_id

        # Converse expects system prompts in a separate field, not in messages
        system_prompts = []
        conversation_messages = []
        for msg in messages:
            if msg.role == "system":
                system_prompts.append({"text": msg.content})
            else:
                conversation_messages.append({
                    "role": msg.role,
                    "content": [{"text": msg.content}],
                })

        try:
            # boto3 is synchronous; keep the event loop free
            response = await asyncio.to_thread(
                self.client.converse,
                modelId=target_model,
                messages=conversation_messages,
                system=system_prompts,
                inferenceConfig={
                    "temperature": temperature,
                    "maxTokens": max_tokens,
                },
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Bedrock API error: %s", e, exc_info=True)
            raise

        output_message = response["output"]["message"]
        content_text = output_message["content"][0]["text"]
        usage = response.get("usage", {})

        return LLMResponse(
            content=content_text,
            model=target_model,
            usage={
                "prompt_tokens": usage.get("inputTokens", 0),
                "completion_tokens": usage.get("outputTokens", 0),
            },
            finish_reason=response.get("stopReason", "stop"),
            raw=response,
        )


register_provider("bedrock", BedrockLLMProvider)
