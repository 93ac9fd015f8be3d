"""mock_llm.py — Mock LLM provider for running without API calls.

Implements the LLMProvider protocol with canned responses:
    - JSON mode (``response_format`` set) → an order explanation
    - plain mode                          → a case summary

No external API calls, no API keys needed.

Called by: CaseInsightsEngine (via registry) when LLM_PROVIDER=mock or APP_MODE=mock
Depends on: protocols.py (LLMResponse), mock/insights.py (canned insights)
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from courtlens.config import Settings
from courtlens.core.protocols import LLMResponse, Message
from courtlens.core.registry import register_provider
from courtlens.mock.insights import create_mock_case_summary, create_mock_order_explanation

logger = logging.getLogger(__name__)

MOCK_MODEL = "mock-llm-v1"


class MockLLMProvider:
    """Fake LLM that returns canned insights — zero external calls.

    Usage:
        Set LLM_PROVIDER=mock or APP_MODE=mock to activate.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the mock LLM provider.

        Args:
            settings: App settings (not used, but required by registry interface).
        """
        self._settings = settings
        logger.info("🎭 MockLLMProvider initialized — no API calls will be made")

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
        """Return a canned completion based on the last user message.

        Args:
            messages: Conversation messages (system + user).
            model: Ignored — always reports 'mock-llm-v1'.
            temperature: Ignored.
            max_tokens: Ignored.
            response_format: If set, answers with an explanation JSON object.
            **kwargs: Additional args (ignored).

        Returns:
            LLMResponse with canned content.
        """
        user_content = ""
        for msg in reversed(messages):
            if msg.role == "user":
                user_content = msg.content
                break

        logger.debug("MockLLM.complete called: prompt='%s'", user_content[:100])

        # A short pause so loading states are visible in the UI.
        await asyncio.sleep(0.05)

        if response_format:
            content = json.dumps(create_mock_order_explanation(user_content))
        else:
            content = create_mock_case_summary(user_content)

        return LLMResponse(
            content=content,
            model=MOCK_MODEL,
            usage={"prompt_tokens": 100, "completion_tokens": 80},
            finish_reason="stop",
            raw={"mock": True, "prompt_preview": user_content[:50]},
        )


# Self-registering on import, same as the hosted providers.
register_provider("mock", MockLLMProvider)
