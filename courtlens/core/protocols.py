"""Provider protocols — abstract interface for the language model collaborator.

The case summarizer and order explainer talk to an LLM only through this
Protocol. Business logic imports the protocol, never a concrete provider.
Swap providers by changing one env var (LLM_PROVIDER).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# ─── Data Structures ──────────────────────────────────────────────────────────


@dataclass
class Message:
    """A single message in a conversation."""

    role: str  # "system" | "user" | "assistant"
    content: str


@dataclass
class LLMResponse:
    """Response from an LLM completion."""

    content: str
    model: str
    usage: dict[str, int] = field(default_factory=dict)  # prompt_tokens, completion_tokens
    finish_reason: str = "stop"
    raw: dict[str, Any] = field(default_factory=dict)  # Full provider response for debugging


# ─── Protocols ─────────────────────────────────────────────────────────────────


@runtime_checkable
class LLMProvider(Protocol):
    """Abstract interface for language model completions.

    Implementations: OpenAI GPT, AWS Bedrock (Claude), mock.
    """

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
        """Generate a completion from the model."""
        ...
