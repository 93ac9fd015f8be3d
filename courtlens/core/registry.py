"""Provider registry — resolves the concrete LLM provider from config.

The registry is the single place where provider implementations are wired.
Business logic calls ``registry.get_llm()`` and gets back a concrete
implementation based on the current config. Swapping providers is a one-line
env var change (e.g., LLM_PROVIDER=openai).

Usage:
    from courtlens.core.registry import get_provider_registry

    registry = get_provider_registry()
    llm = registry.get_llm()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from courtlens.config import get_settings
from courtlens.core.protocols import LLMProvider

logger = logging.getLogger(__name__)

# ─── Provider Factory Map ──────────────────────────────────────────────────────
# Adding a new provider = one entry here (via register_provider) + one
# module in providers/.

_LLM_FACTORIES: dict[str, type] = {}


def register_provider(name: str, cls: type) -> None:
    """Register an LLM provider implementation.

    Called by provider modules on import, or manually in tests.

    Args:
        name: Provider name (e.g., 'openai', 'bedrock', 'mock')
        cls: The provider class implementing LLMProvider
    """
    _LLM_FACTORIES[name] = cls
    logger.info("Registered llm provider: %s", name)


class ProviderRegistry:
    """Singleton registry that resolves and caches provider instances."""

    def __init__(self) -> None:
        self._instances: dict[str, Any] = {}
        self._ensure_providers_loaded()

    def _ensure_providers_loaded(self) -> None:
        """Import provider modules to trigger registration.

        Hosted providers are imported inside try/except so the app still
        starts when their SDK is missing (e.g. boto3 in a frontend dev env).
        """
        try:
            from courtlens.core.providers import openai_llm  # noqa: F401
        except ImportError:
            logger.debug("openai_llm provider not available")
        try:
            from courtlens.core.providers import bedrock_llm  # noqa: F401
        except ImportError:
            logger.debug("bedrock_llm provider not available")

        from courtlens.core.providers import mock_llm  # noqa: F401

    def get_llm(self, override: str | None = None) -> LLMProvider:
        """Get the configured LLM provider (always 'mock' in mock mode)."""
        settings = get_settings()
        name = override or settings.effective_llm_provider

        cache_key = f"llm:{name}"
        if cache_key in self._instances:
            return self._instances[cache_key]

        cls = _LLM_FACTORIES.get(name)
        if cls is None:
            raise ValueError(
                f"Unknown llm provider: '{name}'. Available: {sorted(_LLM_FACTORIES)}"
            )

        instance = cls(settings)
        self._instances[cache_key] = instance
        logger.info("Initialized llm provider: %s", name)
        return instance


@lru_cache
def get_provider_registry() -> ProviderRegistry:
    """Get the singleton provider registry."""
    return ProviderRegistry()
