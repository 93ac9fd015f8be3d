"""Dependency injection for API routes.

Provides FastAPI dependencies for configuration, the case lookup service,
and the insights engine. Tests override these via ``app.dependency_overrides``.

Called by: All route modules via type aliases (ConfigDep, LookupServiceDep, ...)
Depends on: config.py, core/case_lookup.py, core/insights.py, core/registry.py
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from courtlens.config import Settings, get_settings
from courtlens.core.case_lookup import CaseLookupService, get_case_lookup_service
from courtlens.core.insights import CaseInsightsEngine
from courtlens.core.registry import get_provider_registry

# ─── Settings ──────────────────────────────────────────────────────────────────


def get_config() -> Settings:
    """Return the application config."""
    return get_settings()


ConfigDep = Annotated[Settings, Depends(get_config)]

# ─── Case Lookup ───────────────────────────────────────────────────────────────


def get_lookup_service() -> CaseLookupService:
    """Return the shared, stateless lookup service."""
    return get_case_lookup_service()


LookupServiceDep = Annotated[CaseLookupService, Depends(get_lookup_service)]

# ─── Insights ──────────────────────────────────────────────────────────────────


def get_insights_engine() -> CaseInsightsEngine:
    """Build an insights engine around the configured LLM provider."""
    return CaseInsightsEngine(llm=get_provider_registry().get_llm())


InsightsDep = Annotated[CaseInsightsEngine, Depends(get_insights_engine)]
