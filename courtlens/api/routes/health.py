"""Health and environment endpoints.

Endpoints:
    GET /health              → Liveness plus the active mode and LLM provider
    GET /api/v1/environment  → Full environment snapshot for the UI badge

Depends on: core/environment.py
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter

from courtlens.api.deps import ConfigDep
from courtlens.core.environment import get_environment_info, to_dict
from courtlens.models.schemas import HealthResponse

logger = structlog.get_logger()
router = APIRouter(tags=["health"])
api_router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: ConfigDep) -> HealthResponse:
    """Service health check. The simulation has no backing services to probe."""
    info = get_environment_info()
    return HealthResponse(
        status="healthy",
        version=info.version,
        mode=settings.app_mode,
        llm_provider=info.llm_provider,
        environment=to_dict(info),
    )


@api_router.get("/environment")
async def get_environment() -> dict[str, Any]:
    """Return the current environment snapshot."""
    return to_dict(get_environment_info())
