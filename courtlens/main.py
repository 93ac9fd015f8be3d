"""FastAPI application factory.

Builds the FastAPI app with middleware, routes, and lifespan events.
Every mode serves the same routes; APP_MODE only decides whether AI
insights come from the mock provider or a live LLM:
    - mock       → Simulated cases, canned insights (no API keys)
    - sandbox    → Simulated cases, live LLM with sandbox keys
    - production → Simulated cases, live LLM with production keys

Called by: Uvicorn (``uvicorn courtlens.main:app``)
Depends on: config.py, environment.py, routes/*, middleware.py
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from courtlens import __version__
from courtlens.api.middleware import register_middleware
from courtlens.config import get_settings
from courtlens.core.environment import validate_environment

_settings = get_settings()
_log_level = getattr(logging, _settings.log_level.upper(), logging.INFO)

logging.basicConfig(level=_log_level, format="%(levelname)s %(name)s: %(message)s")

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if not _settings.is_production
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(_log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown events.

    Validates the environment configuration and logs the active mode.
    """
    validate_environment()
    settings = get_settings()
    logger.info(
        "app_startup",
        env=settings.app_env,
        mode=settings.app_mode,
        llm_provider=settings.effective_llm_provider,
        case_schema_variant=settings.case_schema_variant,
        hearing_date_anchor=settings.hearing_date_anchor,
    )
    yield
    logger.info("app_shutdown")


def _register_routes(app: FastAPI) -> None:
    from courtlens.api.routes import cases, health, insights

    app.include_router(health.router)      # Root-level routes (/health)
    app.include_router(health.api_router)  # /api/v1/environment
    app.include_router(cases.router)
    app.add_exception_handler(RequestValidationError, cases.lookup_validation_error_handler)
    app.include_router(insights.router)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="CourtLens",
        description="Court case status lookup with AI case insights",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware (request IDs, logging, headers, errors)
    register_middleware(app)

    _register_routes(app)

    if settings.is_mock:
        logger.info("🎭 Mock mode: insights come from canned fixtures. No API keys needed.")

    return app


app = create_app()
