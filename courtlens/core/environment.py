"""environment.py — Centralized environment mode manager.

Reads APP_MODE from settings and provides helpers for runtime tier
detection, startup validation, and environment metadata.

Provider key requirements:
    openai     → OPENAI_API_KEY env var
    bedrock    → AWS credentials (IAM role, env vars, or ~/.aws/credentials)
    mock       → (none)

Mode overview:
    mock       → Simulated lookups, canned AI insights.
    sandbox    → Simulated lookups, real LLM provider; missing keys warn.
    production → Simulated lookups, real LLM provider; missing keys fail.

Called by: main.py (startup), middleware.py (headers), routes/health.py
Depends on: config.py (Settings)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from courtlens import __version__
from courtlens.config import get_settings

logger = logging.getLogger(__name__)

# ─── Valid Modes ──────────────────────────────────────────────────────────────

VALID_MODES = frozenset({"mock", "sandbox", "production"})

MODE_MOCK = "mock"
MODE_SANDBOX = "sandbox"
MODE_PRODUCTION = "production"


# ─── Environment Info ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EnvironmentInfo:
    """Immutable snapshot of the current environment configuration.

    Used in health responses, middleware headers, and the frontend
    environment badge.
    """

    mode: str                  # "mock" | "sandbox" | "production"
    app_env: str               # "development" | "staging" | "production"
    version: str
    llm_provider: str          # provider actually in use
    case_schema_variant: str   # "basic" | "extended"
    features: dict[str, bool]  # Feature flags derived from mode


def get_environment_info() -> EnvironmentInfo:
    """Build an EnvironmentInfo snapshot from current settings."""
    settings = get_settings()

    features = {
        "simulated_cases": True,
        "mock_insights": settings.effective_llm_provider == "mock",
        "live_insights": settings.effective_llm_provider != "mock",
        "debug_tools": settings.app_mode != MODE_PRODUCTION,
    }

    return EnvironmentInfo(
        mode=settings.app_mode,
        app_env=settings.app_env,
        version=__version__,
        llm_provider=settings.effective_llm_provider,
        case_schema_variant=settings.case_schema_variant,
        features=features,
    )


# ─── Startup Validation ──────────────────────────────────────────────────────


def _missing_provider_keys(settings: Any) -> list[tuple[str, str]]:
    """Return (key_name, reason) pairs for credentials the active LLM provider lacks."""
    missing: list[tuple[str, str]] = []
    provider = settings.effective_llm_provider

    if provider == "openai" and not settings.openai_api_key:
        missing.append(("OPENAI_API_KEY", "Needed because LLM_PROVIDER=openai."))
    elif provider == "bedrock":
        # boto3 auto-discovers creds; check if something is available
        try:
            import boto3

            session = boto3.Session(region_name=settings.aws_region)
            if session.get_credentials() is None:
                missing.append((
                    "AWS_CREDENTIALS",
                    "Bedrock requires AWS creds (env vars, ~/.aws/credentials, or IAM role).",
                ))
        except Exception:
            missing.append(("AWS_CREDENTIALS", "Could not verify AWS credentials for Bedrock."))

    return missing


def _is_valid_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_environment() -> None:
    """Validate environment configuration on startup.

    Checks:
        - APP_MODE is one of the valid modes.
        - ALLOWED_ORIGINS / APP_BASE_URL are well-formed.
        - The active LLM provider is known and has its credentials
          (warning in sandbox, error in production).

    Called by: main.py ``lifespan()`` on app startup.

    Raises:
        ValueError: If APP_MODE or LLM_PROVIDER is not recognized.
        RuntimeError: If origins are malformed, or production is missing keys.
    """
    settings = get_settings()

    if settings.app_mode not in VALID_MODES:
        raise ValueError(
            f"Invalid APP_MODE='{settings.app_mode}'. "
            f"Must be one of: {sorted(VALID_MODES)}"
        )

    known_providers = {"mock", "openai", "bedrock"}
    if settings.llm_provider not in known_providers:
        raise ValueError(
            f"Invalid LLM_PROVIDER='{settings.llm_provider}'. "
            f"Must be one of: {sorted(known_providers)}"
        )

    allowed_origins = settings.allowed_origins_list
    if "*" in allowed_origins:
        if settings.app_mode == MODE_PRODUCTION:
            raise RuntimeError("ALLOWED_ORIGINS cannot contain '*' in production.")
        logger.warning("ALLOWED_ORIGINS contains '*'. This is unsafe outside local development.")

    invalid_origins = [
        origin for origin in allowed_origins if origin != "*" and not _is_valid_http_url(origin)
    ]
    if invalid_origins:
        raise RuntimeError(f"ALLOWED_ORIGINS has invalid URL(s): {', '.join(invalid_origins)}")

    if not _is_valid_http_url(settings.normalized_app_base_url):
        raise RuntimeError("APP_BASE_URL must be a full http(s) URL (example: https://app.example.com).")

    logger.info(
        "Environment initialized: mode=%s, env=%s, llm=%s",
        settings.app_mode,
        settings.app_env,
        settings.effective_llm_provider,
    )

    if settings.app_mode == MODE_MOCK:
        logger.info("🎭 MOCK MODE — Simulated cases, canned AI insights. No API keys needed.")
        return

    missing = _missing_provider_keys(settings)

    if settings.app_mode == MODE_SANDBOX:
        logger.info("🧪 SANDBOX MODE — Simulated cases, live AI insights.")
        for key_name, reason in missing:
            logger.warning("%s — %s Consider APP_MODE=mock for frontend-only dev.", key_name, reason)
        return

    logger.info("🚀 PRODUCTION MODE — All providers must be configured.")
    if missing:
        names = ", ".join(key_name for key_name, _ in missing)
        logger.error("Production mode requires these env vars: %s", names)
        raise RuntimeError(f"Production mode requires these env vars: {names}")


def to_dict(info: EnvironmentInfo) -> dict[str, Any]:
    """Serialize EnvironmentInfo to a JSON-safe dict."""
    return {
        "mode": info.mode,
        "app_env": info.app_env,
        "version": info.version,
        "llm_provider": info.llm_provider,
        "case_schema_variant": info.case_schema_variant,
        "features": info.features,
    }
