"""Application settings via pydantic-settings.

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  DEVELOPER QUICK-START  — What env vars do I need?
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#  APP_MODE controls the runtime tier:
#
#    mock        → Case lookups are simulated and AI insights use canned
#                  responses.  Perfect for frontend-only development.
#                  Keys needed: NONE
#
#    sandbox     → Case lookups are simulated, AI insights call the
#                  configured LLM provider.  Missing keys only warn.
#                  Keys needed: OPENAI_API_KEY or AWS creds (per LLM_PROVIDER)
#
#    production  → Same as sandbox, but missing provider keys fail startup.
#
# ─── Provider Stack (defaults) ────────────────────────────────────────────────
#
#   Component        Default Provider    Env Var Override       API Key
#   ─────────        ────────────────    ────────────────       ───────
#   LLM              mock                LLM_PROVIDER           depends
#
#   To use OpenAI, set:
#     LLM_PROVIDER=openai
#     OPENAI_API_KEY=sk-...
#
#   To use AWS Bedrock (Claude), set:
#     LLM_PROVIDER=bedrock
#     AWS_REGION=us-east-1   (boto3 discovers credentials itself)
#
# ─── Case Simulation ──────────────────────────────────────────────────────────
#
#   CASE_SCHEMA_VARIANT   basic | extended   (extended adds CNR, judge, etc.)
#   SEED_STRATEGY         number_and_year | number_only
#   HEARING_DATE_ANCHOR   call_time | filing_date
#   ORDER_DATE_ANCHOR     filing_date | call_time
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables.

    The key environment knob is ``APP_MODE`` which selects the runtime tier:

    - **mock**       → Simulated lookups, canned AI insights.
    - **sandbox**    → Simulated lookups, real LLM provider (keys optional).
    - **production** → Simulated lookups, real LLM provider (keys required).

    Called by: Every module that needs configuration (via ``get_settings()``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Environment Mode ─────────────────────────────────────────────────────
    app_mode: str = "mock"

    # App
    app_env: str = "development"
    log_level: str = "INFO"
    # Comma-separated CORS origins.
    allowed_origins: str = "http://localhost:3000"
    app_base_url: str = "http://localhost:3000"

    # ─── LLM ──────────────────────────────────────────────────────────────────
    #   llm_provider: "mock" | "openai" | "bedrock"
    llm_provider: str = "mock"
    openai_api_key: str = ""
    llm_model: str = "gpt-4o"
    llm_model_fast: str = "gpt-4o-mini"

    # AWS credentials are handled by boto3 (env vars, profile, or IAM role).
    aws_region: str = "us-east-1"
    bedrock_llm_model_id: str = "anthropic.claude-3-5-sonnet-20240620-v1:0"

    # ─── Case Simulation ──────────────────────────────────────────────────────
    case_schema_variant: Literal["basic", "extended"] = "extended"
    seed_strategy: Literal["number_and_year", "number_only"] = "number_and_year"
    hearing_date_anchor: Literal["call_time", "filing_date"] = "call_time"
    order_date_anchor: Literal["filing_date", "call_time"] = "filing_date"
    max_case_number_digits: int = Field(default=7, ge=1, le=12)
    court_name: str = "Delhi High Court"
    # Around 500 makes the UI loading skeletons visible.
    simulated_latency_ms: int = Field(default=0, ge=0)
    service_retry_after_seconds: int = Field(default=30, ge=0)

    # ─── Computed Properties ──────────────────────────────────────────────────

    @property
    def is_production(self) -> bool:
        """True when app_env is explicitly set to 'production'."""
        return self.app_env == "production"

    @property
    def is_mock(self) -> bool:
        """True when running in mock mode — AI insights are canned."""
        return self.app_mode == "mock"

    @property
    def is_sandbox(self) -> bool:
        return self.app_mode == "sandbox"

    @property
    def effective_llm_provider(self) -> str:
        """LLM provider actually used; mock mode always forces 'mock'."""
        return "mock" if self.is_mock else self.llm_provider

    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a normalized list."""
        origins = [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]
        if not origins:
            return [self.normalized_app_base_url]
        return origins

    @property
    def normalized_app_base_url(self) -> str:
        """Return APP_BASE_URL without a trailing slash."""
        return self.app_base_url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
