"""Tests for application configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from courtlens.config import Settings, get_settings


def test_default_settings():
    """Settings should have sensible defaults."""
    settings = Settings(_env_file=None)
    assert settings.app_mode == "mock"
    assert settings.app_env == "development"
    assert settings.is_production is False
    assert settings.llm_provider == "mock"
    assert settings.case_schema_variant == "extended"
    assert settings.seed_strategy == "number_and_year"
    assert settings.hearing_date_anchor == "call_time"
    assert settings.order_date_anchor == "filing_date"
    assert settings.max_case_number_digits == 7
    assert settings.simulated_latency_ms == 0


def test_production_detection():
    """is_production should be True when app_env is 'production'."""
    settings = Settings(_env_file=None, app_env="production")
    assert settings.is_production is True


def test_mock_mode_forces_mock_llm():
    """Mock mode should ignore LLM_PROVIDER."""
    settings = Settings(_env_file=None, app_mode="mock", llm_provider="openai")
    assert settings.is_mock is True
    assert settings.effective_llm_provider == "mock"


def test_sandbox_mode_uses_configured_llm():
    settings = Settings(_env_file=None, app_mode="sandbox", llm_provider="bedrock")
    assert settings.is_sandbox is True
    assert settings.effective_llm_provider == "bedrock"


def test_allowed_origins_list_parsing():
    """ALLOWED_ORIGINS should parse into a trimmed list."""
    settings = Settings(
        _env_file=None,
        allowed_origins="https://app.example.com, https://admin.example.com ",
        app_base_url="https://app.example.com/",
    )
    assert settings.allowed_origins_list == [
        "https://app.example.com",
        "https://admin.example.com",
    ]
    assert settings.normalized_app_base_url == "https://app.example.com"


def test_allowed_origins_fallback_to_app_base_url():
    """When ALLOWED_ORIGINS is empty, fallback to APP_BASE_URL."""
    settings = Settings(
        _env_file=None,
        allowed_origins="",
        app_base_url="https://app.example.com",
    )
    assert settings.allowed_origins_list == ["https://app.example.com"]


def test_simulation_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("CASE_SCHEMA_VARIANT", "basic")
    monkeypatch.setenv("HEARING_DATE_ANCHOR", "filing_date")
    monkeypatch.setenv("SEED_STRATEGY", "number_only")

    settings = Settings(_env_file=None)

    assert settings.case_schema_variant == "basic"
    assert settings.hearing_date_anchor == "filing_date"
    assert settings.seed_strategy == "number_only"


def test_invalid_variant_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, case_schema_variant="full")


def test_negative_latency_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, simulated_latency_ms=-1)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
