"""Preflight readiness checks for sandbox/production environments.

Run these checks before deploying or promoting an environment to catch
configuration and provider regressions early.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from courtlens.config import get_settings
from courtlens.core.case_lookup import CaseLookupService
from courtlens.core.environment import validate_environment
from courtlens.core.protocols import Message
from courtlens.core.registry import get_provider_registry
from courtlens.models.schemas import CaseQuery

# A well-formed query that must always resolve to a record.
PROBE_QUERY = CaseQuery(case_type="W.P.(C)", case_number="5", filing_year="2022")


@dataclass(frozen=True)
class CheckResult:
    """A single preflight check outcome."""

    name: str
    ok: bool
    detail: str


@dataclass(frozen=True)
class PreflightReport:
    """Aggregated preflight report."""

    ok: bool
    mode: str
    timestamp_utc: str
    checks: list[CheckResult]

    def as_dict(self) -> dict:
        return {
            "ok": self.ok,
            "mode": self.mode,
            "timestamp_utc": self.timestamp_utc,
            "checks": [
                {"name": item.name, "ok": item.ok, "detail": item.detail}
                for item in self.checks
            ],
        }


def _pass(name: str, detail: str) -> CheckResult:
    return CheckResult(name=name, ok=True, detail=detail)


def _fail(name: str, detail: str) -> CheckResult:
    return CheckResult(name=name, ok=False, detail=detail)


def check_environment(expected_mode: str | None = None) -> CheckResult:
    """Validate env and optionally enforce the expected APP_MODE."""
    settings = get_settings()
    try:
        validate_environment()
    except Exception as exc:
        return _fail("environment", f"validation failed: {exc}")

    if expected_mode and settings.app_mode != expected_mode:
        return _fail(
            "environment",
            f"APP_MODE={settings.app_mode!r} but expected {expected_mode!r}",
        )

    return _pass(
        "environment",
        f"validated (mode={settings.app_mode}, env={settings.app_env})",
    )


def check_simulation() -> CheckResult:
    """Resolve a known-good query twice and confirm the records match."""
    try:
        service = CaseLookupService.from_settings(get_settings())
        first = service.fetch_case(PROBE_QUERY)
        second = service.fetch_case(PROBE_QUERY)
    except Exception as exc:
        return _fail("simulation", f"probe lookup failed: {exc}")

    if first.model_dump(exclude={"next_hearing_date", "last_updated"}) != second.model_dump(
        exclude={"next_hearing_date", "last_updated"}
    ):
        return _fail("simulation", "probe lookup is not deterministic")

    return _pass(
        "simulation",
        f"probe ok ({first.parties.petitioner} vs. {first.parties.respondent}, "
        f"{len(first.orders)} orders)",
    )


async def check_providers(*, probe_llm: bool = False) -> CheckResult:
    """Verify provider instantiation and an optional live call."""
    try:
        llm = get_provider_registry().get_llm()

        if probe_llm:
            _ = await llm.complete(
                messages=[
                    Message(
                        role="user",
                        content="Reply with exactly: OK",
                    )
                ],
                temperature=0.0,
                max_tokens=16,
            )

        return _pass("providers", f"llm={llm.__class__.__name__}")
    except Exception as exc:
        return _fail("providers", f"provider check failed: {exc}")


async def run_preflight(
    *,
    expected_mode: str | None = None,
    probe_llm: bool = False,
) -> PreflightReport:
    """Run all preflight checks and return a consolidated report."""
    checks: list[CheckResult] = []

    env_check = check_environment(expected_mode=expected_mode)
    checks.append(env_check)

    # If env validation itself fails, the remaining checks are likely noisy.
    if env_check.ok:
        checks.append(check_simulation())
        checks.append(await check_providers(probe_llm=probe_llm))

    mode = get_settings().app_mode
    ok = all(item.ok for item in checks)
    return PreflightReport(
        ok=ok,
        mode=mode,
        timestamp_utc=datetime.now(UTC).isoformat(),
        checks=checks,
    )
