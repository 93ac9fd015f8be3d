"""Case lookup service — the single entry point for case status queries.

Wires validation → seeding → derivation → assembly:

    resolve_case(query)
        ├── QueryValidator.classify()  → LookupFailure (stop here)
        └── CaseGenerator.generate()   → LookupSuccess(record)

This is where a live court integration would sit. A production version
would scrape the court's case-status page (headless browser behind
residential proxies, with a CAPTCHA-solving service for sites that need
one), extract the page into a CaseRecord with an LLM, and retry
SERVICE_UNAVAILABLE outcomes with backoff. The simulation keeps the same
outcome contract so the UI can exercise every state.

All external dependencies injected via constructor. No state is shared
between calls; each call seeds its own generator stream.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from functools import lru_cache

from courtlens.config import Settings, get_settings
from courtlens.core.errors import LookupResult, LookupSuccess
from courtlens.core.validation import QueryValidator
from courtlens.mock.factory import CaseGenerator, GeneratorConfig
from courtlens.models.schemas import CaseQuery, CaseRecord

logger = logging.getLogger(__name__)


class CaseLookupService:
    """Resolves CaseQuery → LookupResult. Safe to call concurrently."""

    def __init__(
        self,
        generator: CaseGenerator,
        validator: QueryValidator,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._generator = generator
        self._validator = validator
        self._today = today

    @classmethod
    def from_settings(cls, settings: Settings) -> CaseLookupService:
        """Build a service configured from the app Settings."""
        return cls(
            generator=CaseGenerator(config=GeneratorConfig.from_settings(settings)),
            validator=QueryValidator(
                max_case_number_digits=settings.max_case_number_digits,
                retry_after_seconds=settings.service_retry_after_seconds,
            ),
        )

    @property
    def generator(self) -> CaseGenerator:
        return self._generator

    def resolve_case(self, query: CaseQuery) -> LookupResult:
        """Classify the query and, if it passes, generate its record.

        Returns:
            LookupSuccess with the full record, or LookupFailure with the
            error kind and user-facing message. Never a partial record.
        """
        failure = self._validator.classify(query, today=self._today())
        if failure is not None:
            logger.info(
                "Case lookup failed: kind=%s case=%s/%s/%s",
                failure.kind,
                query.case_type,
                query.case_number,
                query.filing_year,
            )
            return failure

        return LookupSuccess(record=self._generator.generate(query))

    def fetch_case(self, query: CaseQuery) -> CaseRecord:
        """Like ``resolve_case`` but raises ``CaseLookupError`` on failure."""
        return self.resolve_case(query).unwrap()


@lru_cache
def get_case_lookup_service() -> CaseLookupService:
    """Get the singleton lookup service built from current settings."""
    return CaseLookupService.from_settings(get_settings())
