"""Query validation and error classification.

Checks run in a fixed order, and the first one that fires wins:

    1. Sentinel case numbers   ("999" → not found, "000" → service down)
    2. Digit patterns          (case number, filing year)
    3. Case type enumeration
    4. No-match rules          (filing year in the future)

Sentinels come first because they are fixtures for exercising UI failure
states; a sentinel must classify the same way whatever else the query holds.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import date

from courtlens.core.errors import ErrorKind, LookupFailure
from courtlens.mock.fixtures import (
    CASE_TYPES,
    SENTINEL_NOT_FOUND,
    SENTINEL_SERVICE_DOWN,
)
from courtlens.models.schemas import CaseQuery

logger = logging.getLogger(__name__)

_FILING_YEAR_PATTERN = re.compile(r"[0-9]{4}")


class QueryValidator:
    """Classifies a CaseQuery before any generation runs.

    Args:
        case_types: Recognized case type codes. Compared case-insensitively.
        max_case_number_digits: Upper bound on case number length.
        retry_after_seconds: Hint attached to SERVICE_UNAVAILABLE failures.
    """

    def __init__(
        self,
        case_types: Iterable[str] = tuple(info.code for info in CASE_TYPES),
        *,
        max_case_number_digits: int = 7,
        retry_after_seconds: int = 30,
    ) -> None:
        self._case_types = frozenset(code.strip().upper() for code in case_types)
        self._case_number_pattern = re.compile(rf"[0-9]{{1,{max_case_number_digits}}}")
        self._max_case_number_digits = max_case_number_digits
        self._retry_after_seconds = retry_after_seconds

    def classify(self, query: CaseQuery, *, today: date | None = None) -> LookupFailure | None:
        """Return the failure this query triggers, or None if it may be generated.

        Args:
            query: The submitted query.
            today: Reference date for the no-match rules. Defaults to ``date.today()``.
        """
        sentinel = self._check_sentinels(query)
        if sentinel is not None:
            return sentinel

        if not self._case_number_pattern.fullmatch(query.case_number):
            return LookupFailure.of(
                ErrorKind.INVALID_INPUT,
                f"Case number must be 1 to {self._max_case_number_digits} digits.",
            )
        if not _FILING_YEAR_PATTERN.fullmatch(query.filing_year):
            return LookupFailure.of(
                ErrorKind.INVALID_INPUT,
                "Filing year must be exactly 4 digits.",
            )

        if query.case_type.strip().upper() not in self._case_types:
            return LookupFailure.of(ErrorKind.UNKNOWN_CASE_TYPE)

        reference = today or date.today()
        if int(query.filing_year) > reference.year:
            logger.info("Filing year %s is in the future; no record can exist", query.filing_year)
            return LookupFailure.of(ErrorKind.CASE_NOT_FOUND)

        return None

    def _check_sentinels(self, query: CaseQuery) -> LookupFailure | None:
        if query.case_number == SENTINEL_NOT_FOUND:
            return LookupFailure.of(ErrorKind.CASE_NOT_FOUND)
        if query.case_number == SENTINEL_SERVICE_DOWN:
            return LookupFailure.of(
                ErrorKind.SERVICE_UNAVAILABLE,
                retry_after_seconds=self._retry_after_seconds,
            )
        return None
