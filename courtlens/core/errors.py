"""Classified outcomes of a case lookup.

A lookup ends in exactly one of two shapes:

    LookupSuccess(record)                       → a complete CaseRecord
    LookupFailure(kind, message, retry_after)   → one of the ErrorKind values

Callers match on the shape (or check ``.ok``) instead of string-matching
exception messages. ``unwrap()`` is there for call sites that would rather
let a failure propagate as ``CaseLookupError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from courtlens.models.schemas import CaseRecord


class ErrorKind(StrEnum):
    """Why a lookup produced no record."""

    INVALID_INPUT = "INVALID_INPUT"
    CASE_NOT_FOUND = "CASE_NOT_FOUND"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    UNKNOWN_CASE_TYPE = "UNKNOWN_CASE_TYPE"


# Messages surfaced verbatim by the UI.
MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: (
        "Invalid form data. Please ensure all fields are correctly filled."
    ),
    ErrorKind.CASE_NOT_FOUND: (
        "Invalid Case Number. Please check the number and try again. "
        "No record found for this case on the court website."
    ),
    ErrorKind.SERVICE_UNAVAILABLE: (
        "The court website appears to be down or is blocking requests. "
        "Please try again later."
    ),
    ErrorKind.UNKNOWN_CASE_TYPE: (
        "Unrecognized case type. Please choose a case type from the list."
    ),
}


class CaseLookupError(Exception):
    """Raised by ``LookupFailure.unwrap()``; carries the failure it came from."""

    def __init__(self, failure: LookupFailure) -> None:
        self.failure = failure
        self.kind = failure.kind
        super().__init__(failure.message)


@dataclass(frozen=True)
class LookupSuccess:
    record: CaseRecord
    ok: Literal[True] = True

    def unwrap(self) -> CaseRecord:
        return self.record


@dataclass(frozen=True)
class LookupFailure:
    """A classified failure. Never accompanied by a partial record."""

    kind: ErrorKind
    message: str
    retry_after_seconds: int | None = None
    ok: Literal[False] = False

    @classmethod
    def of(
        cls,
        kind: ErrorKind,
        detail: str | None = None,
        *,
        retry_after_seconds: int | None = None,
    ) -> LookupFailure:
        """Build a failure with the standard message, optionally extended by ``detail``."""
        message = MESSAGES[kind] if detail is None else f"{MESSAGES[kind]} {detail}"
        return cls(kind=kind, message=message, retry_after_seconds=retry_after_seconds)

    def unwrap(self) -> CaseRecord:
        raise CaseLookupError(self)


LookupResult = LookupSuccess | LookupFailure
