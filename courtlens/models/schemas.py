"""Pydantic v2 schemas for case records and API request/response bodies."""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

# ─── Display Dates ─────────────────────────────────────────────────────────────
# Court listings render dates as dd-MMM-yyyy (07-Mar-2024). Month names are
# spelled out here because strftime("%b") follows the process locale.

_MONTH_ABBRS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_BY_ABBR = {abbr.lower(): index + 1 for index, abbr in enumerate(_MONTH_ABBRS)}


def format_display_date(value: dt.date) -> str:
    """Format a date as ``dd-MMM-yyyy``."""
    return f"{value.day:02d}-{_MONTH_ABBRS[value.month - 1]}-{value.year:04d}"


def parse_display_date(value: str) -> dt.date:
    """Parse ``dd-MMM-yyyy`` back into a date.

    Raises:
        ValueError: If the string is not a valid ``dd-MMM-yyyy`` date.
    """
    try:
        day, month, year = value.strip().split("-")
        return dt.date(int(year), _MONTH_BY_ABBR[month.lower()], int(day))
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Expected a dd-MMM-yyyy date, got {value!r}") from exc


def _coerce_display_date(value: Any) -> Any:
    # ISO strings and date objects are left for pydantic to handle.
    if isinstance(value, str) and len(value.strip()) == 11 and value.strip()[2:3] == "-":
        return parse_display_date(value)
    return value


DisplayDate = Annotated[
    dt.date,
    BeforeValidator(_coerce_display_date),
    PlainSerializer(format_display_date, return_type=str),
]


# ─── Case Query ────────────────────────────────────────────────────────────────


class CaseQuery(BaseModel):
    """What the lookup form submits.

    Only whitespace is normalized here. Digit patterns are checked by
    ``core.validation`` so that sentinel case numbers are classified before
    any pattern rule applies.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    case_type: str
    case_number: str
    filing_year: str


# ─── Case Record ───────────────────────────────────────────────────────────────


class Parties(BaseModel):
    model_config = ConfigDict(frozen=True)

    petitioner: str
    respondent: str


class CaseOrder(BaseModel):
    """One docketed event. ``title`` and ``type`` are set by the extended variant."""

    model_config = ConfigDict(frozen=True)

    date: DisplayDate
    description: str
    pdf_url: str = "#"
    title: str | None = None
    type: Literal["order", "notice"] | None = None


class CaseRecord(BaseModel):
    """A complete simulated case. Built once per lookup and never mutated.

    Fields after ``orders`` are only populated by the extended variant.
    """

    model_config = ConfigDict(frozen=True)

    case_type: str
    case_number: str
    filing_year: str
    parties: Parties
    filing_date: DisplayDate
    next_hearing_date: DisplayDate
    orders: tuple[CaseOrder, ...] = Field(..., min_length=1)

    case_id: str | None = None
    cnr_number: str | None = None
    status: Literal["Pending", "Disposed"] | None = None
    court: str | None = None
    judge: str | None = None
    subject: str | None = None
    filing_advocate: str | None = None
    dealing_assistant: str | None = None
    registration_date: DisplayDate | None = None
    last_updated: DisplayDate | None = None


# ─── Case Types ────────────────────────────────────────────────────────────────


class CaseTypeRead(BaseModel):
    code: str
    label: str


# ─── Insights ──────────────────────────────────────────────────────────────────


class CaseSummaryResponse(BaseModel):
    summary: str
    model: str = "unknown"


class OrderExplainRequest(BaseModel):
    order_text: str = Field(..., min_length=1, max_length=8000)


class OrderExplanationResponse(BaseModel):
    summary: str
    key_points: list[str]
    model: str = "unknown"


# ─── Health ────────────────────────────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = "0.1.0"
    mode: str
    llm_provider: str
    environment: dict[str, Any] | None = None


# ─── Errors ────────────────────────────────────────────────────────────────────


class ErrorDetail(BaseModel):
    code: str
    message: str
    retry_after_seconds: int | None = None


class ErrorResponse(BaseModel):
    error: ErrorDetail
