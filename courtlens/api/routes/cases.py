"""Case lookup endpoints.

Endpoints:
    GET  /api/v1/case-types    → Case types for the lookup form select
    POST /api/v1/cases/lookup  → Resolve a CaseQuery into a CaseRecord

Called by: Frontend case status form
Depends on: core/case_lookup.py, core/errors.py, mock/fixtures.py
"""

from __future__ import annotations

import asyncio

import structlog
from fastapi import APIRouter, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from courtlens.api.deps import ConfigDep, LookupServiceDep
from courtlens.core.errors import ErrorKind, LookupFailure, LookupSuccess
from courtlens.mock.fixtures import CASE_TYPES
from courtlens.models.schemas import (
    CaseQuery,
    CaseRecord,
    CaseTypeRead,
    ErrorDetail,
    ErrorResponse,
)

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1", tags=["cases"])

LOOKUP_PATH = "/api/v1/cases/lookup"

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.UNKNOWN_CASE_TYPE: 400,
    ErrorKind.CASE_NOT_FOUND: 404,
    ErrorKind.SERVICE_UNAVAILABLE: 503,
}


def failure_response(failure: LookupFailure) -> JSONResponse:
    """Render a LookupFailure as the standard JSON error body."""
    body = ErrorResponse(
        error=ErrorDetail(
            code=str(failure.kind),
            message=failure.message,
            retry_after_seconds=failure.retry_after_seconds,
        )
    )
    headers = {}
    if failure.retry_after_seconds is not None:
        headers["Retry-After"] = str(failure.retry_after_seconds)
    return JSONResponse(
        status_code=STATUS_BY_KIND[failure.kind],
        content=body.model_dump(),
        headers=headers,
    )


async def lookup_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed lookup bodies as INVALID_INPUT; other routes keep FastAPI's default."""
    if request.url.path != LOOKUP_PATH:
        return await request_validation_exception_handler(request, exc)

    logger.info("case_lookup_rejected", errors=len(exc.errors()))
    return failure_response(LookupFailure.of(ErrorKind.INVALID_INPUT))


@router.get("/case-types", response_model=list[CaseTypeRead])
async def list_case_types() -> list[CaseTypeRead]:
    """List recognized case types in display order."""
    return [CaseTypeRead(code=item.code, label=item.label) for item in CASE_TYPES]


@router.post(
    "/cases/lookup",
    response_model=CaseRecord,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def lookup_case(
    query: CaseQuery,
    service: LookupServiceDep,
    settings: ConfigDep,
) -> CaseRecord | JSONResponse:
    """Look up a case's status.

    Args:
        query: Case type, number and filing year as typed into the form.

    Returns:
        The simulated CaseRecord, or a JSON error body whose status code
        reflects the failure kind.
    """
    if settings.simulated_latency_ms > 0:
        await asyncio.sleep(settings.simulated_latency_ms / 1000)

    result = service.resolve_case(query)
    match result:
        case LookupSuccess(record=record):
            logger.info(
                "case_lookup_succeeded",
                case_type=record.case_type,
                case_number=record.case_number,
                filing_year=record.filing_year,
                orders=len(record.orders),
            )
            return record
        case LookupFailure() as failure:
            logger.info(
                "case_lookup_failed",
                kind=str(failure.kind),
                case_type=query.case_type,
                case_number=query.case_number,
            )
            return failure_response(failure)
