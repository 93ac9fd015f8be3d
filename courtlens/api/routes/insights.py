"""AI insight endpoints.

Endpoints:
    POST /api/v1/cases/summary   → Plain-language summary of a CaseRecord
    POST /api/v1/orders/explain  → Plain-English explanation of an order's text

Called by: Frontend case result view ("Summarize" / "Explain" buttons)
Depends on: core/insights.py (via deps.InsightsDep)
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from courtlens.api.deps import InsightsDep
from courtlens.core.insights import InsightsUnavailableError
from courtlens.models.schemas import (
    CaseRecord,
    CaseSummaryResponse,
    ErrorDetail,
    ErrorResponse,
    OrderExplainRequest,
    OrderExplanationResponse,
)

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1", tags=["insights"])

INSIGHTS_UNAVAILABLE = "INSIGHTS_UNAVAILABLE"


def _unavailable(exc: InsightsUnavailableError) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=INSIGHTS_UNAVAILABLE, message=str(exc)))
    return JSONResponse(status_code=503, content=body.model_dump())


@router.post(
    "/cases/summary",
    response_model=CaseSummaryResponse,
    responses={503: {"model": ErrorResponse}},
)
async def summarize_case(
    record: CaseRecord,
    engine: InsightsDep,
) -> CaseSummaryResponse | JSONResponse:
    """Summarize a looked-up case for a layperson."""
    try:
        summary = await engine.summarize_case(record)
    except InsightsUnavailableError as exc:
        logger.warning("case_summary_unavailable", error=str(exc))
        return _unavailable(exc)

    return CaseSummaryResponse(summary=summary.summary, model=summary.model)


@router.post(
    "/orders/explain",
    response_model=OrderExplanationResponse,
    responses={503: {"model": ErrorResponse}},
)
async def explain_order(
    body: OrderExplainRequest,
    engine: InsightsDep,
) -> OrderExplanationResponse | JSONResponse:
    """Explain a court order's text in plain English."""
    try:
        explanation = await engine.explain_order(body.order_text)
    except InsightsUnavailableError as exc:
        logger.warning("order_explanation_unavailable", error=str(exc))
        return _unavailable(exc)

    return OrderExplanationResponse(
        summary=explanation.summary,
        key_points=explanation.key_points,
        model=explanation.model,
    )
