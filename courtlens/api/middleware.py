"""Middleware for request context, response headers, and error handling.

Middleware stack (outermost first):
    1. ErrorHandlerMiddleware     → Unhandled exceptions → INTERNAL_ERROR JSON body
    2. ResponseHeadersMiddleware  → X-CourtLens-Env plus browser hardening headers
    3. RequestContextMiddleware   → X-Request-ID, structlog context, request_completed log

Called by: main.py (``register_middleware()``)
Depends on: config.py (Settings), models/schemas.py (ErrorResponse)
"""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from courtlens.config import get_settings
from courtlens.models.schemas import ErrorDetail, ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"
ENV_HEADER = "X-CourtLens-Env"

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}

INTERNAL_ERROR_MESSAGE = "An unknown error occurred. Please try again shortly."


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log it once it completes.

    The ID (client-supplied ``X-Request-ID`` or a fresh UUID) is bound into
    structlog's context vars, so every event a route logs, such as
    ``case_lookup_failed``, carries the same ``request_id``.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.bind_contextvars(request_id=request_id)
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            request_id=request_id,
        )
        return response


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp the runtime mode and the security headers on every response.

    The frontend environment badge reads ``X-CourtLens-Env`` to show whether
    AI insights are canned (mock) or live.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        response = await call_next(request)
        response.headers[ENV_HEADER] = get_settings().app_mode
        response.headers.update(SECURITY_HEADERS)
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn unhandled exceptions into the standard error body with status 500.

    Lookup and insight failures are classified by the routes themselves;
    anything reaching this layer is a bug, logged with its traceback and
    never echoed to the client.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        try:
            return await call_next(request)
        except Exception as exc:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception(
                "unhandled_error",
                error=str(exc),
                request_id=request_id,
                path=request.url.path,
            )
            body = ErrorResponse(
                error=ErrorDetail(code="INTERNAL_ERROR", message=INTERNAL_ERROR_MESSAGE)
            )
            return JSONResponse(
                status_code=500,
                content=body.model_dump(exclude_none=True),
                headers={REQUEST_ID_HEADER: request_id},
            )


def register_middleware(app: FastAPI) -> None:
    """Register all middleware. Starlette wraps in reverse, so the last one added is outermost."""
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(ResponseHeadersMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)
