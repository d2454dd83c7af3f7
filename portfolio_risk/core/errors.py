"""JSON error envelopes for the portfolio risk API."""
from typing import Any

import sentry_sdk
import structlog
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = structlog.get_logger()

UNKNOWN_REQUEST_ID = "unknown"


class ErrorResponse(BaseModel):
    error: str
    message: str
    detail: Any = None
    request_id: str = UNKNOWN_REQUEST_ID


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", UNKNOWN_REQUEST_ID)


def _envelope(status_code: int, body: ErrorResponse, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report an unhandled exception to Sentry and answer 500."""
    request_id = _request_id(request)
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
        request_id=request_id,
    )
    sentry_sdk.capture_exception(exc)

    return _envelope(500, ErrorResponse(
        error="internal_server_error",
        message="The risk engine failed to process this request.",
        request_id=request_id,
    ))


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Wrap a raised HTTPException (400 rule violations, 404 lookups) in the envelope."""
    payload = exc.detail if isinstance(exc.detail, dict) else {"message": str(exc.detail), "detail": exc.detail}
    body = ErrorResponse(
        error=payload.get("error", f"http_{exc.status_code}"),
        message=payload.get("message", str(exc.detail)),
        detail=payload.get("detail"),
        request_id=_request_id(request),
    )

    log = logger.error if exc.status_code >= 500 else logger.info
    log("http_error", status=exc.status_code, path=request.url.path, message=body.message)

    return _envelope(exc.status_code, body, dict(exc.headers or {}))
