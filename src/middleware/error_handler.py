"""Global error hierarchy and FastAPI exception handlers.

All backend-specific errors extend ApiError. The exception handlers catch these
errors (plus request validation errors, Starlette HTTP exceptions and unhandled
exceptions) and answer with the standard envelope:
{ status: false, message, additionalPayload }.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.models.responses import Response

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ApiError(Exception):
    """Base error for all backend-specific errors."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class NotFoundError(ApiError):
    status_code = 404
    message = "Resource not found"


class ConflictError(ApiError):
    """Resource already exists."""

    status_code = 409
    message = "Resource already exists"


class ValidationError(ApiError):
    """Payload validation failures; details carry the offending fields."""

    status_code = 422
    message = "Validation error"


# ---------------------------------------------------------------------------
# Envelope rendering
# ---------------------------------------------------------------------------


def envelope_response(
    status_code: int,
    *,
    status: bool,
    message: str | None = None,
    payload: Any = None,
) -> JSONResponse:
    """Build a JSON response whose body is a response envelope."""
    return JSONResponse(
        status_code=status_code,
        content=Response.of(status, message, payload).to_wire(),
    )


def unhandled_error_response(exc: Exception, *, expose_details: bool = False) -> JSONResponse:
    """Log an unexpected exception and render the generic 500 envelope."""
    logger.error(
        "Unhandled exception: %s",
        exc,
        exc_info=exc,
        extra={"http_status": 500, "response_status": False},
    )
    payload = {"type": exc.__class__.__name__} if expose_details else None
    return envelope_response(500, status=False, message=ApiError.message, payload=payload)


async def _api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        "Request failed: %s",
        exc.message,
        extra={
            "http_status": exc.status_code,
            "response_status": False,
            "error_reason": exc.__class__.__name__,
        },
    )
    return envelope_response(
        exc.status_code,
        status=False,
        message=exc.message,
        payload=exc.details or None,
    )


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    field_errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return await _api_error_handler(request, ValidationError(fields=field_errors))


async def _http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing errors (404, 405) and explicit HTTPExceptions."""
    response = envelope_response(exc.status_code, status=False, message=str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def _make_unhandled_error_handler(expose_details: bool):
    async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
        return unhandled_error_response(exc, expose_details=expose_details)

    return _unhandled_error_handler


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI, *, expose_details: bool = False) -> None:
    """Wire up all exception handlers on the FastAPI application.

    The catch-all only fires for exceptions that escape every middleware;
    ``RequestIdMiddleware`` renders the 500 envelope itself so the response
    keeps its request ID.
    """
    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _make_unhandled_error_handler(expose_details))
