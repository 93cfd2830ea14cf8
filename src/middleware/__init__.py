"""Middleware package — error hierarchy and request ID."""

from src.middleware.error_handler import (
    ApiError,
    ConflictError,
    NotFoundError,
    ValidationError,
    envelope_response,
    register_error_handlers,
    unhandled_error_response,
)
from src.middleware.request_id import RequestIdMiddleware

__all__ = [
    "ApiError",
    "ConflictError",
    "NotFoundError",
    "RequestIdMiddleware",
    "ValidationError",
    "envelope_response",
    "register_error_handlers",
    "unhandled_error_response",
]
