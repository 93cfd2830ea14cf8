"""Request ID middleware.

Generates (or propagates) a UUID request ID for every incoming request,
stores it in ``request.state.request_id`` and in the logging context, adds an
``X-Request-ID`` response header and logs one access line per request.

Unhandled exceptions are turned into the 500 envelope here, inside the request
context, so that failed responses carry the same header and log fields.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from src.logging_config import request_id_var
from src.middleware.error_handler import unhandled_error_response

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that assigns a unique request ID to each request.

    If the incoming request already carries an ``X-Request-ID`` header the
    provided value is reused; otherwise a new UUID4 is generated.
    """

    def __init__(self, app, expose_details: bool = False) -> None:  # noqa: ANN001
        super().__init__(app)
        self._expose_details = expose_details

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        started = time.perf_counter()

        try:
            try:
                response: Response = await call_next(request)
            except Exception as exc:
                response = unhandled_error_response(
                    exc, expose_details=self._expose_details
                )
            logger.info(
                "%s %s -> %d",
                request.method,
                request.url.path,
                response.status_code,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "http_status": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        return response
