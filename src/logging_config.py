"""Structured JSON logging configuration.

Every entry carries timestamp, level, logger, message and request_id. The
request ID comes from the record itself when passed via ``extra`` and falls
back to the ID of the request currently being served.

SECURITY: values that look like credentials are redacted from messages.
"""

from __future__ import annotations

import json
import logging
import re
from contextvars import ContextVar
from datetime import datetime, timezone

# Request ID of the request being handled in the current context
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|secret|password|token|credential|authorization)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)

# Optional fields copied from the record when present
_EXTRA_FIELDS = (
    "method",
    "path",
    "http_status",
    "duration_ms",
    "response_status",
)


class JsonFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
            "request_id": getattr(record, "request_id", None) or request_id_var.get(),
        }

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if hasattr(record, "error_reason"):
            entry["error_reason"] = self._sanitize(str(getattr(record, "error_reason")))

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    json_logs:
        Emit JSON entries; plain text otherwise (handy for local development).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    root.addHandler(handler)
