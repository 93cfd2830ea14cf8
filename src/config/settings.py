"""Pydantic Settings for the document backend.

All environment variables use the BIPV_ prefix.
Example: BIPV_PORT=8080, BIPV_LOG_LEVEL=debug
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ApiSettings(BaseSettings):
    """Backend configuration validated from environment variables."""

    # Service
    app_name: str = "BIPV Document Backend"
    version: str = "1.0.0"
    port: int = Field(default=8080, ge=1, le=65535)

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    # Document ledger
    seed_ledger: bool = False  # Write the seed documents at startup

    # Error envelopes
    expose_error_details: bool = False  # Put exception type in 500 payloads

    model_config = {"env_prefix": "BIPV_"}

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level
