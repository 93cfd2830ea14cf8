"""Configuration module."""

from src.config.settings import ApiSettings

__all__ = [
    "ApiSettings",
]
