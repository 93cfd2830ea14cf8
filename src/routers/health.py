"""Health and readiness endpoints.

- GET /health — service status with name and version
- GET /readiness — 200 once the application has started
"""

from __future__ import annotations

from fastapi import APIRouter

from src.config.settings import ApiSettings
from src.models.responses import Response


def create_health_router(settings: ApiSettings) -> APIRouter:
    """Factory that creates the health router bound to ``settings``."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> dict:
        return Response.ok(
            "healthy",
            {"service": settings.app_name, "version": settings.version},
        ).to_wire()

    @health_router.get("/readiness")
    async def readiness() -> dict:
        return Response.ok("ready").to_wire()

    return health_router
