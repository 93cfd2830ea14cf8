"""FastAPI application entry point.

Startup: configure logging from settings, optionally seed the document ledger.
Every response, successful or not, is a response envelope.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.config.settings import ApiSettings
from src.logging_config import configure_logging
from src.middleware.error_handler import register_error_handlers
from src.middleware.request_id import RequestIdMiddleware
from src.routers.documents import create_documents_router
from src.routers.health import create_health_router
from src.services.document_service import DocumentService

logger = logging.getLogger(__name__)


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or ApiSettings()
    document_service = DocumentService()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, json_logs=settings.json_logs)
        logger.info("Starting %s on port %d", settings.app_name, settings.port)
        if settings.seed_ledger:
            document_service.init_ledger()
        yield
        logger.info("%s shut down", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.document_service = document_service

    register_error_handlers(app, expose_details=settings.expose_error_details)
    app.add_middleware(
        RequestIdMiddleware, expose_details=settings.expose_error_details
    )
    app.include_router(create_health_router(settings))
    app.include_router(create_documents_router(document_service=document_service))

    return app


app = create_app()
