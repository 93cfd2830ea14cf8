"""Shared test fixtures for the backend test suite."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.config.settings import ApiSettings
from src.main import create_app


# ---------------------------------------------------------------------------
# Keep the host environment out of ApiSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_bipv_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("BIPV_APP_NAME", "BIPV_VERSION", "BIPV_PORT", "BIPV_LOG_LEVEL",
                "BIPV_JSON_LOGS", "BIPV_SEED_LEDGER", "BIPV_EXPOSE_ERROR_DETAILS"):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Application fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ApiSettings:
    return ApiSettings(app_name="Test Backend", version="0.0.1")


@pytest.fixture
def app(settings: ApiSettings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
