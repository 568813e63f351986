from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.main import create_app


_APP_ENV_VARS = (
    "PORT",
    "CURRENT_ENV",
    "CONFIG_MESSAGE",
    "SECRET_KEY",
    "NODE_ENV",
    "DELAY_RESPONSE_MS",
    "LOAD_TEST_DURATION_MS",
    "MEMORY_TEST_SIZE_MB",
    "SEED_POSTS",
)


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in _APP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the settings under test.
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def _assert_envelope(response, expected_status: int, expected_kind: str) -> dict:
    assert response.status_code == expected_status
    body = response.json()
    assert body["status"] == expected_kind
    assert "timestamp" in body
    if expected_kind == "success":
        assert "data" in body
    else:
        assert body["error"]
    return body


@pytest.fixture
def assert_envelope():
    return _assert_envelope
