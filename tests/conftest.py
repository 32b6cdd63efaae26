from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest
import structlog
from httpx import ASGITransport, AsyncClient

from random_server.config import Settings, get_settings
from random_server.main import create_app
from random_server.observability.metrics import reset_metrics


_ENV_VARS = ("RANDOM_ERROR_RATE", "LOG_LEVEL", "HOST", "PORT", "METRICS_ENABLED", "METRICS_PORT")


class FirstChoiceRandom:
    """Gate draw of 0.0 and index 0 for every catalog draw."""

    def random(self) -> float:
        return 0.0

    def randrange(self, stop: int) -> int:
        _ = stop
        return 0


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_metrics()

    yield

    structlog.contextvars.clear_contextvars()
    get_settings.cache_clear()
    reset_metrics()


@pytest.fixture
def client_for():
    @asynccontextmanager
    async def _client(error_rate: float, rng=None) -> AsyncIterator[AsyncClient]:
        app = create_app(Settings(RANDOM_ERROR_RATE=error_rate), rng=rng)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    return _client


@pytest.fixture
def first_choice_rng() -> FirstChoiceRandom:
    return FirstChoiceRandom()
