from __future__ import annotations

import structlog
from fastapi import FastAPI

from random_server import __version__
from random_server.api.catch_all import CATCH_ALL_PATH, catch_all
from random_server.api.metrics import router as metrics_router
from random_server.config import Settings, get_settings
from random_server.observability.middleware import RequestLoggingMiddleware
from random_server.responses.decider import RandomSource, ResponseDecider


def create_app(settings: Settings | None = None, rng: RandomSource | None = None) -> FastAPI:
    settings = settings or get_settings()

    # Docs and openapi routes would shadow the catch-all.
    app = FastAPI(
        title="Random Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.decider = ResponseDecider(settings.random_error_rate, rng=rng)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_route(CATCH_ALL_PATH, catch_all, include_in_schema=False)

    @app.on_event("startup")
    def _startup() -> None:
        structlog.get_logger(__name__).info(
            "server_started",
            random_error_rate=settings.random_error_rate,
            port=settings.port,
        )

    return app


def create_metrics_app() -> FastAPI:
    app = FastAPI(
        title="Random Server metrics",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(metrics_router)
    return app
