from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog

from random_server.observability.metrics import get_metrics


def _header(scope: dict[str, Any], name: bytes) -> str:
    for key, value in scope.get("headers") or []:
        if key.lower() == name:
            return value.decode("latin-1")
    return ""


def _remote_addr(scope: dict[str, Any]) -> str:
    client = scope.get("client")
    if not client:
        return ""
    host, port = client
    return f"{host}:{port}"


class RequestLoggingMiddleware:
    """Access log + HTTP metrics for every request.

    Observes the ``http.response.start`` message to learn the status actually
    sent to the client; the response itself passes through untouched.
    """

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        structlog.contextvars.bind_contextvars(request_id=str(uuid.uuid4()))

        start = perf_counter()
        # HTTP's implicit status when the handler never starts a response.
        status_code: int = 200
        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code, response_started

            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 200))
                response_started = True

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            if not response_started:
                status_code = 500
            raise
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0
            self._record(scope, status_code, elapsed_ms)
            structlog.contextvars.clear_contextvars()

    @staticmethod
    def _record(scope: dict[str, Any], status_code: int, elapsed_ms: float) -> None:
        # Metrics first so they update even if logging misbehaves.
        try:
            get_metrics().observe_http_request(elapsed_ms=elapsed_ms, status_code=status_code)
        except Exception:  # noqa: BLE001
            pass

        try:
            structlog.get_logger("access").info(
                "http_request",
                method=scope.get("method"),
                path=scope.get("path"),
                query=(scope.get("query_string") or b"").decode("latin-1"),
                status=status_code,
                duration_ms=round(elapsed_ms, 3),
                user_agent=_header(scope, b"user-agent"),
                remote_addr=_remote_addr(scope),
            )
        except Exception:  # noqa: BLE001
            # The response is already on the wire; a broken sink must not surface.
            pass
