from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import structlog
import uvicorn
from pydantic import ValidationError

from random_server.config import get_settings
from random_server.main import create_app, create_metrics_app
from random_server.observability.logging import configure_logging


def _server(app, host: str, port: int) -> uvicorn.Server:
    # access_log off: RequestLoggingMiddleware already emits one line per request.
    config = uvicorn.Config(app, host=host, port=port, access_log=False, log_config=None)
    return uvicorn.Server(config)


async def _serve(servers: list[uvicorn.Server]) -> None:
    await asyncio.gather(*(server.serve() for server in servers))


def main() -> None:
    parser = argparse.ArgumentParser(description="HTTP server answering every request with success or a random error")
    parser.add_argument("--host", default=None, help="Bind address (overrides HOST)")
    parser.add_argument("--port", type=int, default=None, help="Listen port (overrides PORT)")
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as exc:
        # No usable LOG_LEVEL yet; errors are always emitted.
        configure_logging(logging.ERROR)
        structlog.get_logger("random_server").error("could not create config", error=str(exc))
        sys.exit(1)

    configure_logging(settings.log_level_number)
    log = structlog.get_logger("random_server")

    host = settings.host if args.host is None else args.host
    port = settings.port if args.port is None else args.port

    servers = [_server(create_app(settings), host, port)]
    if settings.metrics_enabled:
        servers.append(_server(create_metrics_app(), host, settings.metrics_port))
        log.info("metrics_enabled", port=settings.metrics_port)

    asyncio.run(_serve(servers))


if __name__ == "__main__":
    main()
