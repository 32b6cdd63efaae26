from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog


_CONFIGURED = False

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def parse_log_level(name: str) -> int:
    """Map a level name such as ``"warn"`` or ``"ERROR"`` to a stdlib level."""

    try:
        return _LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown log level: {name!r}") from None


# uvicorn's lifecycle messages join our JSON stream; its access log is
# replaced by RequestLoggingMiddleware's http_request events.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error")
_SERVER_ACCESS_LOGGER = "uvicorn.access"


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def _json_handler(stream: IO[str], shared: list[Any]) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared,
        )
    )
    return handler


def configure_logging(level: int = logging.ERROR, stream: IO[str] | None = None) -> None:
    """Route structlog and stdlib records to one JSON-lines handler.

    Events below ``level`` are dropped before rendering. Only the first call
    takes effect.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    shared = _shared_processors()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers = [_json_handler(stream or sys.stdout, shared)]
    root.setLevel(level)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.propagate = True
        server_logger.setLevel(level)
    logging.getLogger(_SERVER_ACCESS_LOGGER).disabled = True

    _CONFIGURED = True
