from __future__ import annotations

import random
from typing import Callable, Protocol

import structlog
from starlette.responses import Response

from random_server.models.schemas import SuccessResponse
from random_server.responses.catalog import DEFAULT_ERROR_CATALOG, ErrorCatalog
from random_server.responses.problem import problem_response


SUCCESS_MESSAGE = "request processed successfully"
JSON_MEDIA_TYPE = "application/json"


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def encode_success(payload: SuccessResponse) -> bytes:
    return payload.model_dump_json().encode("utf-8")


class ResponseDecider:
    """Answers a request with success or a simulated error.

    One uniform draw gates the error path; the status code and the body are
    then drawn independently from ``catalog``.
    """

    def __init__(
        self,
        error_rate: float,
        *,
        rng: RandomSource | None = None,
        catalog: ErrorCatalog = DEFAULT_ERROR_CATALOG,
        encoder: Callable[[SuccessResponse], bytes] = encode_success,
    ) -> None:
        self.error_rate = error_rate
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.catalog = catalog
        self._encoder = encoder
        self._log = structlog.get_logger(__name__)

    def decide(self, path: str) -> Response:
        if self.rng.random() < self.error_rate:
            return self._error()
        return self._success(path)

    def _error(self) -> Response:
        status_code = self.catalog.status_codes[self.rng.randrange(len(self.catalog.status_codes))]
        detail = self.catalog.details[self.rng.randrange(len(self.catalog.details))]
        self._log.debug("simulated_error", status=status_code, detail_length=len(detail))
        # No media type: the body is served raw, like the integrations it imitates.
        return Response(content=detail, status_code=status_code)

    def _success(self, path: str) -> Response:
        try:
            body = self._encoder(SuccessResponse(message=SUCCESS_MESSAGE))
        except Exception as exc:  # noqa: BLE001
            self._log.error("success_encoding_failed", error=str(exc), path=path)
            return problem_response(
                status=500,
                title="json encoding error",
                detail=str(exc),
                instance=path,
            )
        return Response(content=body, status_code=200, media_type=JSON_MEDIA_TYPE)
