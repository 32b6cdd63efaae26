from __future__ import annotations

from typing import Any, Callable

from starlette.requests import Request

from random_server.responses.decider import ResponseDecider


CATCH_ALL_PATH = "/{path:path}"


def get_decider(request: Request) -> ResponseDecider:
    return request.app.state.decider


class CatchAllEndpoint:
    """Raw ASGI endpoint, so Starlette registers it without a method filter.

    Any verb (PROPFIND, PURGE, custom ones) reaches the decider instead of a
    405 from the router.
    """

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        request = Request(scope, receive)
        response = get_decider(request).decide(request.url.path)
        await response(scope, receive, send)


catch_all = CatchAllEndpoint()
