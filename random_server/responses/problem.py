from __future__ import annotations

from starlette.responses import Response

from random_server.models.schemas import ProblemDetail


PROBLEM_MEDIA_TYPE = "application/problem+json"


def problem_response(*, status: int, title: str, detail: str, instance: str) -> Response:
    problem = ProblemDetail(title=title, status=status, detail=detail, instance=instance)
    return Response(
        content=problem.model_dump_json(),
        status_code=status,
        media_type=PROBLEM_MEDIA_TYPE,
    )
