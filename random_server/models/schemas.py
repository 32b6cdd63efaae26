from __future__ import annotations

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    message: str


class ProblemDetail(BaseModel):
    """RFC 9457 problem details body."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    instance: str
