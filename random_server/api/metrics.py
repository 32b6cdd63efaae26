from __future__ import annotations

from fastapi import APIRouter

from random_server.observability.metrics import get_metrics


router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics() -> dict:
    return get_metrics().snapshot()
