"""Service health endpoint."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/healthz", summary="Service readiness probe", response_model=dict[str, str])
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


__all__ = ["router"]
