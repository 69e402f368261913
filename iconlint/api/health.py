"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from iconlint import __version__
from iconlint.engine.registry import get_registry
from iconlint.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        checks_registered=get_registry().count,
    )
