"""API router — mounts the health and lint endpoints under /api."""

from __future__ import annotations

from fastapi import APIRouter

from iconlint.api import health, lint

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(lint.router)
