"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    checks_registered: int = 0


class IssueModel(BaseModel):
    check: str
    message: str


class BoundingBoxModel(BaseModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float


class LintResponse(BaseModel):
    passed: bool
    issues: list[IssueModel] = Field(default_factory=list)
    suppressed_checks: list[str] = Field(default_factory=list)
    bbox: BoundingBoxModel | None = None
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)
