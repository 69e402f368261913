"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class LintRequest(BaseModel):
    svg: str | None = Field(default=None, description="Raw icon SVG markup")
    path: str | None = Field(default=None, description="Bare path data, used when svg is absent")
    title: str = Field(default="", description="Icon title for bare path data, e.g. 'Python icon'")

    @model_validator(mode="after")
    def _one_source(self) -> LintRequest:
        if (self.svg is None) == (self.path is None):
            raise ValueError("Provide exactly one of 'svg' or 'path'")
        return self
