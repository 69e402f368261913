"""POST /api/lint — run every check on one icon."""

from __future__ import annotations

import time
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from iconlint.dependencies import get_linter
from iconlint.engine.pipeline import Linter
from iconlint.models.requests import LintRequest
from iconlint.models.responses import BoundingBoxModel, IssueModel, LintResponse
from iconlint.svg.document import SvgDocumentError, parse_icon_svg, path_context

router = APIRouter()


@router.post("/lint", response_model=LintResponse)
async def lint(req: LintRequest, linter: Linter = Depends(get_linter)) -> LintResponse:
    start = time.perf_counter()

    if req.svg is not None:
        try:
            ctx = parse_icon_svg(req.svg, source="request")
        except SvgDocumentError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e
    else:
        ctx = path_context(req.path, title=req.title, source="request")

    ctx = linter.run(ctx)

    bbox = None
    if not ctx.parse_error and ctx.bbox is not None:
        bbox = BoundingBoxModel(**asdict(ctx.bbox))

    elapsed = (time.perf_counter() - start) * 1000
    return LintResponse(
        passed=not ctx.failed,
        issues=[IssueModel(check=i.check, message=i.message) for i in ctx.issues],
        suppressed_checks=sorted(ctx.suppressed_checks),
        bbox=bbox,
        processing_time_ms=round(elapsed, 1),
        errors=ctx.errors,
    )
