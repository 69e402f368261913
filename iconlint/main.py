"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from iconlint import __version__
from iconlint.config import settings
from iconlint.engine.pipeline import register_checks

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.iconlint_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="iconlint",
        description="Geometric and stylistic linter for 24x24 icon path data",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all check modules to trigger registration
    register_checks()

    from iconlint.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
