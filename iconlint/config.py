"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconlint_log_level: str = "info"

    # Ignore registry location and learning mode (rewrite it from this run)
    iconlint_ignore_file: str = ".svglint-ignored.json"
    si_update_ignore: bool = False

    # Optional icon catalog for title lookups
    iconlint_catalog_file: str = ""

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
