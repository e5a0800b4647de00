"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vectoricon_env: str = "development"
    vectoricon_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Converter defaults (overridable per request / CLI flag)
    vectoricon_group_traversal: str = "all"
    vectoricon_strict: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
