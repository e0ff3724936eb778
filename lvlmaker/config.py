"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    lvlmaker_env: str = "development"
    lvlmaker_log_level: str = "info"

    # Pipeline defaults (CLI flags and request fields override these)
    lvlmaker_parallel_scans: bool = False
    lvlmaker_strict_markers: bool = False

    # Indent used for --pretty output
    lvlmaker_json_indent: int = 2

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
