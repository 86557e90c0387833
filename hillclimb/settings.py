"""Centralised environment-driven settings."""

from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings sourced from HILLCLIMB_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HILLCLIMB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    max_cells: int = 1_000_000
    max_visited: int = 50000
    cors_origins: List[str] = ["*"]


settings = Settings()

__all__ = ["Settings", "settings"]
