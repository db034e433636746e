"""Application configuration: loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``PROJECTDUMP_*`` env vars (or ``.env``)."""

    model_config = SettingsConfigDict(
        env_prefix="PROJECTDUMP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    max_file_size_kb: int = Field(default=1024, ge=0)
    binary_sniff_bytes: int = Field(default=512, gt=0)
    max_listed_files: int = Field(default=5, ge=0)
    redact_secrets: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
