"""
Configuration and settings for the Amama EC backend.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings (``AMAMA_*`` variables or ``.env``)."""

    model_config = SettingsConfigDict(
        env_prefix="AMAMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_prefix: str = Field(default="/api")

    # Shared secret for write/backup/reset
    admin_password: str = Field(default="maki2123")

    # Flat-file store
    data_file: str = Field(default="amama_data.json")
    use_in_memory_store: bool = Field(default=False)

    # Static frontend
    static_dir: str = Field(default=".")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field(default="INFO")

    # Seed document
    balance_periods: int = Field(default=13, ge=1)
    currency: str = Field(default="ETB")
    document_version: str = Field(default="1.0")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
