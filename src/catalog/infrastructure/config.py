"""Application configuration using Pydantic Settings.

Values come from ``CATALOG_*`` environment variables or a ``.env``
file; command line options override them.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Storage ──────────────────────────────────────────
    data_dir: Path = Path("data")

    # ── Identity ─────────────────────────────────────────
    # Supplied by the external identity service; required by every
    # command that touches a company's own catalog.
    user_id: str | None = None

    # ── Sharing ──────────────────────────────────────────
    public_base_url: str = "http://localhost:8000"

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
