"""
Application configuration using Pydantic Settings.
Defaults for every entity type's digest policy are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # ── Digest defaults ──────────────────────────────────
    digest_algorithm: str = "MD5"
    digest_encoding: str = "hex"  # "binary" | "hex" | "base64"
    digest_auto: bool = True

    # ── Row store ────────────────────────────────────────
    mock_mode: bool = True  # When True, rows live in an in-memory store
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "digest_columns"

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings (singleton)."""
    return Settings()
