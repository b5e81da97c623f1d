"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Analysis simulator ──────────────────────────────────────────────────
    analysis_delay_seconds: float = Field(default=2.0, ge=0.0)
    analysis_seed: int | None = None

    # ── Inventory ───────────────────────────────────────────────────────────
    strict_inventory_bounds: bool = True

    # ── HTTP ────────────────────────────────────────────────────────────────
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
