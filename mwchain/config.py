"""
mwchain — Configuration
========================

What:  Package settings loaded from ``MWCHAIN_*`` environment variables
       (or a ``.env`` file) through pydantic-settings.
How:   A module-level ``settings`` singleton is built at import time and
       read by the chain (default ``None`` policy) and the demo service.

Environment:
    MWCHAIN_STRICT              Reject ``None`` middleware entries (default: off)
    MWCHAIN_LOG_LEVEL           Root log level for the demo service
    MWCHAIN_CORS_ORIGINS        Comma-separated origins for the demo service
    MWCHAIN_GZIP_MINIMUM_SIZE   Response size (bytes) above which to gzip
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for mwchain and its demo service."""

    # ── Chain ─────────────────────────────────────────────────────────────
    # None entries are skipped unless strict; strict chains reject them
    # when they are registered.
    strict: bool = Field(
        default=False,
        description="Reject None middleware entries instead of skipping them",
    )

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Demo service ──────────────────────────────────────────────────────
    cors_origins: str = Field(default="http://localhost:3000")
    gzip_minimum_size: int = Field(default=500, ge=0)

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        env_prefix="MWCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
