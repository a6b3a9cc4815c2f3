# src/revagg/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and a .env file with validation.

Files that USE this module:
- revagg.app (loads settings for feeds, view and logging configuration)
- revagg.adapters.feeds.* (feeds use settings for timeouts and sources)
- revagg.adapters.formatting.formatter (thousands separator)
- revagg.application.revenue_service (failure and validation policies)

Files that this module USES:
- revagg.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import List, Literal, Optional  # Type hints

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from revagg.shared.validators import (
    validate_feed_url,  # Validate HTTP(S) feed URLs
    validate_separator,  # Validate thousands separator
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Feeds ---
    # Comma-separated list; kept as a string so plain env values parse
    feed_urls_raw: str = Field(default="", alias="FEED_URLS")
    feed_dir: Optional[Path] = Field(default=None, alias="FEED_DIR")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Loading policies ---
    allow_partial_aggregation: bool = Field(default=False, alias="ALLOW_PARTIAL_AGGREGATION")
    invalid_record_policy: Literal["skip_record", "skip_source", "raise"] = Field(
        default="skip_record", alias="INVALID_RECORD_POLICY"
    )

    # --- View ---
    page_size: int = Field(default=10, alias="PAGE_SIZE", ge=1)
    nav_window_size: int = Field(default=4, alias="NAV_WINDOW_SIZE", ge=1)

    # --- Display ---
    thousands_separator: str = Field(default=",", alias="THOUSANDS_SEPARATOR")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="REVAGG_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def feed_urls(self) -> List[str]:
        """Configured feed URLs, in declaration order."""
        return [u.strip() for u in self.feed_urls_raw.split(",") if u.strip()]

    @field_validator("feed_urls_raw")
    @classmethod
    def validate_feed_urls(cls, v: str) -> str:
        """Validate every configured feed URL."""
        for url in v.split(","):
            url = url.strip()
            if url and not validate_feed_url(url):
                raise ValueError(f"Invalid feed URL in FEED_URLS: {url}")
        return v

    @field_validator("thousands_separator")
    @classmethod
    def validate_thousands_separator(cls, v: str) -> str:
        """Validate thousands separator."""
        if not validate_separator(v):
            raise ValueError("THOUSANDS_SEPARATOR must be a single non-digit character")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v


# Global settings instance
settings = Settings()
