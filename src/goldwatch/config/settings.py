# src/goldwatch/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Every value except BOT_TOKEN has a working default. Without CHANNEL_ID the
ticker only logs its updates.

Files that USE this module:
- goldwatch.app (loads settings for scheduling, logging and the bot)
- goldwatch.adapters.providers.* (endpoint URLs, currency code and HTTP timeout)
- goldwatch.adapters.formatting.formatter (currency symbol)
- goldwatch.shared.language (default language)

Files that this module USES:
- goldwatch.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from goldwatch.shared.validators import (
    validate_bot_token,  # Validate Telegram bot token format
    validate_channel_id,  # Validate Telegram channel ID format
    validate_url,  # Validate endpoint URLs
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Telegram (presentation sink) ---
    bot_token: str = Field(default="", alias="BOT_TOKEN")
    channel_id: str = Field(default="", alias="CHANNEL_ID")

    # --- API Endpoints ---
    gold_api_url: str = Field(
        default="https://data-asg.goldprice.org/dbXRates/USD", alias="GOLD_API_URL"
    )
    rate_api_url: str = Field(
        default="https://api.exchangerate-api.com/v4/latest/USD", alias="RATE_API_URL"
    )
    backup_rate_api_url: str = Field(
        default="https://open.er-api.com/v6/latest/USD", alias="BACKUP_RATE_API_URL"
    )

    # --- Currency ---
    local_currency: str = Field(default="CNY", alias="LOCAL_CURRENCY", min_length=3, max_length=3)
    currency_symbol: str = Field(default="¥", alias="CURRENCY_SYMBOL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Scheduling ---
    refresh_interval_seconds: int = Field(default=10, alias="REFRESH_INTERVAL_SECONDS", ge=1, le=3600)

    # --- Language Settings ---
    default_language: str = Field(default="zh", alias="DEFAULT_LANGUAGE")

    # --- Logging (for server deployment) ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("bot_token")
    @classmethod
    def validate_bot_token(cls, v: str) -> str:
        """Validate bot token format."""
        if v and not validate_bot_token(v):
            raise ValueError("Invalid BOT_TOKEN format")
        return v

    @field_validator("channel_id")
    @classmethod
    def validate_channel_id(cls, v: str) -> str:
        """Validate channel ID format."""
        if v and not validate_channel_id(v):
            raise ValueError("Invalid channel ID format")
        return v

    @field_validator("gold_api_url", "rate_api_url", "backup_rate_api_url")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not validate_url(v):
            raise ValueError(f"Invalid endpoint URL: {v!r}")
        return v

    @field_validator("local_currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        if v not in ["en", "zh"]:
            raise ValueError("DEFAULT_LANGUAGE must be 'en' or 'zh'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v


# Global settings instance
settings = Settings()


# ============================================================================
# Deployment Instructions
# ============================================================================
#
# 1. Run the ticker in the background:
#    nohup goldwatch > goldwatch.log 2>&1 &
#
# 2. Monitor logs in real-time:
#    tail -f goldwatch.log
#
# 3. Stop the ticker:
#    pkill -f goldwatch
#
# ============================================================================
