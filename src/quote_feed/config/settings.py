"""Application settings and configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Quote Feed"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Cache
    quote_cache_ttl_seconds: float = Field(default=30.0, gt=0)

    # Upstream providers
    primary_quote_url: str = "https://query1.finance.yahoo.com/v7/finance/quote"
    secondary_quote_url: str = "https://financialmodelingprep.com/api/v3/quote"
    secondary_api_key: str = "demo"
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    provider_timeout_seconds: float = Field(default=10.0, gt=0)
    secondary_max_workers: int = Field(default=4, ge=1)
    enable_yfinance_provider: bool = False

    # Retry policy applied to each provider call (1 = no retry)
    provider_retry_attempts: int = Field(default=1, ge=1)
    provider_retry_backoff_seconds: float = Field(default=0.5, ge=0)

    # Seed for the synthetic fallback generator (None = unseeded)
    synthetic_seed: Optional[int] = None


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
