"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_holdings_file() -> Path:
    """Return the default holdings file (data/portfolio_sample.json under the working directory)."""
    return Path.cwd() / "data" / "portfolio_sample.json"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PORTFOLIO_",
        extra="ignore",
    )

    app_name: str = "Portfolio Dashboard"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Holdings source (derived from the working directory if not set)
    holdings_file: Optional[Path] = None

    # Live quotes: short-lived, prices go stale within seconds
    quote_cache_ttl_seconds: float = 20
    quote_cache_check_period_seconds: float = 4
    quote_batch_size: int = 10
    yahoo_quote_url: str = "https://query1.finance.yahoo.com/v7/finance/quote"

    # P/E and earnings: hour-scale
    metrics_cache_ttl_seconds: float = 60 * 60
    metrics_cache_check_period_seconds: float = 600
    google_finance_url: str = "https://www.google.com/finance/quote"

    # Price history proxy
    history_cache_ttl_seconds: float = 5 * 60
    history_cache_check_period_seconds: float = 60

    # Symbol forms
    default_exchange_suffix: str = ".NS"
    secondary_market_qualifier: str = "NSE"

    http_timeout_seconds: Optional[float] = 10.0

    def get_holdings_file(self) -> Path:
        """Get the holdings file path."""
        return self.holdings_file or get_default_holdings_file()


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
