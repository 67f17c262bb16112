"""Configuration management using Pydantic v2 settings.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field(default="Token Scalp Analyst", description="Application name")
    environment: str = Field(
        default="development", description="Environment (development, production)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")

    # Market Data Provider Configuration
    market_data_provider: str = Field(
        default="birdeye",
        description="Market data provider: 'birdeye', 'mock'"
    )
    birdeye_api_key: str | None = Field(
        default=None, description="Birdeye API key (required for the birdeye provider)"
    )
    birdeye_base_url: str = Field(
        default="https://public-api.birdeye.so", description="Birdeye public API base URL"
    )
    birdeye_chain: str = Field(default="solana", description="Chain sent in the x-chain header")
    birdeye_timeout: float = Field(
        default=30.0, description="HTTP timeout for Birdeye requests in seconds"
    )

    # Birdeye Retry Configuration
    birdeye_max_retries: int = Field(
        default=3,
        description="Maximum retry attempts for Birdeye API calls"
    )
    birdeye_retry_delay: float = Field(
        default=1.0,
        description="Initial delay between retries in seconds (uses exponential backoff)"
    )

    # Analysis Defaults
    candle_interval: str = Field(
        default="15m", description="Candle granularity requested for analysis"
    )
    lookback_hours: int = Field(
        default=24, description="Hours of candle history fetched per analysis"
    )
    min_candles: int = Field(
        default=10, ge=10, description="Minimum candles required before analysis runs (at least 10)"
    )

    # Trending Screening
    trending_min_liquidity: float = Field(
        default=10000.0, description="Minimum USD liquidity for a trending token to be analyzed"
    )
    trending_max_top_holder_pct: float = Field(
        default=50.0, description="Maximum top-holder share (%) for a trending token"
    )
    trending_analyze_limit: int = Field(
        default=10, description="Number of screened candidates analyzed per scan"
    )
    trending_request_pause: float = Field(
        default=0.5, description="Pause between candidate analyses in seconds (rate limits)"
    )
    opportunity_min_score: int = Field(
        default=60, description="Minimum scalping score for a scan result to count as opportunity"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()
