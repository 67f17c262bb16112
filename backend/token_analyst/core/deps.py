"""Construction of configured providers and services.

Callers (scheduled jobs, scripts, an API layer) obtain ready-to-use
components here instead of wiring settings by hand.
"""
import logging
from dataclasses import replace

from token_analyst.core.config import Settings, get_settings
from token_analyst.core.exceptions import ConfigurationError
from token_analyst.providers.base import MarketDataProviderInterface
from token_analyst.providers.birdeye import BirdeyeProvider
from token_analyst.providers.mock import MockMarketDataProvider
from token_analyst.services.scalping import AnalysisConfig, ScalpingAnalyzer
from token_analyst.services.token_analysis_service import TokenAnalysisService
from token_analyst.utils.structured_logging import configure_structured_logging

logger = logging.getLogger(__name__)


def get_market_data_provider(settings: Settings | None = None) -> MarketDataProviderInterface:
    """Get market data provider based on configuration.

    Returns the provider named by the MARKET_DATA_PROVIDER setting:
    - "birdeye": BirdeyeProvider (real OHLCV data, needs BIRDEYE_API_KEY)
    - "mock": MockMarketDataProvider (testing, generated data)

    Raises:
        ConfigurationError: If the provider is unknown or the API key is missing
    """
    settings = settings or get_settings()

    if settings.market_data_provider == "birdeye":
        if not settings.birdeye_api_key:
            raise ConfigurationError("BIRDEYE_API_KEY is not configured")
        logger.info("Using BirdeyeProvider for market data")
        return BirdeyeProvider(
            api_key=settings.birdeye_api_key,
            base_url=settings.birdeye_base_url,
            chain=settings.birdeye_chain,
            timeout=settings.birdeye_timeout,
            max_retries=settings.birdeye_max_retries,
            retry_delay=settings.birdeye_retry_delay,
        )

    elif settings.market_data_provider == "mock":
        logger.info("Using MockMarketDataProvider for market data")
        return MockMarketDataProvider()

    else:
        raise ConfigurationError(
            f"Unknown market data provider: {settings.market_data_provider}. "
            "Valid options: 'birdeye', 'mock'"
        )


def get_analysis_config(settings: Settings | None = None) -> AnalysisConfig:
    """Analysis windows sized for the configured candle interval.

    Raises:
        ConfigurationError: If the configured interval is unknown
    """
    settings = settings or get_settings()
    try:
        config = AnalysisConfig.for_interval(settings.candle_interval)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    return replace(config, min_candles=settings.min_candles)


def get_token_analysis_service(
    settings: Settings | None = None,
    provider: MarketDataProviderInterface | None = None,
) -> TokenAnalysisService:
    """Get TokenAnalysisService wired from settings.

    Args:
        settings: Settings to use (defaults to the cached application settings)
        provider: Provider override, e.g. a shared client or a test double
    """
    settings = settings or get_settings()
    return TokenAnalysisService(
        provider=provider or get_market_data_provider(settings),
        analyzer=ScalpingAnalyzer(get_analysis_config(settings)),
        lookback_hours=settings.lookback_hours,
        interval=settings.candle_interval,
    )


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured logging at the configured level.

    Entry points (scheduled scans, scripts) call this once at startup.
    """
    settings = settings or get_settings()
    configure_structured_logging(settings.log_level, json_logs=not settings.is_development)
    logger.info(f"Logging configured for {settings.app_name} ({settings.environment})")
