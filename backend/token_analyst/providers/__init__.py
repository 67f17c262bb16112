"""Market data providers."""

from .base import Candle, CandleRequest, CandleSeries, MarketDataProviderInterface
from .birdeye import BirdeyeProvider
from .mock import MockMarketDataProvider

__all__ = [
    "Candle",
    "CandleRequest",
    "CandleSeries",
    "MarketDataProviderInterface",
    "BirdeyeProvider",
    "MockMarketDataProvider",
]
