"""Base provider interface and data models for market data providers.

This module defines the candle model consumed by the analysis engine and the
contract that all market data providers must implement.
"""
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Candle:
    """Single OHLCV candle for a fixed time bucket."""

    open: float
    high: float
    low: float
    close: float
    volume: float
    unix_time: int

    @classmethod
    def from_birdeye(cls, item: dict[str, Any]) -> "Candle":
        """Create from a Birdeye OHLCV item (o, h, l, c, v, unixTime)."""
        return cls(
            open=float(item["o"]),
            high=float(item["h"]),
            low=float(item["l"]),
            close=float(item["c"]),
            volume=float(item["v"]),
            unix_time=int(item["unixTime"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the short-key format used for charting."""
        return {
            "o": self.open,
            "h": self.high,
            "l": self.low,
            "c": self.close,
            "v": self.volume,
            "unixTime": self.unix_time,
        }


CandleSeries = Sequence[Candle]

# Candle granularities (Birdeye "type" values) and their length in minutes
INTERVAL_MINUTES = {
    "1m": 1,
    "3m": 3,
    "5m": 5,
    "15m": 15,
    "30m": 30,
    "1H": 60,
    "2H": 120,
    "4H": 240,
    "6H": 360,
    "8H": 480,
    "12H": 720,
    "1D": 1440,
}


@dataclass
class CandleRequest:
    """Request for a window of OHLCV candles."""

    address: str
    start_time: datetime
    end_time: datetime
    interval: str = "15m"


class MarketDataProviderInterface(ABC):
    """
    Abstract interface for market data providers.

    This interface defines the contract that all market data providers
    (Birdeye, Mock) must implement.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of this provider (e.g., 'birdeye')."""
        pass

    @property
    @abstractmethod
    def supported_intervals(self) -> list[str]:
        """Return list of supported interval values."""
        pass

    def _validate_candle(self, candle: Candle) -> None:
        """Validate OHLCV price constraints.

        Raises:
            DataValidationError: If candle data violates constraints

        Args:
            candle: Candle to validate
        """
        from token_analyst.core.exceptions import DataValidationError

        if candle.high < candle.low:
            raise DataValidationError(
                f"High price ({candle.high}) < Low price ({candle.low})"
            )

        if candle.open < 0 or candle.close < 0 or candle.low < 0:
            raise DataValidationError("Prices cannot be negative")

        if candle.volume < 0:
            raise DataValidationError("Volume cannot be negative")

    @abstractmethod
    async def fetch_candles(self, request: CandleRequest) -> list[Candle]:
        """
        Fetch OHLCV candles for a token.

        Args:
            request: CandleRequest with address, time window and interval

        Returns:
            List of Candle objects sorted by unix_time

        Raises:
            TokenNotFoundError: If the token is unknown to the provider
            DataValidationError: If returned data is invalid
            APIError: If provider API fails after retries
        """
        pass

    async def aclose(self) -> None:
        """Release provider resources such as HTTP clients. No-op by default."""
        return None
