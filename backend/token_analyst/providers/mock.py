"""Mock market data provider for testing.

Generates deterministic candles without hitting external APIs.
Useful for unit tests and development environments without an API key.
"""
import logging

from token_analyst.core.exceptions import DataValidationError, TokenNotFoundError
from token_analyst.providers.base import (
    INTERVAL_MINUTES,
    Candle,
    CandleRequest,
    MarketDataProviderInterface,
)

logger = logging.getLogger(__name__)


class MockMarketDataProvider(MarketDataProviderInterface):
    """
    Mock market data provider for testing.

    Returns configured candles for known addresses, raises TokenNotFoundError
    for addresses registered as missing, and otherwise synthesizes a gentle
    zig-zag uptrend covering the requested window.
    """

    def __init__(
        self,
        candles_by_address: dict[str, list[Candle]] | None = None,
        missing_addresses: set[str] | None = None,
    ):
        self._candles_by_address = candles_by_address or {}
        self._missing_addresses = missing_addresses or set()

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def supported_intervals(self) -> list[str]:
        return list(INTERVAL_MINUTES)

    async def fetch_candles(self, request: CandleRequest) -> list[Candle]:
        """Return configured candles or generate fake ones."""
        if request.address in self._missing_addresses:
            raise TokenNotFoundError(f"Token '{request.address}' not found")

        if request.address in self._candles_by_address:
            return list(self._candles_by_address[request.address])

        minutes = INTERVAL_MINUTES.get(request.interval)
        if minutes is None:
            raise DataValidationError(f"Invalid interval '{request.interval}'")
        step = minutes * 60

        candles = []
        current = int(request.start_time.timestamp())
        end = int(request.end_time.timestamp())
        price = 1.0
        index = 0

        while current <= end:
            # Alternate wick size so the series has swing points
            wick = 0.02 if index % 2 else 0.002
            close = price * 1.003
            candle = Candle(
                open=price,
                high=close + wick * price,
                low=price - wick * price,
                close=close,
                volume=25000.0 + 100.0 * index,
                unix_time=current,
            )
            candles.append(candle)

            price = close
            current += step
            index += 1

        logger.info(f"Generated {len(candles)} mock candles for {request.address}")
        return candles
