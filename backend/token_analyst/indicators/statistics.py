"""Price statistics for a candle window.

Computes the descriptive figures every later analysis stage builds on:
price range, change over the window, average volume and volatility.

Volatility here is the coefficient of variation of closing prices
(population standard deviation divided by the mean, as a percentage),
not a volatility-of-returns measure.
"""

from dataclasses import dataclass

import numpy as np

from token_analyst.core.exceptions import DegenerateInputError, InsufficientDataError
from token_analyst.providers.base import Candle, CandleSeries

MIN_CANDLES = 10


@dataclass(frozen=True)
class PriceStatistics:
    """Descriptive statistics of a candle window.

    Attributes:
        current_price: Close of the last candle
        open_price: Close of the first candle
        high_24h: Highest high in the window
        low_24h: Lowest low in the window
        price_change: current_price - open_price
        price_change_percent: price_change as % of open_price
        avg_volume: Arithmetic mean volume
        mean_close: Arithmetic mean close
        std_dev: Population standard deviation of closes
        volatility: std_dev as % of mean_close
    """

    current_price: float
    open_price: float
    high_24h: float
    low_24h: float
    price_change: float
    price_change_percent: float
    avg_volume: float
    mean_close: float
    std_dev: float
    volatility: float


def sort_candles(candles: CandleSeries) -> list[Candle]:
    """Return a new list of candles sorted ascending by timestamp.

    The input sequence is left untouched.
    """
    return sorted(candles, key=lambda candle: candle.unix_time)


def ensure_enough_candles(candles: CandleSeries, min_candles: int = MIN_CANDLES) -> None:
    """Raise InsufficientDataError when fewer than min_candles are supplied."""
    if len(candles) < min_candles:
        raise InsufficientDataError(received=len(candles), required=min_candles)


def compute_statistics(
    candles: CandleSeries,
    min_candles: int = MIN_CANDLES,
) -> PriceStatistics:
    """Compute price statistics for a chronologically ordered candle window.

    Args:
        candles: Candles sorted oldest to newest
        min_candles: Minimum number of candles required

    Returns:
        PriceStatistics for the window

    Raises:
        InsufficientDataError: If fewer than min_candles candles are supplied
        DegenerateInputError: If the opening close or the mean close is zero
    """
    ensure_enough_candles(candles, min_candles)

    closes = np.array([c.close for c in candles], dtype=float)
    highs = np.array([c.high for c in candles], dtype=float)
    lows = np.array([c.low for c in candles], dtype=float)
    volumes = np.array([c.volume for c in candles], dtype=float)

    current_price = float(closes[-1])
    open_price = float(closes[0])

    if open_price == 0:
        raise DegenerateInputError("Opening price is zero; percentage change is undefined")

    mean_close = float(np.mean(closes))
    if mean_close == 0:
        raise DegenerateInputError("Mean close is zero; volatility is undefined")

    # np.std defaults to the population form (ddof=0)
    std_dev = float(np.std(closes))

    price_change = current_price - open_price

    return PriceStatistics(
        current_price=current_price,
        open_price=open_price,
        high_24h=float(np.max(highs)),
        low_24h=float(np.min(lows)),
        price_change=price_change,
        price_change_percent=(price_change / open_price) * 100,
        avg_volume=float(np.mean(volumes)),
        mean_close=mean_close,
        std_dev=std_dev,
        volatility=(std_dev / mean_close) * 100,
    )
