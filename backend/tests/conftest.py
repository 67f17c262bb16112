"""Shared pytest fixtures.

Candle scenarios used across indicator, analyzer and service tests. The
16-candle series are laid out 15 minutes apart and alternate wick sizes so
every odd candle is a swing high and a swing low.
"""
import os

# Settings must not pick up a developer's provider choice or key
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("BIRDEYE_API_KEY", None)
os.environ.pop("MARKET_DATA_PROVIDER", None)

from collections.abc import Callable

import pytest

from token_analyst.core.config import get_settings
from token_analyst.providers.base import Candle

START_TIME = 1_700_000_000
CANDLE_SECONDS = 900


def build_candles(
    closes: list[float],
    highs: list[float] | None = None,
    lows: list[float] | None = None,
    volumes: list[float] | None = None,
) -> list[Candle]:
    """Build ascending candles from close prices (open = previous close)."""
    highs = highs if highs is not None else list(closes)
    lows = lows if lows is not None else list(closes)
    volumes = volumes if volumes is not None else [10000.0] * len(closes)

    return [
        Candle(
            open=closes[i - 1] if i > 0 else closes[0],
            high=highs[i],
            low=lows[i],
            close=closes[i],
            volume=volumes[i],
            unix_time=START_TIME + CANDLE_SECONDS * i,
        )
        for i in range(len(closes))
    ]


def _zigzag_candles(closes: list[float]) -> list[Candle]:
    highs = [c + 2 if i % 2 else c + 0.1 for i, c in enumerate(closes)]
    lows = [c - 2 if i % 2 else c - 0.1 for i, c in enumerate(closes)]
    volumes = [20000.0 + 1000.0 * i for i in range(len(closes))]
    return build_candles(closes, highs, lows, volumes)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so env changes in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def candle_factory() -> Callable[..., list[Candle]]:
    """Factory building candles from close/high/low/volume lists."""
    return build_candles


@pytest.fixture
def bullish_candles() -> list[Candle]:
    """Steady +20% climb from 100 to 120 over 16 candles."""
    return _zigzag_candles([100 + 20 * i / 15 for i in range(16)])


@pytest.fixture
def bearish_candles() -> list[Candle]:
    """Mirror of the bullish series: 120 down to 100."""
    return _zigzag_candles([120 - 20 * i / 15 for i in range(16)])


@pytest.fixture
def flat_candles() -> list[Candle]:
    """16 identical candles: close 100, range 99-101, volume 1000."""
    return build_candles(
        [100.0] * 16,
        highs=[101.0] * 16,
        lows=[99.0] * 16,
        volumes=[1000.0] * 16,
    )


@pytest.fixture
def token_address() -> str:
    """A well-formed Solana mint address (USDC)."""
    return "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
