"""Short-term trend analysis.

Classifies the short-term trend by comparing the mean close of the most
recent window of candles with the mean close of the window just before it.

Windows are fixed candle counts. The defaults (8 + 8) cover two hours each
at 15-minute granularity; callers using other granularities should scale
them (see AnalysisConfig.for_interval).
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from token_analyst.core.exceptions import DegenerateInputError

DEFAULT_TREND_WINDOW = 8
DEFAULT_TREND_THRESHOLD_PCT = 2.0


class TrendDirection(str, Enum):
    """Trend direction classification."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    SIDEWAYS = "sideways"


@dataclass(frozen=True)
class TrendAnalysis:
    """Result of two-window trend classification.

    Attributes:
        direction: Trend classification
        strength: 0-100 strength of the classification
        trend_diff: % difference of the recent mean over the older mean
        recent_mean: Mean close of the recent window
        older_mean: Mean close of the preceding window
    """
    direction: TrendDirection
    strength: float
    trend_diff: float
    recent_mean: float
    older_mean: float


def detect_trend(
    closes: list[float] | NDArray[np.float64],
    window: int = DEFAULT_TREND_WINDOW,
    threshold_pct: float = DEFAULT_TREND_THRESHOLD_PCT,
) -> TrendAnalysis:
    """Detect the short-term trend from two adjacent close windows.

    The recent window is the last `window` closes; the older window is up to
    `window` closes immediately before it. When the series is too short to
    have an older window, the recent mean is used for both (sideways).

    Thresholds are strict: a difference of exactly +threshold_pct is not
    bullish and exactly -threshold_pct is not bearish.

    Args:
        closes: Closing prices (oldest to newest)
        window: Number of candles per window
        threshold_pct: Minimum % difference to call a direction

    Returns:
        TrendAnalysis with direction, strength and the window means

    Raises:
        ValueError: If window is not positive or closes is empty
        DegenerateInputError: If the older window mean is zero
    """
    if window <= 0:
        raise ValueError("window must be positive")

    closes_array = np.array(closes, dtype=float)
    if len(closes_array) == 0:
        raise ValueError("closes must not be empty")

    recent = closes_array[-window:]
    older = closes_array[-2 * window:-window]

    recent_mean = float(np.mean(recent))
    older_mean = float(np.mean(older)) if len(older) > 0 else recent_mean

    if older_mean == 0:
        raise DegenerateInputError("Older window mean is zero; trend difference is undefined")

    trend_diff = ((recent_mean - older_mean) / older_mean) * 100

    if trend_diff > threshold_pct:
        direction = TrendDirection.BULLISH
        strength = min(100.0, trend_diff * 10)
    elif trend_diff < -threshold_pct:
        direction = TrendDirection.BEARISH
        strength = min(100.0, abs(trend_diff) * 10)
    else:
        direction = TrendDirection.SIDEWAYS
        strength = max(0.0, 100.0 - abs(trend_diff) * 20)

    return TrendAnalysis(
        direction=direction,
        strength=strength,
        trend_diff=trend_diff,
        recent_mean=recent_mean,
        older_mean=older_mean,
    )
