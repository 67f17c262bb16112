"""Swing point detection.

Two detectors with different purposes live here:

- detect_swing_points: OHLC-based. A candle is a swing high when its high is
  strictly above both neighbours' highs, and a swing low when its low is
  strictly below both neighbours' lows. Feeds market-structure counting.
- detect_close_swing_lows: close-only. A close strictly below both
  neighbouring closes. Feeds optimal-entry selection.

Swing points are recomputed on every call and never persisted.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray


class SwingKind(str, Enum):
    """Swing point type."""
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class SwingPoint:
    """Local extremum in a price series.

    Attributes:
        index: Position of the candle in the analysed series
        price: High, low or close value at the extremum
        kind: HIGH or LOW
    """
    index: int
    price: float
    kind: SwingKind


@dataclass(frozen=True)
class SwingStructure:
    """Pairwise comparison counts of consecutive swing points."""
    higher_highs: int = 0
    lower_highs: int = 0
    higher_lows: int = 0
    lower_lows: int = 0

    @property
    def total(self) -> int:
        """Total number of directional swing comparisons."""
        return self.higher_highs + self.lower_highs + self.higher_lows + self.lower_lows

    @property
    def bullish_count(self) -> int:
        """Comparisons pointing up (higher highs + higher lows)."""
        return self.higher_highs + self.higher_lows

    @property
    def bearish_count(self) -> int:
        """Comparisons pointing down (lower highs + lower lows)."""
        return self.lower_highs + self.lower_lows


def detect_swing_points(
    highs: list[float] | NDArray[np.float64],
    lows: list[float] | NDArray[np.float64],
) -> tuple[list[SwingPoint], list[SwingPoint]]:
    """Detect swing highs and swing lows on the high/low channels.

    Only interior candles are considered; the first and last candle have a
    single neighbour and can never be swing points.

    Args:
        highs: High prices (oldest to newest)
        lows: Low prices (oldest to newest)

    Returns:
        Tuple of (swing_highs, swing_lows), each in ascending index order
    """
    highs_array = np.array(highs, dtype=float)
    lows_array = np.array(lows, dtype=float)

    swing_highs: list[SwingPoint] = []
    swing_lows: list[SwingPoint] = []

    for i in range(1, len(highs_array) - 1):
        high = highs_array[i]
        if high > highs_array[i - 1] and high > highs_array[i + 1]:
            swing_highs.append(SwingPoint(index=i, price=float(high), kind=SwingKind.HIGH))

        low = lows_array[i]
        if low < lows_array[i - 1] and low < lows_array[i + 1]:
            swing_lows.append(SwingPoint(index=i, price=float(low), kind=SwingKind.LOW))

    return swing_highs, swing_lows


def _compare_consecutive(points: list[SwingPoint]) -> tuple[int, int]:
    """Count (higher, lower) moves between consecutive swing points."""
    higher = 0
    lower = 0
    for previous, current in zip(points, points[1:]):
        if current.price > previous.price:
            higher += 1
        elif current.price < previous.price:
            lower += 1
    return higher, lower


def count_swing_structure(
    swing_highs: list[SwingPoint],
    swing_lows: list[SwingPoint],
) -> SwingStructure:
    """Count higher/lower highs and lows between consecutive swing points.

    Equal consecutive swings count toward neither side.
    """
    higher_highs, lower_highs = _compare_consecutive(swing_highs)
    higher_lows, lower_lows = _compare_consecutive(swing_lows)

    return SwingStructure(
        higher_highs=higher_highs,
        lower_highs=lower_highs,
        higher_lows=higher_lows,
        lower_lows=lower_lows,
    )


def detect_close_swing_lows(
    closes: list[float] | NDArray[np.float64],
) -> list[SwingPoint]:
    """Detect local minima of the close series.

    Args:
        closes: Closing prices (oldest to newest)

    Returns:
        Swing lows in ascending index order; indices refer to `closes`
    """
    closes_array = np.array(closes, dtype=float)

    return [
        SwingPoint(index=i, price=float(closes_array[i]), kind=SwingKind.LOW)
        for i in range(1, len(closes_array) - 1)
        if closes_array[i] < closes_array[i - 1] and closes_array[i] < closes_array[i + 1]
    ]
