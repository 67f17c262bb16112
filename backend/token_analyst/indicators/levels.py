"""Support/resistance, exit levels and optimal entry.

Support and resistance come from the extremes of a recent sub-window.
Stop-loss and take-profit blend a volatility-based level with a level
anchored on support/resistance and keep the tighter of the two:

- Stop loss:   max(price x (1 - 2 x vol%), support x 0.98)
- Take profit: min(price x (1 + 3 x vol%), resistance x 1.02)

The optimal entry depends on the trend:

- bullish:  max(most recent close swing low, VWAP x 0.995)
- bearish:  support x 1.01
- sideways: support + 20% of the support-resistance range
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from token_analyst.core.exceptions import DegenerateInputError
from token_analyst.indicators.swings import detect_close_swing_lows
from token_analyst.indicators.trend import TrendDirection

DEFAULT_LEVEL_WINDOW = 16

STOP_LOSS_VOLATILITY_MULTIPLIER = 2.0
TAKE_PROFIT_VOLATILITY_MULTIPLIER = 3.0
SUPPORT_STOP_BUFFER = 0.98
RESISTANCE_TARGET_BUFFER = 1.02
VWAP_PULLBACK_DISCOUNT = 0.995
BEARISH_SUPPORT_PREMIUM = 1.01
SIDEWAYS_RANGE_FRACTION = 0.2


class OptimalEntryReason(str, Enum):
    """Which rule selected the optimal entry price."""
    SWING_LOW_PULLBACK = "swing_low_pullback"
    VWAP_PULLBACK = "vwap_pullback"
    NEAR_SUPPORT = "near_support"
    RANGE_LOW = "range_low"


@dataclass(frozen=True)
class ExitLevels:
    """Suggested stop-loss and take-profit levels.

    Percentages are distances from the current price (both positive when
    the levels straddle it).
    """
    stop_loss: float
    stop_loss_percent: float
    take_profit: float
    take_profit_percent: float


@dataclass(frozen=True)
class OptimalEntry:
    """Optimal entry price and the inputs behind it."""
    price: float
    reason: OptimalEntryReason
    vwap: float
    swing_low: float | None
    support: float
    resistance: float


def percent_from(price: float, reference: float) -> float:
    """Percentage distance of price from reference.

    Raises:
        DegenerateInputError: If reference is zero
    """
    if reference == 0:
        raise DegenerateInputError("Reference price is zero; percentage distance is undefined")
    return ((price - reference) / reference) * 100


def find_support_resistance(
    highs: list[float] | NDArray[np.float64],
    lows: list[float] | NDArray[np.float64],
    window: int = DEFAULT_LEVEL_WINDOW,
) -> tuple[float, float]:
    """Support (lowest low) and resistance (highest high) over the last `window` candles."""
    recent_lows = np.array(lows, dtype=float)[-window:]
    recent_highs = np.array(highs, dtype=float)[-window:]
    return float(np.min(recent_lows)), float(np.max(recent_highs))


def suggest_exit_levels(
    current_price: float,
    volatility: float,
    support: float,
    resistance: float,
) -> ExitLevels:
    """Blend volatility-based and support/resistance-based exit levels.

    Args:
        current_price: Latest close
        volatility: Coefficient of variation of closes (%)
        support: Support level
        resistance: Resistance level

    Returns:
        ExitLevels

    Raises:
        DegenerateInputError: If current_price is zero
    """
    if current_price == 0:
        raise DegenerateInputError("Current price is zero; exit level percentages are undefined")

    volatility_stop = current_price * (1 - (volatility * STOP_LOSS_VOLATILITY_MULTIPLIER) / 100)
    support_stop = support * SUPPORT_STOP_BUFFER
    stop_loss = max(volatility_stop, support_stop)

    volatility_target = current_price * (
        1 + (volatility * TAKE_PROFIT_VOLATILITY_MULTIPLIER) / 100
    )
    resistance_target = resistance * RESISTANCE_TARGET_BUFFER
    take_profit = min(volatility_target, resistance_target)

    return ExitLevels(
        stop_loss=stop_loss,
        stop_loss_percent=((current_price - stop_loss) / current_price) * 100,
        take_profit=take_profit,
        take_profit_percent=((take_profit - current_price) / current_price) * 100,
    )


def volume_weighted_average_price(
    closes: list[float] | NDArray[np.float64],
    volumes: list[float] | NDArray[np.float64],
) -> float:
    """VWAP of closes; falls back to the mean close when total volume is zero."""
    closes_array = np.array(closes, dtype=float)
    volumes_array = np.array(volumes, dtype=float)

    total_volume = float(np.sum(volumes_array))
    if total_volume == 0:
        return float(np.mean(closes_array))

    return float(np.sum(closes_array * volumes_array)) / total_volume


def find_optimal_entry(
    trend: TrendDirection,
    closes: list[float] | NDArray[np.float64],
    volumes: list[float] | NDArray[np.float64],
    support: float,
    resistance: float,
    window: int = DEFAULT_LEVEL_WINDOW,
) -> OptimalEntry:
    """Select an optimal entry price for the current trend.

    VWAP is computed over the full series; close swing lows only over the
    last `window` closes.

    Args:
        trend: Trend classification
        closes: Closing prices (oldest to newest)
        volumes: Volumes aligned with closes
        support: Support level
        resistance: Resistance level
        window: Candles considered for close swing lows

    Returns:
        OptimalEntry
    """
    vwap = volume_weighted_average_price(closes, volumes)
    recent_closes = np.array(closes, dtype=float)[-window:]
    swing_lows = detect_close_swing_lows(recent_closes)
    swing_low = swing_lows[-1].price if swing_lows else None

    if trend == TrendDirection.BULLISH:
        vwap_entry = vwap * VWAP_PULLBACK_DISCOUNT
        if swing_low is not None and swing_low >= vwap_entry:
            price = swing_low
            reason = OptimalEntryReason.SWING_LOW_PULLBACK
        else:
            price = vwap_entry
            reason = OptimalEntryReason.VWAP_PULLBACK
    elif trend == TrendDirection.BEARISH:
        price = support * BEARISH_SUPPORT_PREMIUM
        reason = OptimalEntryReason.NEAR_SUPPORT
    else:
        price = support + (resistance - support) * SIDEWAYS_RANGE_FRACTION
        reason = OptimalEntryReason.RANGE_LOW

    return OptimalEntry(
        price=price,
        reason=reason,
        vwap=vwap,
        swing_low=swing_low,
        support=support,
        resistance=resistance,
    )
