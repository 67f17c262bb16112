"""Technical indicators package for Token Analyst.

Available indicators:
- Price statistics (range, change, average volume, volatility)
- Two-window trend classification
- Swing point detection (OHLC-based and close-only)
- Momentum classification from swing structure
- Support/resistance, exit levels, VWAP and optimal entry
"""

from .statistics import (
    MIN_CANDLES,
    PriceStatistics,
    compute_statistics,
    ensure_enough_candles,
    sort_candles,
)
from .trend import (
    TrendAnalysis,
    TrendDirection,
    detect_trend,
)
from .swings import (
    SwingKind,
    SwingPoint,
    SwingStructure,
    count_swing_structure,
    detect_close_swing_lows,
    detect_swing_points,
)
from .momentum import (
    MomentumAnalysis,
    MomentumDirection,
    MomentumReason,
    MomentumSignal,
    analyze_momentum,
    calculate_consistency,
)
from .levels import (
    ExitLevels,
    OptimalEntry,
    OptimalEntryReason,
    find_optimal_entry,
    find_support_resistance,
    percent_from,
    suggest_exit_levels,
    volume_weighted_average_price,
)

__all__ = [
    "MIN_CANDLES",
    "PriceStatistics",
    "compute_statistics",
    "ensure_enough_candles",
    "sort_candles",
    "TrendAnalysis",
    "TrendDirection",
    "detect_trend",
    "SwingKind",
    "SwingPoint",
    "SwingStructure",
    "count_swing_structure",
    "detect_close_swing_lows",
    "detect_swing_points",
    "MomentumAnalysis",
    "MomentumDirection",
    "MomentumReason",
    "MomentumSignal",
    "analyze_momentum",
    "calculate_consistency",
    "ExitLevels",
    "OptimalEntry",
    "OptimalEntryReason",
    "find_optimal_entry",
    "find_support_resistance",
    "percent_from",
    "suggest_exit_levels",
    "volume_weighted_average_price",
]
