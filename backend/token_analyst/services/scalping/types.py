"""Type definitions for scalping analysis."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from token_analyst.indicators.levels import OptimalEntryReason
from token_analyst.indicators.momentum import MomentumAnalysis
from token_analyst.indicators.statistics import MIN_CANDLES
from token_analyst.indicators.trend import TrendDirection
from token_analyst.providers.base import INTERVAL_MINUTES, Candle

REFERENCE_INTERVAL_MINUTES = 15


class Verdict(str, Enum):
    """Qualitative scalping suitability."""

    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"


class ScalpingReason(str, Enum):
    """Explanation selected for the verdict."""

    GOOD_CONDITIONS = "good_conditions"
    MODERATE_CONDITIONS = "moderate_conditions"
    LOW_VOLATILITY = "low_volatility"
    HIGH_VOLATILITY = "high_volatility"
    LOW_VOLUME = "low_volume"
    UNFAVORABLE_RISK_REWARD = "unfavorable_risk_reward"


class EntrySignal(str, Enum):
    """Recommended action at the current price."""

    STRONG_BUY = "strong_buy"
    BUY = "buy"
    MOMENTUM_BUY = "momentum_buy"
    WAIT = "wait"
    AVOID = "avoid"


class EntrySignalReason(str, Enum):
    """Rule that produced the entry signal."""

    POOR_CONDITIONS = "poor_conditions"
    MOMENTUM_PLAY = "momentum_play"
    BUILDING_MOMENTUM = "building_momentum"
    BELOW_OPTIMAL = "below_optimal"
    NEAR_OPTIMAL = "near_optimal"
    SLIGHTLY_ABOVE_OPTIMAL = "slightly_above_optimal"
    EXTENDED_ABOVE_OPTIMAL = "extended_above_optimal"


@dataclass
class AnalysisConfig:
    """Configuration for scalping analysis.

    Window sizes are candle counts tuned for 15-minute candles: 8 candles per
    trend window (2 hours) and 16 for support/resistance (4 hours).

    Attributes:
        min_candles: Minimum candles required (default and floor 10)
        trend_window: Candles per trend comparison window (default 8)
        level_window: Candles for support/resistance and swing lows (default 16)
        trend_threshold_pct: % mean difference that calls a trend (default 2.0)
        candle_interval: Granularity the windows are sized for (default "15m")
    """

    min_candles: int = 10
    trend_window: int = 8
    level_window: int = 16
    trend_threshold_pct: float = 2.0
    candle_interval: str = "15m"

    def __post_init__(self) -> None:
        if self.min_candles < MIN_CANDLES:
            raise ValueError(
                f"min_candles must be at least {MIN_CANDLES}, got {self.min_candles}"
            )

    @classmethod
    def for_interval(cls, interval: str) -> "AnalysisConfig":
        """Scale the default windows to cover the same duration at another granularity.

        Raises:
            ValueError: If the interval is unknown
        """
        if interval not in INTERVAL_MINUTES:
            raise ValueError(
                f"Unknown interval '{interval}'. Valid values: {', '.join(INTERVAL_MINUTES)}"
            )

        defaults = cls()
        scale = REFERENCE_INTERVAL_MINUTES / INTERVAL_MINUTES[interval]

        return cls(
            min_candles=defaults.min_candles,
            trend_window=max(2, round(defaults.trend_window * scale)),
            level_window=max(3, round(defaults.level_window * scale)),
            trend_threshold_pct=defaults.trend_threshold_pct,
            candle_interval=interval,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON storage."""
        return {
            "min_candles": self.min_candles,
            "trend_window": self.trend_window,
            "level_window": self.level_window,
            "trend_threshold_pct": self.trend_threshold_pct,
            "candle_interval": self.candle_interval,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisConfig":
        """Create from dictionary."""
        return cls(
            min_candles=data.get("min_candles", MIN_CANDLES),
            trend_window=data.get("trend_window", 8),
            level_window=data.get("level_window", 16),
            trend_threshold_pct=data.get("trend_threshold_pct", 2.0),
            candle_interval=data.get("candle_interval", "15m"),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Result of a full scalping analysis.

    Reason fields come in pairs: a `*_code` enum for decision logic and a
    human-readable `*_reason` string for display.
    """

    # Statistics
    current_price: float
    open_price: float
    high_24h: float
    low_24h: float
    price_change_24h: float
    price_change_percent_24h: float
    volatility: float
    avg_volume: float

    # Trend and momentum
    trend: TrendDirection
    trend_strength: float
    momentum: MomentumAnalysis

    # Suggested trading levels
    suggested_entry: float
    suggested_entry_percent: float
    suggested_stop_loss: float
    suggested_stop_loss_percent: float
    suggested_take_profit: float
    suggested_take_profit_percent: float

    # Support/Resistance levels
    support: float
    resistance: float

    # Optimal entry
    vwap: float
    optimal_entry_price: float
    optimal_entry_code: OptimalEntryReason
    optimal_entry_reason: str
    current_vs_optimal_percent: float

    # Entry signal
    entry_signal: EntrySignal
    entry_signal_code: EntrySignalReason
    entry_signal_reason: str
    expected_profit_at_current: float
    expected_profit_at_optimal: float

    # Scalping suitability
    risk_reward_ratio: float | None
    scalping_score: int
    scalping_verdict: Verdict
    scalping_code: ScalpingReason
    scalping_reason: str

    # Candles analysed, ascending by time, for charting
    candles: tuple[Candle, ...] = field(default_factory=tuple)

    @property
    def is_momentum_play(self) -> bool:
        return self.momentum.is_momentum_play

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly nested dictionary."""
        structure = self.momentum.structure
        return {
            "current_price": self.current_price,
            "open_price": self.open_price,
            "high_24h": self.high_24h,
            "low_24h": self.low_24h,
            "price_change_24h": self.price_change_24h,
            "price_change_percent_24h": self.price_change_percent_24h,
            "volatility": self.volatility,
            "avg_volume": self.avg_volume,
            "trend": self.trend.value,
            "trend_strength": self.trend_strength,
            "momentum": {
                "score": self.momentum.score,
                "direction": self.momentum.direction.value,
                "consistency": self.momentum.consistency,
                "higher_highs": structure.higher_highs,
                "lower_highs": structure.lower_highs,
                "higher_lows": structure.higher_lows,
                "lower_lows": structure.lower_lows,
                "is_momentum_play": self.momentum.is_momentum_play,
                "signal": self.momentum.signal.value,
                "reason_code": self.momentum.reason.value,
                "reason": self.momentum.reason_text,
            },
            "suggested_entry": self.suggested_entry,
            "suggested_entry_percent": self.suggested_entry_percent,
            "suggested_stop_loss": self.suggested_stop_loss,
            "suggested_stop_loss_percent": self.suggested_stop_loss_percent,
            "suggested_take_profit": self.suggested_take_profit,
            "suggested_take_profit_percent": self.suggested_take_profit_percent,
            "support": self.support,
            "resistance": self.resistance,
            "vwap": self.vwap,
            "optimal_entry_price": self.optimal_entry_price,
            "optimal_entry_code": self.optimal_entry_code.value,
            "optimal_entry_reason": self.optimal_entry_reason,
            "current_vs_optimal_percent": self.current_vs_optimal_percent,
            "entry_signal": self.entry_signal.value,
            "entry_signal_code": self.entry_signal_code.value,
            "entry_signal_reason": self.entry_signal_reason,
            "expected_profit_at_current": self.expected_profit_at_current,
            "expected_profit_at_optimal": self.expected_profit_at_optimal,
            "risk_reward_ratio": self.risk_reward_ratio,
            "scalping_score": self.scalping_score,
            "scalping_verdict": self.scalping_verdict.value,
            "scalping_code": self.scalping_code.value,
            "scalping_reason": self.scalping_reason,
            "candles": [candle.to_dict() for candle in self.candles],
        }
