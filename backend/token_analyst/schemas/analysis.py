"""Flat analysis record for storage and API responses."""

from datetime import datetime, timezone

from pydantic import Field

from token_analyst.schemas.base import StrictBaseModel
from token_analyst.services.scalping import AnalysisResult


class TokenAnalysisRecord(StrictBaseModel):
    """One analysis of one token, flattened to snake_case columns.

    Momentum and swing-structure fields are lifted to the top level; the
    candle series itself is reduced to `candles_analyzed`.
    """

    token_mint: str = Field(..., description="Token mint address")
    token_symbol: str | None = Field(None, description="Token ticker symbol")
    token_name: str | None = Field(None, description="Token display name")
    analyzed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the analysis was produced (UTC)",
    )
    candles_analyzed: int = Field(..., ge=0, description="Number of candles analyzed")

    # Statistics
    current_price: float
    open_price: float
    high_24h: float
    low_24h: float
    price_change_24h: float
    price_change_percent_24h: float
    volatility: float = Field(..., description="Coefficient of variation of closes (%)")
    avg_volume: float

    # Trend
    trend: str = Field(..., description="bullish, bearish or sideways")
    trend_strength: float = Field(..., ge=0, le=100)

    # Momentum
    momentum_score: float
    momentum_direction: str = Field(..., description="up, down or neutral")
    momentum_consistency: float = Field(..., ge=0, le=100)
    higher_highs: int = Field(..., ge=0)
    higher_lows: int = Field(..., ge=0)
    lower_highs: int = Field(..., ge=0)
    lower_lows: int = Field(..., ge=0)
    is_momentum_play: bool
    momentum_signal: str = Field(..., description="strong_momentum, building, fading or none")
    momentum_reason_code: str
    momentum_reason: str

    # Trading levels
    suggested_entry: float
    suggested_entry_percent: float
    suggested_stop_loss: float
    suggested_stop_loss_percent: float
    suggested_take_profit: float
    suggested_take_profit_percent: float
    support: float
    resistance: float

    # Optimal entry
    vwap: float
    optimal_entry_price: float
    optimal_entry_code: str
    optimal_entry_reason: str
    current_vs_optimal_percent: float

    # Entry signal
    entry_signal: str = Field(
        ..., description="strong_buy, buy, momentum_buy, wait or avoid"
    )
    entry_signal_code: str
    entry_signal_reason: str
    expected_profit_at_current: float
    expected_profit_at_optimal: float

    # Scalping suitability
    risk_reward_ratio: float | None = Field(
        None, description="Take-profit % / stop-loss %, null when the stop distance is zero"
    )
    scalping_score: int = Field(..., ge=0, le=100)
    scalping_verdict: str = Field(..., description="good, moderate or poor")
    scalping_code: str
    scalping_reason: str

    @classmethod
    def from_result(
        cls,
        result: AnalysisResult,
        token_mint: str,
        token_symbol: str | None = None,
        token_name: str | None = None,
        analyzed_at: datetime | None = None,
    ) -> "TokenAnalysisRecord":
        """Flatten an AnalysisResult into a record."""
        momentum = result.momentum
        structure = momentum.structure

        extra = {"analyzed_at": analyzed_at} if analyzed_at is not None else {}

        return cls(
            token_mint=token_mint,
            token_symbol=token_symbol,
            token_name=token_name,
            candles_analyzed=len(result.candles),
            current_price=result.current_price,
            open_price=result.open_price,
            high_24h=result.high_24h,
            low_24h=result.low_24h,
            price_change_24h=result.price_change_24h,
            price_change_percent_24h=result.price_change_percent_24h,
            volatility=result.volatility,
            avg_volume=result.avg_volume,
            trend=result.trend.value,
            trend_strength=result.trend_strength,
            momentum_score=momentum.score,
            momentum_direction=momentum.direction.value,
            momentum_consistency=momentum.consistency,
            higher_highs=structure.higher_highs,
            higher_lows=structure.higher_lows,
            lower_highs=structure.lower_highs,
            lower_lows=structure.lower_lows,
            is_momentum_play=momentum.is_momentum_play,
            momentum_signal=momentum.signal.value,
            momentum_reason_code=momentum.reason.value,
            momentum_reason=momentum.reason_text,
            suggested_entry=result.suggested_entry,
            suggested_entry_percent=result.suggested_entry_percent,
            suggested_stop_loss=result.suggested_stop_loss,
            suggested_stop_loss_percent=result.suggested_stop_loss_percent,
            suggested_take_profit=result.suggested_take_profit,
            suggested_take_profit_percent=result.suggested_take_profit_percent,
            support=result.support,
            resistance=result.resistance,
            vwap=result.vwap,
            optimal_entry_price=result.optimal_entry_price,
            optimal_entry_code=result.optimal_entry_code.value,
            optimal_entry_reason=result.optimal_entry_reason,
            current_vs_optimal_percent=result.current_vs_optimal_percent,
            entry_signal=result.entry_signal.value,
            entry_signal_code=result.entry_signal_code.value,
            entry_signal_reason=result.entry_signal_reason,
            expected_profit_at_current=result.expected_profit_at_current,
            expected_profit_at_optimal=result.expected_profit_at_optimal,
            risk_reward_ratio=result.risk_reward_ratio,
            scalping_score=result.scalping_score,
            scalping_verdict=result.scalping_verdict.value,
            scalping_code=result.scalping_code.value,
            scalping_reason=result.scalping_reason,
            **extra,
        )
