"""Human-readable explanations for analysis decisions.

Decisions are made on enum tags; this module only turns a tag and its
numeric inputs into display text.
"""

from token_analyst.indicators.levels import OptimalEntry, OptimalEntryReason
from token_analyst.indicators.momentum import MomentumAnalysis, MomentumReason
from token_analyst.indicators.trend import TrendDirection

from .types import EntrySignalReason, ScalpingReason


def _format_ratio(risk_reward: float | None) -> str:
    if risk_reward is None:
        return "n/a"
    return f"{risk_reward:.1f}:1"


def format_momentum_reason(momentum: MomentumAnalysis) -> str:
    """Explain the momentum classification."""
    pct = momentum.price_change_percent
    structure = momentum.structure

    if momentum.reason == MomentumReason.STRONG_UPTREND:
        return (
            f"Strong momentum: +{pct:.1f}% with {structure.higher_lows} higher lows "
            f"and {structure.higher_highs} higher highs"
        )
    if momentum.reason == MomentumReason.BUILDING_UPTREND:
        return (
            f"Momentum building: +{pct:.1f}% with "
            f"{momentum.consistency:.0f}% swing consistency"
        )
    if momentum.reason == MomentumReason.FADING_UPTREND:
        return (
            f"Momentum fading: +{pct:.1f}% but only "
            f"{momentum.consistency:.0f}% swing consistency"
        )
    if momentum.reason == MomentumReason.MILD_UPTREND:
        return (
            f"Mild upward movement (+{pct:.1f}%), structure not confirming "
            f"({structure.higher_highs} higher highs, {structure.higher_lows} higher lows)"
        )
    if momentum.reason == MomentumReason.NEGATIVE_MOMENTUM:
        return (
            f"Negative momentum: {pct:.1f}% with {structure.lower_highs} lower highs "
            f"and {structure.lower_lows} lower lows"
        )
    return f"No clear momentum ({pct:+.1f}%)"


def format_optimal_entry_reason(entry: OptimalEntry) -> str:
    """Explain how the optimal entry price was chosen."""
    if entry.reason == OptimalEntryReason.SWING_LOW_PULLBACK:
        return (
            f"Bullish trend: wait for pullback to recent swing low "
            f"({entry.swing_low:.8g}) above VWAP ({entry.vwap:.8g})"
        )
    if entry.reason == OptimalEntryReason.VWAP_PULLBACK:
        return f"Bullish trend: wait for pullback to just below VWAP ({entry.vwap:.8g})"
    if entry.reason == OptimalEntryReason.NEAR_SUPPORT:
        return f"Bearish trend: only enter near support ({entry.support:.8g})"
    return (
        f"Sideways market: enter in the lower part of the range "
        f"({entry.support:.8g} - {entry.resistance:.8g})"
    )


def format_entry_signal_reason(
    reason: EntrySignalReason,
    current_vs_optimal_percent: float,
    acceptable_range: float,
    momentum: MomentumAnalysis,
) -> str:
    """Explain the entry signal."""
    distance = current_vs_optimal_percent

    if reason == EntrySignalReason.POOR_CONDITIONS:
        return "Scalping conditions are poor; avoid entering"
    if reason == EntrySignalReason.MOMENTUM_PLAY:
        return f"Momentum play: {momentum.reason_text or momentum.signal.value}; enter now"
    if reason == EntrySignalReason.BUILDING_MOMENTUM:
        return (
            f"Momentum building; price {distance:+.1f}% from optimal entry "
            f"is within the extended range ({acceptable_range * 3:.1f}%)"
        )
    if reason == EntrySignalReason.BELOW_OPTIMAL:
        return f"Price is {abs(distance):.1f}% below optimal entry; excellent entry"
    if reason == EntrySignalReason.NEAR_OPTIMAL:
        return (
            f"Price is {distance:+.1f}% from optimal entry, "
            f"within the acceptable range (±{acceptable_range:.1f}%)"
        )
    if reason == EntrySignalReason.SLIGHTLY_ABOVE_OPTIMAL:
        return f"Price is {distance:.1f}% above optimal entry; wait for a small pullback"
    return f"Price is {distance:.1f}% above optimal entry; wait for a pullback"


def format_scalping_reason(
    reason: ScalpingReason,
    volatility: float,
    trend: TrendDirection,
    risk_reward: float | None,
) -> str:
    """Explain the scalping verdict."""
    ratio = _format_ratio(risk_reward)

    if reason == ScalpingReason.GOOD_CONDITIONS:
        return (
            f"Good volatility ({volatility:.1f}%), {trend.value} trend, "
            f"risk/reward ratio of {ratio}"
        )
    if reason == ScalpingReason.MODERATE_CONDITIONS:
        return (
            f"Moderate conditions. Volatility: {volatility:.1f}%, "
            f"Trend: {trend.value}, R/R: {ratio}"
        )
    if reason == ScalpingReason.LOW_VOLATILITY:
        return (
            f"Low volatility ({volatility:.1f}%) - not enough price movement for scalping"
        )
    if reason == ScalpingReason.HIGH_VOLATILITY:
        return f"Very high volatility ({volatility:.1f}%) - high risk of sudden losses"
    if reason == ScalpingReason.LOW_VOLUME:
        return "Low volume - may be difficult to exit position"
    return f"Unfavorable conditions for scalping. R/R: {ratio}"
