"""Scalping analyzer: candles in, trading signal out.

Runs four stages in strict order over a single candle window:

1. Statistics  - price range, change, average volume, volatility
2. Trend/momentum - two-window trend, swing structure, momentum signal
3. Levels      - support/resistance, stop-loss/take-profit, optimal entry
4. Scoring     - scalping score, verdict, entry signal, expected profit

The analyzer is a pure function of its input. It performs no I/O, keeps no
state between calls and never mutates the candles it is given. Either a
complete AnalysisResult is returned or an AnalysisError is raised.
"""

import logging
from dataclasses import replace

from token_analyst.indicators.levels import (
    find_optimal_entry,
    find_support_resistance,
    percent_from,
    suggest_exit_levels,
)
from token_analyst.indicators.momentum import analyze_momentum
from token_analyst.indicators.statistics import (
    compute_statistics,
    ensure_enough_candles,
    sort_candles,
)
from token_analyst.indicators.swings import count_swing_structure, detect_swing_points
from token_analyst.indicators.trend import detect_trend
from token_analyst.providers.base import CandleSeries

from .reasons import (
    format_entry_signal_reason,
    format_momentum_reason,
    format_optimal_entry_reason,
    format_scalping_reason,
)
from .scorer import ScalpingScorer, expected_profit_percent, risk_reward_ratio
from .types import AnalysisConfig, AnalysisResult

logger = logging.getLogger(__name__)


class ScalpingAnalyzer:
    """Analyzes a candle window for scalping suitability."""

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        scorer: ScalpingScorer | None = None,
    ):
        """Initialize analyzer.

        Args:
            config: Analysis configuration. Uses defaults if not provided.
            scorer: Scorer implementation. Uses ScalpingScorer if not provided.
        """
        self.config = config or AnalysisConfig()
        self.scorer = scorer or ScalpingScorer()

    def analyze(self, candles: CandleSeries) -> AnalysisResult:
        """Analyze a candle series.

        Candles may arrive in any order; they are sorted by timestamp into a
        new list before analysis.

        Args:
            candles: OHLCV candles

        Returns:
            AnalysisResult

        Raises:
            InsufficientDataError: If fewer than config.min_candles candles are given
            DegenerateInputError: If a price needed as a denominator is zero
        """
        ensure_enough_candles(candles, self.config.min_candles)
        ordered = sort_candles(candles)

        closes = [c.close for c in ordered]
        highs = [c.high for c in ordered]
        lows = [c.low for c in ordered]
        volumes = [c.volume for c in ordered]

        # 1. Statistics
        stats = compute_statistics(ordered, self.config.min_candles)
        current_price = stats.current_price

        # 2. Trend and momentum
        trend = detect_trend(
            closes,
            window=self.config.trend_window,
            threshold_pct=self.config.trend_threshold_pct,
        )
        swing_highs, swing_lows = detect_swing_points(highs, lows)
        structure = count_swing_structure(swing_highs, swing_lows)
        momentum = analyze_momentum(stats.price_change_percent, stats.volatility, structure)
        momentum = replace(momentum, reason_text=format_momentum_reason(momentum))

        # 3. Levels
        support, resistance = find_support_resistance(
            highs, lows, window=self.config.level_window
        )
        exits = suggest_exit_levels(current_price, stats.volatility, support, resistance)
        entry = find_optimal_entry(
            trend.direction,
            closes,
            volumes,
            support,
            resistance,
            window=self.config.level_window,
        )
        current_vs_optimal = percent_from(current_price, entry.price)

        # 4. Scoring
        risk_reward = risk_reward_ratio(exits.take_profit_percent, exits.stop_loss_percent)
        score = self.scorer.calculate_score(
            stats.volatility, stats.avg_volume, trend.strength, momentum, risk_reward
        )
        verdict, scalping_code = self.scorer.determine_verdict(
            score, stats.volatility, stats.avg_volume, momentum
        )
        entry_signal, entry_code = self.scorer.determine_entry_signal(
            verdict, momentum, current_vs_optimal, stats.volatility, trend.direction
        )

        logger.debug(
            f"Analyzed {len(ordered)} candles: score={score} verdict={verdict.value} "
            f"signal={entry_signal.value} trend={trend.direction.value}"
        )

        return AnalysisResult(
            current_price=current_price,
            open_price=stats.open_price,
            high_24h=stats.high_24h,
            low_24h=stats.low_24h,
            price_change_24h=stats.price_change,
            price_change_percent_24h=stats.price_change_percent,
            volatility=stats.volatility,
            avg_volume=stats.avg_volume,
            trend=trend.direction,
            trend_strength=trend.strength,
            momentum=momentum,
            suggested_entry=current_price,
            suggested_entry_percent=0.0,
            suggested_stop_loss=exits.stop_loss,
            suggested_stop_loss_percent=exits.stop_loss_percent,
            suggested_take_profit=exits.take_profit,
            suggested_take_profit_percent=exits.take_profit_percent,
            support=support,
            resistance=resistance,
            vwap=entry.vwap,
            optimal_entry_price=entry.price,
            optimal_entry_code=entry.reason,
            optimal_entry_reason=format_optimal_entry_reason(entry),
            current_vs_optimal_percent=current_vs_optimal,
            entry_signal=entry_signal,
            entry_signal_code=entry_code,
            entry_signal_reason=format_entry_signal_reason(
                entry_code,
                current_vs_optimal,
                self.scorer.acceptable_range(stats.volatility),
                momentum,
            ),
            expected_profit_at_current=expected_profit_percent(exits.take_profit, current_price),
            expected_profit_at_optimal=expected_profit_percent(exits.take_profit, entry.price),
            risk_reward_ratio=risk_reward,
            scalping_score=score,
            scalping_verdict=verdict,
            scalping_code=scalping_code,
            scalping_reason=format_scalping_reason(
                scalping_code, stats.volatility, trend.direction, risk_reward
            ),
            candles=tuple(ordered),
        )


def analyze(candles: CandleSeries, config: AnalysisConfig | None = None) -> AnalysisResult:
    """Analyze a candle series with a fresh ScalpingAnalyzer."""
    return ScalpingAnalyzer(config).analyze(candles)
