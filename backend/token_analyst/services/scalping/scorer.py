"""Scalping suitability scoring.

Scores a token 0-100 starting from a neutral 50 and applying independent
adjustments:

| Factor            | Condition                         | Points |
|-------------------|-----------------------------------|--------|
| Volatility        | 2-10%                             | +20    |
|                   | 10-20%                            | +10    |
|                   | > 20%                             | -10    |
|                   | < 2% with momentum play           | +15    |
|                   | < 2% otherwise                    | -10    |
| Average volume    | > 10,000                          | +15    |
|                   | > 1,000                           | +5     |
|                   | otherwise                         | -15    |
| Trend strength    | > 50                              | +15    |
| Momentum          | momentum play                     | +15    |
|                   | building                          | +10    |
| Risk/reward       | >= 2                              | +10    |
|                   | >= 1.5                            | +5     |
|                   | < 1                               | -20    |
"""

from token_analyst.indicators.levels import percent_from
from token_analyst.indicators.momentum import MomentumAnalysis, MomentumSignal
from token_analyst.indicators.trend import TrendDirection

from .types import EntrySignal, EntrySignalReason, ScalpingReason, Verdict


def risk_reward_ratio(take_profit_percent: float, stop_loss_percent: float) -> float | None:
    """Reward-to-risk ratio, or None when the stop distance is zero."""
    if stop_loss_percent == 0:
        return None
    return take_profit_percent / stop_loss_percent


def expected_profit_percent(target: float, entry: float) -> float:
    """Profit (%) from buying at `entry` and selling at the take-profit `target`.

    Raises:
        DegenerateInputError: If entry is zero
    """
    return percent_from(target, entry)


class ScalpingScorer:
    """Scores scalping suitability and derives verdict and entry signal."""

    BASE_SCORE = 50
    MIN_SCORE = 0
    MAX_SCORE = 100

    GOOD_THRESHOLD = 70
    MODERATE_THRESHOLD = 40

    LOW_VOLATILITY = 2.0
    IDEAL_VOLATILITY_MAX = 10.0
    HIGH_VOLATILITY_MAX = 20.0

    HIGH_VOLUME = 10000.0
    MIN_VOLUME = 1000.0

    STRONG_TREND = 50.0

    # Acceptable distance from the optimal entry, as a fraction of volatility
    ACCEPTABLE_RANGE_FACTOR = 0.5

    def calculate_score(
        self,
        volatility: float,
        avg_volume: float,
        trend_strength: float,
        momentum: MomentumAnalysis,
        risk_reward: float | None,
    ) -> int:
        """Calculate the 0-100 scalping score.

        Args:
            volatility: Coefficient of variation of closes (%)
            avg_volume: Average candle volume
            trend_strength: 0-100 trend strength
            momentum: Momentum analysis
            risk_reward: Take-profit % / stop-loss %, None when undefined

        Returns:
            Score clamped to [0, 100]
        """
        score = self.BASE_SCORE

        if self.LOW_VOLATILITY <= volatility <= self.IDEAL_VOLATILITY_MAX:
            score += 20
        elif self.IDEAL_VOLATILITY_MAX < volatility <= self.HIGH_VOLATILITY_MAX:
            score += 10
        elif volatility > self.HIGH_VOLATILITY_MAX:
            score -= 10
        elif momentum.is_momentum_play:
            score += 15
        else:
            score -= 10

        if avg_volume > self.HIGH_VOLUME:
            score += 15
        elif avg_volume > self.MIN_VOLUME:
            score += 5
        else:
            score -= 15

        if trend_strength > self.STRONG_TREND:
            score += 15

        if momentum.is_momentum_play:
            score += 15
        elif momentum.signal == MomentumSignal.BUILDING:
            score += 10

        if risk_reward is not None:
            if risk_reward >= 2:
                score += 10
            elif risk_reward >= 1.5:
                score += 5
            elif risk_reward < 1:
                score -= 20

        return max(self.MIN_SCORE, min(self.MAX_SCORE, score))

    def determine_verdict(
        self,
        score: int,
        volatility: float,
        avg_volume: float,
        momentum: MomentumAnalysis,
    ) -> tuple[Verdict, ScalpingReason]:
        """Map a score to a verdict and pick the explanation.

        For poor scores the most unfavorable factor wins, in order: low
        volatility without momentum, excessive volatility, low volume, and
        finally the risk/reward ratio.
        """
        if score >= self.GOOD_THRESHOLD:
            return Verdict.GOOD, ScalpingReason.GOOD_CONDITIONS

        if score >= self.MODERATE_THRESHOLD:
            return Verdict.MODERATE, ScalpingReason.MODERATE_CONDITIONS

        if volatility < self.LOW_VOLATILITY and not momentum.is_momentum_play:
            reason = ScalpingReason.LOW_VOLATILITY
        elif volatility > self.HIGH_VOLATILITY_MAX:
            reason = ScalpingReason.HIGH_VOLATILITY
        elif avg_volume < self.MIN_VOLUME:
            reason = ScalpingReason.LOW_VOLUME
        else:
            reason = ScalpingReason.UNFAVORABLE_RISK_REWARD

        return Verdict.POOR, reason

    def acceptable_range(self, volatility: float) -> float:
        """Distance from the optimal entry (%) still considered a fair entry."""
        return volatility * self.ACCEPTABLE_RANGE_FACTOR

    def determine_entry_signal(
        self,
        verdict: Verdict,
        momentum: MomentumAnalysis,
        current_vs_optimal_percent: float,
        volatility: float,
        trend: TrendDirection | None = None,
    ) -> tuple[EntrySignal, EntrySignalReason]:
        """Recommend an entry action (first matching rule wins).

        A bearish trend never gets a strong buy. A falling price sitting below
        its support entry is still falling, so it is capped at a plain buy.

        Args:
            verdict: Scalping verdict
            momentum: Momentum analysis
            current_vs_optimal_percent: Current price vs optimal entry (%)
            volatility: Coefficient of variation of closes (%)
            trend: Trend direction, when known

        Returns:
            Tuple of (signal, reason)
        """
        acceptable = self.acceptable_range(volatility)
        distance = current_vs_optimal_percent

        if verdict == Verdict.POOR:
            return EntrySignal.AVOID, EntrySignalReason.POOR_CONDITIONS

        if momentum.is_momentum_play:
            return EntrySignal.MOMENTUM_BUY, EntrySignalReason.MOMENTUM_PLAY

        if momentum.signal == MomentumSignal.BUILDING and distance <= acceptable * 3:
            return EntrySignal.BUY, EntrySignalReason.BUILDING_MOMENTUM

        if distance <= -acceptable and trend != TrendDirection.BEARISH:
            return EntrySignal.STRONG_BUY, EntrySignalReason.BELOW_OPTIMAL

        if distance <= acceptable:
            return EntrySignal.BUY, EntrySignalReason.NEAR_OPTIMAL

        if distance <= acceptable * 2:
            return EntrySignal.WAIT, EntrySignalReason.SLIGHTLY_ABOVE_OPTIMAL

        return EntrySignal.WAIT, EntrySignalReason.EXTENDED_ABOVE_OPTIMAL
