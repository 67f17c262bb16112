"""Momentum analysis.

Combines the window's percentage change with swing-point market structure
to decide whether a token is in a tradeable momentum move.

Score:
- Base from % change: |pct| > 5 sets direction and score = min(100, |pct| x 2)
- +20 when swing structure confirms the direction
- Consistency: share of swing comparisons agreeing with the direction
- Final = min(100, (score + consistency) / 2 + 20 if score > 50)

Signal (first match wins):
1. up, pct >= 10, higher lows >= 2       -> STRONG_MOMENTUM (momentum play)
2. up, pct >= 5, consistency >= 50       -> BUILDING (play if volatility < 5)
3. up, pct >= 5, consistency < 30        -> FADING
4. up otherwise                          -> NONE (mild uptrend)
5. down                                  -> NONE (negative momentum)
6. neutral                               -> NONE (no clear momentum)
"""

from dataclasses import dataclass
from enum import Enum

from token_analyst.indicators.swings import SwingStructure

DIRECTION_THRESHOLD_PCT = 5.0
STRONG_MOMENTUM_PCT = 10.0
STRUCTURE_BONUS = 20
HIGH_SCORE_BONUS = 20
BUILDING_CONSISTENCY = 50.0
FADING_CONSISTENCY = 30.0
BUILDING_MAX_VOLATILITY = 5.0


class MomentumDirection(str, Enum):
    """Direction of the window's price move."""
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class MomentumSignal(str, Enum):
    """Momentum classification."""
    STRONG_MOMENTUM = "strong_momentum"
    BUILDING = "building"
    FADING = "fading"
    NONE = "none"


class MomentumReason(str, Enum):
    """Decision branch that produced the momentum signal."""
    STRONG_UPTREND = "strong_uptrend"
    BUILDING_UPTREND = "building_uptrend"
    FADING_UPTREND = "fading_uptrend"
    MILD_UPTREND = "mild_uptrend"
    NEGATIVE_MOMENTUM = "negative_momentum"
    NO_CLEAR_MOMENTUM = "no_clear_momentum"


@dataclass(frozen=True)
class MomentumAnalysis:
    """Result of momentum analysis.

    Attributes:
        score: 0-100 momentum score
        direction: UP, DOWN or NEUTRAL
        consistency: 0-100 agreement of swing structure with direction
        structure: Swing comparison counts
        is_momentum_play: Whether the move is worth riding
        signal: Momentum classification
        reason: Decision branch tag
        price_change_percent: % change the classification was based on
        reason_text: Human-readable explanation (filled by the presentation layer)
    """
    score: float
    direction: MomentumDirection
    consistency: float
    structure: SwingStructure
    is_momentum_play: bool
    signal: MomentumSignal
    reason: MomentumReason
    price_change_percent: float
    reason_text: str = ""


def _base_direction_and_score(pct: float) -> tuple[MomentumDirection, float]:
    if pct > DIRECTION_THRESHOLD_PCT:
        return MomentumDirection.UP, min(100.0, pct * 2)
    if pct < -DIRECTION_THRESHOLD_PCT:
        return MomentumDirection.DOWN, min(100.0, abs(pct) * 2)
    return MomentumDirection.NEUTRAL, 0.0


def _structure_confirms(direction: MomentumDirection, structure: SwingStructure) -> bool:
    if direction == MomentumDirection.UP:
        return structure.higher_lows >= 2 and structure.higher_highs >= 1
    if direction == MomentumDirection.DOWN:
        return structure.lower_highs >= 2 and structure.lower_lows >= 1
    return False


def calculate_consistency(direction: MomentumDirection, structure: SwingStructure) -> float:
    """Share of swing comparisons agreeing with the direction, scaled to 0-100.

    Requires more than two comparisons; otherwise 0. With no direction the
    larger side counts as dominant.
    """
    total = structure.total
    if total <= 2:
        return 0.0

    if direction == MomentumDirection.UP:
        dominant = structure.bullish_count
    elif direction == MomentumDirection.DOWN:
        dominant = structure.bearish_count
    else:
        dominant = max(structure.bullish_count, structure.bearish_count)

    return min(100.0, (dominant / (total / 2)) * 50)


def analyze_momentum(
    price_change_percent: float,
    volatility: float,
    structure: SwingStructure,
) -> MomentumAnalysis:
    """Classify momentum from % change, volatility and swing structure.

    Args:
        price_change_percent: % change over the analysed window
        volatility: Coefficient of variation of closes (%)
        structure: Swing comparison counts from count_swing_structure

    Returns:
        MomentumAnalysis
    """
    pct = price_change_percent
    direction, score = _base_direction_and_score(pct)

    if _structure_confirms(direction, structure):
        score += STRUCTURE_BONUS

    consistency = calculate_consistency(direction, structure)

    final_score = min(
        100.0,
        (score + consistency) / 2 + (HIGH_SCORE_BONUS if score > 50 else 0),
    )

    is_momentum_play = False
    if direction == MomentumDirection.UP:
        if pct >= STRONG_MOMENTUM_PCT and structure.higher_lows >= 2:
            signal = MomentumSignal.STRONG_MOMENTUM
            reason = MomentumReason.STRONG_UPTREND
            is_momentum_play = True
        elif pct >= DIRECTION_THRESHOLD_PCT and consistency >= BUILDING_CONSISTENCY:
            signal = MomentumSignal.BUILDING
            reason = MomentumReason.BUILDING_UPTREND
            is_momentum_play = volatility < BUILDING_MAX_VOLATILITY
        elif pct >= DIRECTION_THRESHOLD_PCT and consistency < FADING_CONSISTENCY:
            signal = MomentumSignal.FADING
            reason = MomentumReason.FADING_UPTREND
        else:
            signal = MomentumSignal.NONE
            reason = MomentumReason.MILD_UPTREND
    elif direction == MomentumDirection.DOWN:
        signal = MomentumSignal.NONE
        reason = MomentumReason.NEGATIVE_MOMENTUM
    else:
        signal = MomentumSignal.NONE
        reason = MomentumReason.NO_CLEAR_MOMENTUM

    return MomentumAnalysis(
        score=final_score,
        direction=direction,
        consistency=consistency,
        structure=structure,
        is_momentum_play=is_momentum_play,
        signal=signal,
        reason=reason,
        price_change_percent=pct,
    )
