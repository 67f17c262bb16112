"""Tests for momentum classification."""

import pytest

from token_analyst.indicators.momentum import (
    MomentumDirection,
    MomentumReason,
    MomentumSignal,
    analyze_momentum,
    calculate_consistency,
)
from token_analyst.indicators.swings import SwingStructure


class TestCalculateConsistency:
    """Tests for calculate_consistency."""

    def test_requires_more_than_two_comparisons(self):
        """Test two or fewer comparisons give zero consistency."""
        structure = SwingStructure(higher_highs=1, higher_lows=1)

        assert calculate_consistency(MomentumDirection.UP, structure) == 0.0

    def test_fully_aligned_structure(self):
        """Test all-bullish comparisons give 100 for an up move."""
        structure = SwingStructure(higher_highs=3, higher_lows=3)

        assert calculate_consistency(MomentumDirection.UP, structure) == 100.0

    def test_half_aligned_structure(self):
        """Test half agreeing comparisons give 50."""
        structure = SwingStructure(higher_highs=1, lower_highs=1, higher_lows=1, lower_lows=1)

        assert calculate_consistency(MomentumDirection.UP, structure) == pytest.approx(50.0)
        assert calculate_consistency(MomentumDirection.DOWN, structure) == pytest.approx(50.0)

    def test_neutral_uses_dominant_side(self):
        """Test with no direction the larger side is treated as dominant."""
        structure = SwingStructure(lower_highs=3, lower_lows=2, higher_lows=1)

        # 5 bearish of 6 comparisons
        assert calculate_consistency(MomentumDirection.NEUTRAL, structure) == pytest.approx(
            5 / 3 * 50
        )


class TestAnalyzeMomentum:
    """Tests for analyze_momentum decision order."""

    def test_strong_uptrend(self):
        """Test >= 10% with two higher lows is a strong momentum play."""
        structure = SwingStructure(higher_highs=3, higher_lows=3)

        result = analyze_momentum(12.0, 3.0, structure)

        assert result.direction == MomentumDirection.UP
        assert result.signal == MomentumSignal.STRONG_MOMENTUM
        assert result.reason == MomentumReason.STRONG_UPTREND
        assert result.is_momentum_play is True
        # base 24 + structure bonus 20, consistency 100
        assert result.score == pytest.approx(72.0)

    def test_high_score_bonus(self):
        """Test the +20 bonus applies once the adjusted score exceeds 50."""
        structure = SwingStructure(higher_highs=6, higher_lows=6)

        result = analyze_momentum(20.0, 5.6, structure)

        # (40 + 20 + 100) / 2 + 20 = 100
        assert result.score == 100.0

    def test_building_momentum_with_low_volatility_is_a_play(self):
        """Test building momentum below 5% volatility counts as a play."""
        structure = SwingStructure(higher_highs=2, higher_lows=1, lower_lows=1)

        result = analyze_momentum(7.0, 3.0, structure)

        assert result.consistency == pytest.approx(75.0)
        assert result.signal == MomentumSignal.BUILDING
        assert result.reason == MomentumReason.BUILDING_UPTREND
        assert result.is_momentum_play is True

    def test_building_momentum_with_high_volatility_is_not_a_play(self):
        """Test building momentum at 5% volatility or more is not a play."""
        structure = SwingStructure(higher_highs=2, higher_lows=1, lower_lows=1)

        result = analyze_momentum(7.0, 5.0, structure)

        assert result.signal == MomentumSignal.BUILDING
        assert result.is_momentum_play is False

    def test_fading_momentum(self):
        """Test an up move with poor swing agreement is fading."""
        structure = SwingStructure(higher_highs=1, lower_highs=3, lower_lows=2)

        result = analyze_momentum(7.0, 3.0, structure)

        assert result.consistency < 30
        assert result.signal == MomentumSignal.FADING
        assert result.reason == MomentumReason.FADING_UPTREND
        assert result.is_momentum_play is False

    def test_mild_uptrend(self):
        """Test an up move with middling consistency and no strong structure."""
        structure = SwingStructure(higher_highs=1, higher_lows=1, lower_highs=2, lower_lows=1)

        result = analyze_momentum(12.0, 3.0, structure)

        assert result.consistency == pytest.approx(40.0)
        assert result.signal == MomentumSignal.NONE
        assert result.reason == MomentumReason.MILD_UPTREND

    def test_negative_momentum(self):
        """Test a drop beyond 5% is negative momentum with no signal."""
        structure = SwingStructure(lower_highs=3, lower_lows=3)

        result = analyze_momentum(-8.0, 4.0, structure)

        assert result.direction == MomentumDirection.DOWN
        assert result.signal == MomentumSignal.NONE
        assert result.reason == MomentumReason.NEGATIVE_MOMENTUM
        assert result.is_momentum_play is False

    def test_five_percent_is_not_directional(self):
        """Test exactly +5% stays neutral (threshold is strict)."""
        result = analyze_momentum(5.0, 3.0, SwingStructure(higher_highs=3, higher_lows=3))

        assert result.direction == MomentumDirection.NEUTRAL
        assert result.reason == MomentumReason.NO_CLEAR_MOMENTUM

    def test_no_structure_no_momentum(self):
        """Test a flat window scores zero."""
        result = analyze_momentum(0.0, 0.0, SwingStructure())

        assert result.score == 0.0
        assert result.consistency == 0.0
        assert result.signal == MomentumSignal.NONE
