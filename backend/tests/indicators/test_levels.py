"""Tests for support/resistance, exit levels and optimal entry."""

import pytest

from token_analyst.core.exceptions import DegenerateInputError
from token_analyst.indicators.levels import (
    OptimalEntryReason,
    find_optimal_entry,
    find_support_resistance,
    percent_from,
    suggest_exit_levels,
    volume_weighted_average_price,
)
from token_analyst.indicators.trend import TrendDirection


class TestPercentFrom:
    """Tests for percent_from."""

    def test_positive_and_negative_distance(self):
        """Test distance above and below the reference."""
        assert percent_from(110.0, 100.0) == pytest.approx(10.0)
        assert percent_from(90.0, 100.0) == pytest.approx(-10.0)

    def test_zero_reference_raises(self):
        """Test a zero reference is rejected."""
        with pytest.raises(DegenerateInputError):
            percent_from(1.0, 0.0)


class TestFindSupportResistance:
    """Tests for find_support_resistance."""

    def test_uses_only_recent_window(self):
        """Test extremes outside the window are ignored."""
        highs = [500.0] + [10.0, 12.0, 11.0]
        lows = [1.0] + [8.0, 9.0, 7.0]

        support, resistance = find_support_resistance(highs, lows, window=3)

        assert support == 7.0
        assert resistance == 12.0

    def test_short_series_uses_everything(self):
        """Test a series shorter than the window uses all candles."""
        support, resistance = find_support_resistance([5.0, 6.0], [4.0, 3.0], window=16)

        assert (support, resistance) == (3.0, 6.0)


class TestSuggestExitLevels:
    """Tests for suggest_exit_levels."""

    def test_volatility_levels_win_when_tighter(self):
        """Test volatility-based levels are used when closer to price."""
        exits = suggest_exit_levels(100.0, 2.0, support=90.0, resistance=120.0)

        # Stop: max(96, 88.2); target: min(106, 122.4)
        assert exits.stop_loss == pytest.approx(96.0)
        assert exits.take_profit == pytest.approx(106.0)
        assert exits.stop_loss_percent == pytest.approx(4.0)
        assert exits.take_profit_percent == pytest.approx(6.0)

    def test_support_resistance_levels_win_when_tighter(self):
        """Test structure-based levels are used when closer to price."""
        exits = suggest_exit_levels(100.0, 10.0, support=99.0, resistance=101.0)

        # Stop: max(80, 97.02); target: min(130, 103.02)
        assert exits.stop_loss == pytest.approx(97.02)
        assert exits.take_profit == pytest.approx(103.02)

    def test_zero_volatility_collapses_to_price(self):
        """Test zero volatility puts both levels at the current price."""
        exits = suggest_exit_levels(100.0, 0.0, support=99.0, resistance=101.0)

        assert exits.stop_loss == 100.0
        assert exits.take_profit == 100.0
        assert exits.stop_loss_percent == 0.0
        assert exits.take_profit_percent == 0.0

    def test_zero_price_raises(self):
        """Test a zero current price is rejected."""
        with pytest.raises(DegenerateInputError):
            suggest_exit_levels(0.0, 5.0, support=0.0, resistance=1.0)


class TestVolumeWeightedAveragePrice:
    """Tests for volume_weighted_average_price."""

    def test_weights_by_volume(self):
        """Test VWAP leans toward heavily traded closes."""
        assert volume_weighted_average_price([10.0, 20.0], [3.0, 1.0]) == pytest.approx(12.5)

    def test_zero_volume_falls_back_to_mean(self):
        """Test zero total volume uses the plain mean close."""
        assert volume_weighted_average_price([10.0, 20.0], [0.0, 0.0]) == pytest.approx(15.0)


class TestFindOptimalEntry:
    """Tests for find_optimal_entry."""

    def test_bullish_swing_low_above_vwap_discount(self):
        """Test the latest close swing low is used when above VWAP x 0.995."""
        closes = [10.0, 9.8, 10.2, 10.1, 10.3]

        entry = find_optimal_entry(TrendDirection.BULLISH, closes, [1.0] * 5, 9.5, 10.5)

        assert entry.reason == OptimalEntryReason.SWING_LOW_PULLBACK
        assert entry.price == pytest.approx(10.1)
        assert entry.swing_low == pytest.approx(10.1)
        assert entry.vwap == pytest.approx(10.08)

    def test_bullish_falls_back_to_vwap_discount(self):
        """Test VWAP x 0.995 is used when the swing low is deeper."""
        closes = [10.0, 9.8, 10.2, 9.9, 10.3]

        entry = find_optimal_entry(TrendDirection.BULLISH, closes, [1.0] * 5, 9.5, 10.5)

        assert entry.reason == OptimalEntryReason.VWAP_PULLBACK
        assert entry.price == pytest.approx(10.04 * 0.995)

    def test_bullish_without_swing_lows(self):
        """Test a monotonic series has no swing low and uses VWAP."""
        entry = find_optimal_entry(
            TrendDirection.BULLISH, [1.0, 2.0, 3.0], [1.0] * 3, 1.0, 3.0
        )

        assert entry.swing_low is None
        assert entry.reason == OptimalEntryReason.VWAP_PULLBACK

    def test_swing_lows_only_from_recent_window(self):
        """Test swing lows older than the window are not considered."""
        closes = [10.0, 5.0, 10.0, 11.0, 12.0, 13.0]

        entry = find_optimal_entry(
            TrendDirection.BULLISH, closes, [1.0] * 6, 5.0, 13.0, window=3
        )

        assert entry.swing_low is None

    def test_bearish_enters_near_support(self):
        """Test a bearish trend targets 1% above support."""
        entry = find_optimal_entry(TrendDirection.BEARISH, [10.0] * 5, [1.0] * 5, 5.0, 12.0)

        assert entry.reason == OptimalEntryReason.NEAR_SUPPORT
        assert entry.price == pytest.approx(5.05)

    def test_sideways_enters_in_lower_range(self):
        """Test a sideways trend targets the lower 20% of the range."""
        entry = find_optimal_entry(TrendDirection.SIDEWAYS, [100.0] * 5, [1.0] * 5, 90.0, 110.0)

        assert entry.reason == OptimalEntryReason.RANGE_LOW
        assert entry.price == pytest.approx(94.0)
