"""Tests for swing point detection and structure counting."""

from token_analyst.indicators.swings import (
    SwingKind,
    SwingPoint,
    SwingStructure,
    count_swing_structure,
    detect_close_swing_lows,
    detect_swing_points,
)


class TestDetectSwingPoints:
    """Tests for detect_swing_points."""

    def test_detects_interior_extremes(self):
        """Test strict local maxima of highs and minima of lows are found."""
        highs = [10, 12, 11, 13, 12]
        lows = [9, 8, 10, 9, 11]

        swing_highs, swing_lows = detect_swing_points(highs, lows)

        assert [p.index for p in swing_highs] == [1, 3]
        assert [p.price for p in swing_highs] == [12.0, 13.0]
        assert all(p.kind == SwingKind.HIGH for p in swing_highs)
        assert [p.index for p in swing_lows] == [1, 3]
        assert all(p.kind == SwingKind.LOW for p in swing_lows)

    def test_endpoints_are_never_swings(self):
        """Test the first and last candle cannot be swing points."""
        highs = [20, 10, 20]
        lows = [1, 5, 1]

        swing_highs, swing_lows = detect_swing_points(highs, lows)

        assert swing_highs == []
        assert swing_lows == []

    def test_plateau_is_not_a_swing(self):
        """Test equal neighbours disqualify a candle (comparisons are strict)."""
        highs = [10, 12, 12, 10]
        lows = [10, 8, 8, 10]

        swing_highs, swing_lows = detect_swing_points(highs, lows)

        assert swing_highs == []
        assert swing_lows == []

    def test_zigzag_series(self, bullish_candles):
        """Test every interior odd candle of the zig-zag fixture is a swing."""
        highs = [c.high for c in bullish_candles]
        lows = [c.low for c in bullish_candles]

        swing_highs, swing_lows = detect_swing_points(highs, lows)

        assert [p.index for p in swing_highs] == [1, 3, 5, 7, 9, 11, 13]
        assert [p.index for p in swing_lows] == [1, 3, 5, 7, 9, 11, 13]


class TestCountSwingStructure:
    """Tests for count_swing_structure."""

    def test_counts_consecutive_comparisons(self):
        """Test higher/lower counts between consecutive swings."""
        swing_highs = [SwingPoint(i, p, SwingKind.HIGH) for i, p in [(1, 10), (3, 12), (5, 11)]]
        swing_lows = [SwingPoint(i, p, SwingKind.LOW) for i, p in [(2, 5), (4, 6), (6, 7)]]

        structure = count_swing_structure(swing_highs, swing_lows)

        assert structure == SwingStructure(
            higher_highs=1, lower_highs=1, higher_lows=2, lower_lows=0
        )
        assert structure.total == 4
        assert structure.bullish_count == 3
        assert structure.bearish_count == 1

    def test_equal_swings_count_toward_neither_side(self):
        """Test equal consecutive swing prices are ignored."""
        swing_highs = [SwingPoint(1, 10.0, SwingKind.HIGH), SwingPoint(3, 10.0, SwingKind.HIGH)]

        structure = count_swing_structure(swing_highs, [])

        assert structure.total == 0

    def test_fewer_than_two_swings(self):
        """Test a single swing point yields no comparisons."""
        structure = count_swing_structure([SwingPoint(1, 10.0, SwingKind.HIGH)], [])

        assert structure == SwingStructure()


class TestDetectCloseSwingLows:
    """Tests for detect_close_swing_lows."""

    def test_finds_close_minima(self):
        """Test local minima of closes are returned in index order."""
        closes = [10.0, 9.8, 10.2, 10.1, 10.3]

        lows = detect_close_swing_lows(closes)

        assert [(p.index, p.price) for p in lows] == [(1, 9.8), (3, 10.1)]

    def test_monotonic_series_has_no_swing_lows(self):
        """Test a steadily rising series has no close swing lows."""
        assert detect_close_swing_lows([1.0, 2.0, 3.0, 4.0]) == []
