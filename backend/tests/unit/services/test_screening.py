"""Tests for trending token screening and scanning."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from token_analyst.core.exceptions import APIError, InsufficientDataError
from token_analyst.services.scalping import EntrySignal, analyze
from token_analyst.services.screening import (
    SkipReason,
    TokenScanResult,
    TrendingToken,
    rejection_reason,
    scan_trending,
    screen_candidates,
    select_opportunities,
)
from token_analyst.services.token_analysis_service import TokenAnalysisService


def make_token(mint: str, **overrides) -> TrendingToken:
    """Trending token that passes every screen unless overridden."""
    fields = {
        "mint": mint,
        "symbol": mint.upper(),
        "liquidity": 50000.0,
        "top_holder_percentage": 10.0,
    }
    fields.update(overrides)
    return TrendingToken(**fields)


class TestRejectionReason:
    """Tests for rejection_reason."""

    @pytest.mark.parametrize(
        "overrides,expected",
        [
            ({"is_sus": True}, SkipReason.SUSPICIOUS),
            ({"mint_authority": True}, SkipReason.MINT_AUTHORITY),
            ({"freeze_authority": True}, SkipReason.FREEZE_AUTHORITY),
            ({"liquidity": 9999.0}, SkipReason.LOW_LIQUIDITY),
            ({"top_holder_percentage": 50.1}, SkipReason.HOLDER_CONCENTRATION),
        ],
    )
    def test_each_rule(self, overrides, expected):
        """Test each screen rejects with its own reason."""
        assert rejection_reason(make_token("abc", **overrides)) == expected

    def test_boundaries_pass(self):
        """Test exactly $10k liquidity and exactly 50% top holder are accepted."""
        token = make_token("abc", liquidity=10000.0, top_holder_percentage=50.0)

        assert rejection_reason(token) is None

    def test_suspicious_takes_precedence(self):
        """Test the first failing rule is reported."""
        token = make_token("abc", is_sus=True, liquidity=0.0)

        assert rejection_reason(token) == SkipReason.SUSPICIOUS


class TestScreenCandidates:
    """Tests for screen_candidates."""

    def test_keeps_order_and_limit(self):
        """Test candidates keep trending order and overflow is skipped."""
        tokens = [make_token(f"t{i}") for i in range(5)]

        result = screen_candidates(tokens, limit=3)

        assert [t.mint for t in result.candidates] == ["t0", "t1", "t2"]
        assert [(t.mint, r) for t, r in result.skipped] == [
            ("t3", SkipReason.NOT_IN_TOP_CANDIDATES),
            ("t4", SkipReason.NOT_IN_TOP_CANDIDATES),
        ]

    def test_rejected_tokens_do_not_use_limit(self):
        """Test rejected tokens leave room for later candidates."""
        tokens = [make_token("bad", is_sus=True), make_token("good1"), make_token("good2")]

        result = screen_candidates(tokens, limit=2)

        assert [t.mint for t in result.candidates] == ["good1", "good2"]
        assert result.skipped[0][1] == SkipReason.SUSPICIOUS


class TestScanTrending:
    """Tests for scan_trending."""

    @pytest.fixture
    def results_by_mint(self, bullish_candles, bearish_candles, flat_candles):
        return {
            "bull": analyze(bullish_candles),
            "bear": analyze(bearish_candles),
            "flat": analyze(flat_candles),
        }

    @pytest.fixture
    def service(self, results_by_mint):
        """Service double answering from precomputed results."""

        async def analyze_token(mint):
            if mint == "broken":
                raise InsufficientDataError(received=3, required=10)
            if mint == "down":
                raise APIError("Birdeye OHLCV failed: 503")
            return results_by_mint[mint]

        service = MagicMock(spec=TokenAnalysisService)
        service.analyze_token = AsyncMock(side_effect=analyze_token)
        return service

    @pytest.mark.asyncio
    async def test_sorted_by_score_with_failures_recorded(self, service):
        """Test results are ranked by score and failures do not stop the scan."""
        tokens = [
            make_token("flat"),
            make_token("broken"),
            make_token("bull"),
            make_token("sus", is_sus=True),
            make_token("bear"),
            make_token("down"),
        ]

        results = await scan_trending(tokens, service, pause=0)

        assert [r.token.mint for r in results[:3]] == ["bear", "bull", "flat"]
        assert [r.scalping_score for r in results[:3]] == [100, 95, 40]
        by_mint = {r.token.mint: r for r in results}
        assert "need at least 10" in by_mint["broken"].error
        assert "503" in by_mint["down"].error
        assert by_mint["sus"].skipped is True
        assert by_mint["sus"].skip_reason == SkipReason.SUSPICIOUS
        assert len(results) == len(tokens)
        assert service.analyze_token.await_count == 5

    @pytest.mark.asyncio
    async def test_pauses_between_candidates(self, service):
        """Test the pause is awaited between analyses, not before the first."""
        tokens = [make_token("bull"), make_token("bear"), make_token("flat")]

        with patch(
            "token_analyst.services.screening.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            await scan_trending(tokens, service, pause=0.5)

        assert mock_sleep.await_count == 2
        mock_sleep.assert_awaited_with(0.5)

    @pytest.mark.asyncio
    async def test_only_top_candidates_analyzed(self, service):
        """Test the analyze limit caps provider calls."""
        tokens = [make_token("bull"), make_token("bear"), make_token("flat")]

        results = await scan_trending(tokens, service, limit=1, pause=0)

        assert service.analyze_token.await_count == 1
        assert sum(1 for r in results if r.skip_reason == SkipReason.NOT_IN_TOP_CANDIDATES) == 2


class TestSelectOpportunities:
    """Tests for select_opportunities."""

    def test_keeps_buy_signals_above_min_score(self, bullish_candles, bearish_candles, flat_candles):
        """Test only strong_buy/buy results at or above the score floor are kept."""
        bear = TokenScanResult(make_token("bear"), analysis=analyze(bearish_candles))
        bull = TokenScanResult(make_token("bull"), analysis=analyze(bullish_candles))
        flat = TokenScanResult(make_token("flat"), analysis=analyze(flat_candles))
        failed = TokenScanResult(make_token("x"), error="boom")

        selected = select_opportunities([bear, bull, flat, failed])

        assert selected == [bear]
        assert bear.analysis.entry_signal == EntrySignal.BUY
        # Momentum buys are not counted as opportunities
        assert bull.analysis.entry_signal == EntrySignal.MOMENTUM_BUY

    def test_score_floor(self, bearish_candles):
        """Test results below min_score are dropped."""
        bear = TokenScanResult(make_token("bear"), analysis=analyze(bearish_candles))

        assert select_opportunities([bear], min_score=101) == []
