"""Trending token screening.

Filters a list of trending tokens down to analyzable candidates, analyzes
them one by one and ranks the outcome by scalping score. Fetching the
trending list itself and triggering the scan on a schedule are the
caller's concern.

Candidate rules:
- Skip tokens flagged suspicious or with live mint/freeze authority
- Require minimum USD liquidity (default $10k)
- Skip tokens whose top holder owns more than 50%
- Analyze only the first `limit` candidates (rate limits)
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum

from token_analyst.core.exceptions import AnalysisError, DataServiceError
from token_analyst.services.scalping import AnalysisResult, EntrySignal
from token_analyst.services.token_analysis_service import TokenAnalysisService
from token_analyst.utils.structured_logging import get_logger, token_log_context

logger = get_logger(__name__)

DEFAULT_MIN_LIQUIDITY = 10000.0
DEFAULT_MAX_TOP_HOLDER_PCT = 50.0
DEFAULT_ANALYZE_LIMIT = 10
DEFAULT_MIN_OPPORTUNITY_SCORE = 60

OPPORTUNITY_SIGNALS = (EntrySignal.STRONG_BUY, EntrySignal.BUY)


class SkipReason(str, Enum):
    """Why a trending token was not analyzed."""

    SUSPICIOUS = "suspicious"
    MINT_AUTHORITY = "mint_authority"
    FREEZE_AUTHORITY = "freeze_authority"
    LOW_LIQUIDITY = "low_liquidity"
    HOLDER_CONCENTRATION = "holder_concentration"
    NOT_IN_TOP_CANDIDATES = "not_in_top_candidates"


@dataclass(frozen=True)
class TrendingToken:
    """Trending token as reported by the DEX aggregator."""

    mint: str
    symbol: str
    name: str = ""
    usd_price: float = 0.0
    liquidity: float = 0.0
    is_sus: bool = False
    mint_authority: bool = False
    freeze_authority: bool = False
    top_holder_percentage: float = 0.0


@dataclass
class ScreeningResult:
    """Candidates to analyze and tokens skipped with their reason."""

    candidates: list[TrendingToken] = field(default_factory=list)
    skipped: list[tuple[TrendingToken, SkipReason]] = field(default_factory=list)


@dataclass
class TokenScanResult:
    """Outcome of scanning one trending token.

    Attributes:
        token: The trending token
        analysis: Analysis result when the token was analyzed successfully
        error: Error message when analysis failed
        skip_reason: Reason when the token was not analyzed at all
    """

    token: TrendingToken
    analysis: AnalysisResult | None = None
    error: str | None = None
    skip_reason: SkipReason | None = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None

    @property
    def scalping_score(self) -> int:
        return self.analysis.scalping_score if self.analysis else 0


def rejection_reason(
    token: TrendingToken,
    min_liquidity: float = DEFAULT_MIN_LIQUIDITY,
    max_top_holder_pct: float = DEFAULT_MAX_TOP_HOLDER_PCT,
) -> SkipReason | None:
    """Return why a token fails the candidate rules, or None if it passes."""
    if token.is_sus:
        return SkipReason.SUSPICIOUS
    if token.mint_authority:
        return SkipReason.MINT_AUTHORITY
    if token.freeze_authority:
        return SkipReason.FREEZE_AUTHORITY
    if token.liquidity < min_liquidity:
        return SkipReason.LOW_LIQUIDITY
    if token.top_holder_percentage > max_top_holder_pct:
        return SkipReason.HOLDER_CONCENTRATION
    return None


def screen_candidates(
    tokens: list[TrendingToken],
    min_liquidity: float = DEFAULT_MIN_LIQUIDITY,
    max_top_holder_pct: float = DEFAULT_MAX_TOP_HOLDER_PCT,
    limit: int = DEFAULT_ANALYZE_LIMIT,
) -> ScreeningResult:
    """Split trending tokens into candidates (in original order) and skipped tokens."""
    result = ScreeningResult()

    for token in tokens:
        reason = rejection_reason(token, min_liquidity, max_top_holder_pct)
        if reason is not None:
            result.skipped.append((token, reason))
        elif len(result.candidates) < limit:
            result.candidates.append(token)
        else:
            result.skipped.append((token, SkipReason.NOT_IN_TOP_CANDIDATES))

    return result


async def scan_trending(
    tokens: list[TrendingToken],
    service: TokenAnalysisService,
    min_liquidity: float = DEFAULT_MIN_LIQUIDITY,
    max_top_holder_pct: float = DEFAULT_MAX_TOP_HOLDER_PCT,
    limit: int = DEFAULT_ANALYZE_LIMIT,
    pause: float = 0.5,
) -> list[TokenScanResult]:
    """Screen and analyze trending tokens, best scalping score first.

    A failure on one token is recorded on its result and the scan moves on.

    Args:
        tokens: Trending tokens in rank order
        service: Service used to fetch and analyze each candidate
        min_liquidity: Minimum USD liquidity
        max_top_holder_pct: Maximum top-holder share (%)
        limit: Maximum number of candidates analyzed
        pause: Seconds to wait between candidate analyses

    Returns:
        Results for every input token sorted by scalping score (descending)
    """
    screening = screen_candidates(tokens, min_liquidity, max_top_holder_pct, limit)
    results: list[TokenScanResult] = []

    for position, token in enumerate(screening.candidates):
        if position > 0 and pause > 0:
            await asyncio.sleep(pause)

        with token_log_context(token.mint, token.symbol):
            try:
                analysis = await service.analyze_token(token.mint)
                results.append(TokenScanResult(token=token, analysis=analysis))
            except (AnalysisError, DataServiceError) as e:
                logger.warning("Token analysis failed", error=str(e))
                results.append(TokenScanResult(token=token, error=str(e)))

    results.extend(
        TokenScanResult(token=token, skip_reason=reason) for token, reason in screening.skipped
    )

    # sorted() is stable, so equal scores keep screening order
    results = sorted(results, key=lambda r: r.scalping_score, reverse=True)

    logger.info(
        "Trending scan complete",
        total=len(tokens),
        analyzed=len(screening.candidates),
        failed=sum(1 for r in results if r.error),
        skipped=len(screening.skipped),
    )
    return results


def select_opportunities(
    results: list[TokenScanResult],
    min_score: int = DEFAULT_MIN_OPPORTUNITY_SCORE,
) -> list[TokenScanResult]:
    """Analyzed results with a buy-type signal and a score of at least min_score."""
    return [
        r
        for r in results
        if r.analysis is not None
        and r.analysis.scalping_score >= min_score
        and r.analysis.entry_signal in OPPORTUNITY_SIGNALS
    ]
