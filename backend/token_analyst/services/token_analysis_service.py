"""Token analysis service: resolves a token address to candles and analyzes them."""

from datetime import datetime, timedelta, timezone

from token_analyst.core.exceptions import DataValidationError
from token_analyst.providers.base import CandleRequest, MarketDataProviderInterface
from token_analyst.services.scalping import AnalysisConfig, AnalysisResult, ScalpingAnalyzer
from token_analyst.utils.structured_logging import get_logger
from token_analyst.utils.validation import is_valid_token_address, normalize_address

logger = get_logger(__name__)


class TokenAnalysisService:
    """Fetches a recent candle window for a token and runs the scalping analyzer.

    Retry and backoff belong to the provider; the analyzer itself is pure.
    """

    def __init__(
        self,
        provider: MarketDataProviderInterface,
        analyzer: ScalpingAnalyzer | None = None,
        lookback_hours: int = 24,
        interval: str = "15m",
    ) -> None:
        """Initialize service.

        Args:
            provider: Market data provider used to fetch candles
            analyzer: Analyzer to run. Defaults to one with windows sized for `interval`.
            lookback_hours: Hours of history fetched per analysis
            interval: Candle granularity
        """
        if lookback_hours <= 0:
            raise ValueError("lookback_hours must be positive")

        self.provider = provider
        self.interval = interval
        self.lookback = timedelta(hours=lookback_hours)
        self.analyzer = analyzer or ScalpingAnalyzer(AnalysisConfig.for_interval(interval))

    async def __aenter__(self) -> "TokenAnalysisService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the provider (and any HTTP client it owns)."""
        await self.provider.aclose()

    async def analyze_token(
        self, address: str, now: datetime | None = None
    ) -> AnalysisResult:
        """Fetch the lookback window of candles for a token and analyze it.

        Args:
            address: Token mint address
            now: End of the window (defaults to the current UTC time)

        Returns:
            AnalysisResult

        Raises:
            DataValidationError: If the address is malformed
            InsufficientDataError: If the provider returns too few candles
            DegenerateInputError: If prices needed as denominators are zero
            DataServiceError: If fetching candles fails
        """
        address = normalize_address(address)
        if not is_valid_token_address(address):
            raise DataValidationError(f"Invalid token address: {address}")

        end_time = now or datetime.now(timezone.utc)
        request = CandleRequest(
            address=address,
            start_time=end_time - self.lookback,
            end_time=end_time,
            interval=self.interval,
        )

        candles = await self.provider.fetch_candles(request)
        logger.info(
            "Fetched candles",
            address=address,
            provider=self.provider.provider_name,
            interval=self.interval,
            candles=len(candles),
        )

        result = self.analyzer.analyze(candles)
        logger.info(
            "Token analyzed",
            address=address,
            scalping_score=result.scalping_score,
            verdict=result.scalping_verdict.value,
            entry_signal=result.entry_signal.value,
            trend=result.trend.value,
        )
        return result
