"""Birdeye market data provider implementation.

This provider wraps the Birdeye public REST API, handling HTTP transport,
data transformation, error handling, and retries.
"""
import asyncio
import logging
from typing import Any

import httpx

from token_analyst.core.exceptions import (
    APIError,
    DataValidationError,
    TokenNotFoundError,
)
from token_analyst.providers.base import (
    INTERVAL_MINUTES,
    Candle,
    CandleRequest,
    MarketDataProviderInterface,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://public-api.birdeye.so"
OHLCV_PATH = "/defi/v3/ohlcv"


class _RetryableError(Exception):
    """Transient failure (rate limit, server error, transport) worth retrying."""


class BirdeyeProvider(MarketDataProviderInterface):
    """
    Birdeye market data provider implementation.

    The API key is passed explicitly; nothing is read from module state.
    Handles:
    - Async HTTP calls through a shared httpx.AsyncClient
    - Data transformation to Candle objects
    - Exponential backoff on rate limits, 5xx responses and transport errors
    - Validation of intervals and candle data quality
    """

    VALID_INTERVALS = list(INTERVAL_MINUTES)

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        chain: str = "solana",
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize provider.

        Args:
            api_key: Birdeye API key sent as X-API-KEY
            base_url: API base URL
            chain: Chain name sent as x-chain
            timeout: Request timeout in seconds (ignored when client is given)
            max_retries: Maximum attempts per request
            retry_delay: Initial backoff delay in seconds
            client: Optional pre-built client (caller keeps ownership)
        """
        if not api_key:
            raise ValueError("Birdeye API key is required")

        self._api_key = api_key
        self._chain = chain
        self._max_retries = max(1, max_retries)
        self._retry_delay = retry_delay
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    @property
    def provider_name(self) -> str:
        return "birdeye"

    @property
    def supported_intervals(self) -> list[str]:
        return self.VALID_INTERVALS.copy()

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "X-API-KEY": self._api_key,
            "x-chain": self._chain,
            "accept": "application/json",
        }

    async def __aenter__(self) -> "BirdeyeProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_candles(self, request: CandleRequest) -> list[Candle]:
        """Fetch OHLCV candles from Birdeye."""
        if request.interval not in self.VALID_INTERVALS:
            raise DataValidationError(
                f"Invalid interval '{request.interval}'. "
                f"Valid values: {', '.join(self.VALID_INTERVALS)}"
            )

        if request.start_time >= request.end_time:
            raise DataValidationError("start_time must be before end_time")

        params = {
            "address": request.address,
            "type": request.interval,
            "time_from": int(request.start_time.timestamp()),
            "time_to": int(request.end_time.timestamp()),
        }

        payload = await self._get_with_retry(OHLCV_PATH, params, request.address)
        candles = self._transform_data(payload)

        logger.info(
            f"Fetched {len(candles)} {request.interval} candles for {request.address} "
            f"from {request.start_time} to {request.end_time}"
        )

        return candles

    async def _get_with_retry(
        self, path: str, params: dict[str, Any], address: str
    ) -> dict[str, Any]:
        """GET a JSON document with retry logic and exponential backoff."""
        last_error: Exception | None = None

        for attempt in range(self._max_retries):
            try:
                return await self._get(path, params, address)

            except _RetryableError as e:
                last_error = e
                if attempt < self._max_retries - 1:
                    wait_time = self._retry_delay * (2**attempt)
                    logger.warning(
                        f"Attempt {attempt + 1} failed for {address}, "
                        f"retrying in {wait_time}s: {e}"
                    )
                    await asyncio.sleep(wait_time)
                else:
                    logger.error(f"All {self._max_retries} attempts failed for {address}: {e}")

        raise APIError(
            f"Birdeye request failed after {self._max_retries} attempts: {last_error}"
        )

    async def _get(self, path: str, params: dict[str, Any], address: str) -> dict[str, Any]:
        try:
            response = await self._client.get(path, params=params, headers=self._headers)
        except httpx.TransportError as e:
            raise _RetryableError(f"transport error: {e}") from e

        if response.status_code == 429 or response.status_code >= 500:
            raise _RetryableError(f"HTTP {response.status_code}")

        if response.status_code == 404:
            raise TokenNotFoundError(f"Token '{address}' not found")

        if response.status_code != 200:
            raise APIError(f"Birdeye OHLCV failed: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise DataValidationError("Invalid Birdeye response") from e

    def _transform_data(self, payload: dict[str, Any]) -> list[Candle]:
        """Transform a Birdeye OHLCV payload into validated candles."""
        if not isinstance(payload, dict) or not payload.get("success"):
            raise DataValidationError("Invalid Birdeye response")

        data = payload.get("data")
        if not isinstance(data, dict) or "items" not in data:
            raise DataValidationError("Invalid Birdeye response")

        candles = []
        for item in data["items"] or []:
            try:
                candle = Candle.from_birdeye(item)
            except (KeyError, TypeError, ValueError) as e:
                raise DataValidationError(f"Malformed OHLCV item: {item!r}") from e
            self._validate_candle(candle)
            candles.append(candle)

        return sorted(candles, key=lambda c: c.unix_time)
