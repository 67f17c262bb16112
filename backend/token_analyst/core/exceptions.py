"""Core exception classes for the Token Analyst application."""


class AnalysisError(Exception):
    """Base exception for price analysis failures."""

    pass


class InsufficientDataError(AnalysisError):
    """Raised when a candle series is too short to analyze."""

    def __init__(self, received: int, required: int):
        self.received = received
        self.required = required
        super().__init__(
            f"Insufficient price data (need at least {required} candles, got {received})"
        )


class DegenerateInputError(AnalysisError):
    """Raised when a price used as a denominator is zero."""

    pass


class DataServiceError(Exception):
    """Base exception for market data operations."""

    pass


class APIError(DataServiceError):
    """Raised when external API operations fail."""

    pass


class DataValidationError(DataServiceError):
    """Raised when data validation fails."""

    pass


class TokenNotFoundError(DataServiceError):
    """Raised when a token address is unknown to the data provider."""

    pass


class ConfigurationError(Exception):
    """Raised when required settings are missing or inconsistent."""

    pass
