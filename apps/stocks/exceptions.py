"""Domain exceptions for stocks app."""


class StocksServiceError(Exception):
    """Base exception for all stocks service errors."""
    pass


class QuoteUnavailableError(StocksServiceError):
    """Raised when a symbol's price cannot be fetched or parsed."""
    pass
