from typing import Optional, Any


class CoinbaseError(Exception):
    """Base exception for all Coinbase client errors."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ConfigurationError(CoinbaseError):
    """Raised when the client is constructed with an empty API key or secret."""
    pass


class TransportError(CoinbaseError):
    """Raised when the underlying HTTP transport fails to send a request."""
    pass


class StatusNotOKError(CoinbaseError):
    """Raised when the API answers with a non-200 status code."""
    def __init__(self, status_code: int, details: Any = None):
        super().__init__(
            f"status not OK: unexpected status code: {status_code}, body: {details}",
            status_code=status_code,
            details=details,
        )


class ResponseDecodeError(CoinbaseError):
    """Raised when a response body cannot be decoded into the expected model."""
    pass
