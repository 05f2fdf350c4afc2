from .client import CoinbaseClient
from ..exceptions import (
    CoinbaseError,
    ConfigurationError,
    TransportError,
    StatusNotOKError,
    ResponseDecodeError,
)

__all__ = [
    "CoinbaseClient",
    "CoinbaseError",
    "ConfigurationError",
    "TransportError",
    "StatusNotOKError",
    "ResponseDecodeError",
]
