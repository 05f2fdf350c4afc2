"""
Coinbase Core Library
=====================
Signed client for the Coinbase Advanced Trade REST API.
"""

__version__ = "0.1.0"

# Auth
from coinbase_core.auth import (
    Credentials,
    compute_signature,
    build_path_with_query,
    create_auth_headers,
    SigningTransport,
    AsyncSigningTransport,
)

# Client
from coinbase_core.http import CoinbaseClient

# Errors
from coinbase_core.exceptions import (
    CoinbaseError,
    ConfigurationError,
    TransportError,
    StatusNotOKError,
    ResponseDecodeError,
)

# Models
from coinbase_core.brokerage import (
    Account,
    Accounts,
    AvailableMoney,
    HoldMoney,
    Order,
    OrderConfig,
    OrderRequest,
    OrderSide,
    OrderStopDirection,
    MarketIOCConfig,
    LimitGTCConfig,
    LimitGTDConfig,
    StopLimitGTCConfig,
    StopLimitGTDConfig,
)

# Config
from coinbase_core.config import ClientConfig, API_URL
from coinbase_core.log import setup_logging

__all__ = [
    # Auth
    "Credentials",
    "compute_signature",
    "build_path_with_query",
    "create_auth_headers",
    "SigningTransport",
    "AsyncSigningTransport",
    # Client
    "CoinbaseClient",
    # Errors
    "CoinbaseError",
    "ConfigurationError",
    "TransportError",
    "StatusNotOKError",
    "ResponseDecodeError",
    # Models
    "Account",
    "Accounts",
    "AvailableMoney",
    "HoldMoney",
    "Order",
    "OrderConfig",
    "OrderRequest",
    "OrderSide",
    "OrderStopDirection",
    "MarketIOCConfig",
    "LimitGTCConfig",
    "LimitGTDConfig",
    "StopLimitGTCConfig",
    "StopLimitGTDConfig",
    # Config
    "ClientConfig",
    "API_URL",
    "setup_logging",
]
