"""
Brokerage Models
================
Typed payloads for the Advanced Trade brokerage endpoints.
"""

from .accounts import AvailableMoney, HoldMoney, Account, Accounts
from .orders import (
    OrderSide,
    OrderStopDirection,
    MarketIOCConfig,
    LimitGTCConfig,
    LimitGTDConfig,
    StopLimitGTCConfig,
    StopLimitGTDConfig,
    OrderConfig,
    OrderRequest,
    SuccessResponse,
    ErrorResponse,
    Order,
)

__all__ = [
    # Accounts
    "AvailableMoney",
    "HoldMoney",
    "Account",
    "Accounts",
    # Orders
    "OrderSide",
    "OrderStopDirection",
    "MarketIOCConfig",
    "LimitGTCConfig",
    "LimitGTDConfig",
    "StopLimitGTCConfig",
    "StopLimitGTDConfig",
    "OrderConfig",
    "OrderRequest",
    "SuccessResponse",
    "ErrorResponse",
    "Order",
]
