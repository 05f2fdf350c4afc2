"""
Order Models
============
Request and response payloads for ``POST /brokerage/orders``.

Only the shape of an order is modelled here; sizing and pricing rules are
left to the API to enforce.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class OrderSide(str, Enum):
    UNKNOWN = "UNKNOWN_ORDER_SIDE"
    BUY = "BUY"
    SELL = "SELL"


class OrderStopDirection(str, Enum):
    """Which way the price has to move for a stop order to trigger."""
    UNKNOWN = "UNKNOWN_STOP_DIRECTION"
    UP = "STOP_DIRECTION_STOP_UP"
    DOWN = "STOP_DIRECTION_STOP_DOWN"


class _AliasedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MarketIOCConfig(_AliasedModel):
    """Market order, immediate-or-cancel."""
    quote_size: str = ""  # required for BUY
    base_size: str = ""  # required for SELL


class LimitGTCConfig(_AliasedModel):
    """Good-'til-cancelled limit order."""
    base_size: str = ""
    price: str = Field(default="", alias="limit_price")
    post_only: bool = False


class LimitGTDConfig(_AliasedModel):
    """Good-'til-date limit order."""
    base_size: str = ""
    price: str = Field(default="", alias="limit_price")
    end_time: Optional[datetime] = None
    post_only: bool = False


class StopLimitGTCConfig(_AliasedModel):
    base_size: str = ""
    limit_price: str = ""
    stop_price: str = ""
    stop_direction: Optional[Union[OrderStopDirection, str]] = Field(
        default=None, union_mode="left_to_right"
    )


class StopLimitGTDConfig(_AliasedModel):
    base_size: str = ""
    limit_price: str = ""
    stop_price: str = ""
    stop_direction: Optional[Union[OrderStopDirection, str]] = Field(
        default=None, union_mode="left_to_right"
    )
    end_time: Optional[datetime] = None


class OrderConfig(_AliasedModel):
    """Order configuration. Set exactly one of the fields."""
    market_ioc: Optional[MarketIOCConfig] = Field(default=None, alias="market_market_ioc")
    limit_gtc: Optional[LimitGTCConfig] = Field(default=None, alias="limit_limit_gtc")
    limit_gtd: Optional[LimitGTDConfig] = Field(default=None, alias="limit_limit_gtd")
    stop_limit_gtc: Optional[StopLimitGTCConfig] = Field(
        default=None, alias="stop_limit_stop_limit_gtc"
    )
    stop_limit_gtd: Optional[StopLimitGTDConfig] = Field(
        default=None, alias="stop_limit_stop_limit_gtd"
    )


class OrderRequest(_AliasedModel):
    """Payload for creating an order on a product (BASE-QUOTE)."""
    client_order_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    product_id: str
    side: Union[OrderSide, str] = Field(
        default=OrderSide.UNKNOWN, union_mode="left_to_right"
    )
    configuration: OrderConfig = Field(
        default_factory=OrderConfig, alias="order_configuration"
    )

    def to_payload(self) -> dict:
        """JSON-ready body with API field names and unset configs dropped."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class SuccessResponse(BaseModel):
    order_id: str = ""
    product_id: str = ""
    side: Optional[Union[OrderSide, str]] = Field(
        default=None, union_mode="left_to_right"
    )
    client_order_id: str = ""


class ErrorResponse(BaseModel):
    error: str = ""
    message: str = ""
    error_details: str = ""
    preview_failure_reason: str = ""
    new_order_failure_reason: str = ""


class Order(_AliasedModel):
    """Response from creating an order."""
    success: bool = False
    failure_reason: str = ""
    order_id: str = ""
    success_response: SuccessResponse = Field(default_factory=SuccessResponse)
    error_response: ErrorResponse = Field(default_factory=ErrorResponse)
    order_configuration: OrderConfig = Field(default_factory=OrderConfig)
