"""
Account Models
==============
Brokerage account payloads returned by ``GET /brokerage/accounts``.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AvailableMoney(BaseModel):
    value: str = ""
    currency: str = ""


class HoldMoney(BaseModel):
    value: str = ""
    currency: str = ""


class Account(BaseModel):
    """A brokerage account with its available balance and held amount."""
    uuid: str = ""
    name: str = ""
    currency: str = ""
    available_balance: AvailableMoney = Field(default_factory=AvailableMoney)
    default: bool = False
    active: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    type: str = ""
    ready: bool = False
    hold: HoldMoney = Field(default_factory=HoldMoney)


class Accounts(BaseModel):
    """A page of accounts along with its cursor metadata."""
    model_config = ConfigDict(populate_by_name=True)

    data: List[Account] = Field(default_factory=list, alias="accounts")
    has_next: bool = False
    cursor: str = ""
    size: int = 0
