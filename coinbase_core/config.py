"""
Client Configuration
====================
Configuration for the Coinbase API connection.
"""

import os
from dataclasses import dataclass, field

API_URL = "https://api.coinbase.com/api/v3"


@dataclass
class ClientConfig:
    """Configuration for the Coinbase API connection."""
    api_key: str = field(
        default_factory=lambda: os.environ.get("COINBASE_API_KEY", "")
    )
    api_secret: str = field(
        default_factory=lambda: os.environ.get("COINBASE_API_SECRET", ""), repr=False
    )
    base_url: str = field(
        default_factory=lambda: os.environ.get("COINBASE_API_URL", API_URL)
    )
    timeout: float = field(
        default_factory=lambda: float(os.environ.get("COINBASE_TIMEOUT", "10.0"))
    )
