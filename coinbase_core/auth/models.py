"""
Auth Models
===========
Credential types for Coinbase API authentication.
"""

from dataclasses import dataclass, field
from typing import Union

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class Credentials:
    """An API key and its secret. The secret never appears in repr()."""
    key: str
    secret: bytes = field(repr=False)

    @classmethod
    def create(cls, key: str, secret: Union[str, bytes]) -> "Credentials":
        """Build credentials, rejecting an empty key or secret."""
        if not key or not secret:
            raise ConfigurationError("invalid auth arguments")
        if isinstance(secret, str):
            secret = secret.encode()
        return cls(key=key, secret=secret)
