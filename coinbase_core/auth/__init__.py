"""
Coinbase Request Authentication
===============================
HMAC request signing and the transports that apply it.
"""

from .models import Credentials
from .signature import (
    build_path_with_query,
    build_message,
    compute_signature,
    SIGNATURE_ALGORITHM,
    SIGNATURE_LENGTH,
)
from .headers import (
    create_auth_headers,
    ACCESS_KEY_HEADER,
    ACCESS_SIGN_HEADER,
    ACCESS_TIMESTAMP_HEADER,
)
from .transport import SigningTransport, AsyncSigningTransport

__all__ = [
    # Models
    "Credentials",
    # Signature
    "build_path_with_query",
    "build_message",
    "compute_signature",
    "SIGNATURE_ALGORITHM",
    "SIGNATURE_LENGTH",
    # Headers
    "create_auth_headers",
    "ACCESS_KEY_HEADER",
    "ACCESS_SIGN_HEADER",
    "ACCESS_TIMESTAMP_HEADER",
    # Transports
    "SigningTransport",
    "AsyncSigningTransport",
]
