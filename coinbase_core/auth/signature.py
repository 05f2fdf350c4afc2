"""
Signature Functions
===================
HMAC signature computation for Coinbase API request authentication.
"""

import hmac
from typing import Optional, Union

SIGNATURE_ALGORITHM = "sha256"
SIGNATURE_LENGTH = 64  # hex-encoded SHA-256 digest


def build_path_with_query(path: str, query: Union[str, bytes] = "") -> str:
    """
    Join a request path and its raw query string.

    The ``?`` separator is only added when there is a query string.
    """
    if isinstance(query, bytes):
        query = query.decode("ascii")
    if not query:
        return path
    return f"{path}?{query}"


def build_message(
    timestamp: str,
    method: str,
    path_with_query: str,
    body: Optional[bytes] = b"",
) -> bytes:
    """
    Build the signed message.

    The four parts are concatenated as-is, without separators, which is
    the format the Coinbase API verifies against.
    """
    return f"{timestamp}{method}{path_with_query}".encode() + (body or b"")


def compute_signature(
    secret: Union[str, bytes],
    method: str,
    path_with_query: str,
    body: Optional[bytes],
    timestamp: str,
) -> str:
    """
    Compute HMAC-SHA256 signature for request authentication.

    The signature covers:
    - Timestamp (Unix epoch seconds, as a decimal string)
    - HTTP method
    - Request path, with the query string when present
    - Raw request body bytes

    Args:
        secret: API secret
        method: HTTP method (GET, POST, etc.)
        path_with_query: Request path (e.g., /api/v3/brokerage/accounts?limit=10)
        body: Raw request body, None when the request has no body
        timestamp: Unix timestamp in seconds

    Returns:
        Lowercase hex-encoded HMAC-SHA256 signature
    """
    if isinstance(secret, str):
        secret = secret.encode()
    message = build_message(timestamp, method, path_with_query, body)
    return hmac.new(secret, message, SIGNATURE_ALGORITHM).hexdigest()
