"""
Header Functions
=================
Functions for creating the Coinbase authentication headers.
"""

from typing import List, Optional, Tuple

from .models import Credentials
from .signature import compute_signature

ACCESS_KEY_HEADER = "cb-access-key"
ACCESS_SIGN_HEADER = "cb-access-sign"
ACCESS_TIMESTAMP_HEADER = "cb-access-timestamp"


def create_auth_headers(
    credentials: Credentials,
    method: str,
    path_with_query: str,
    body: Optional[bytes],
    timestamp: str,
) -> List[Tuple[str, str]]:
    """
    Create headers for a signed request.

    Args:
        credentials: API key and secret
        method: HTTP method
        path_with_query: Request path with query string
        body: Request body (None for no body)
        timestamp: Unix seconds as a decimal string, used both in the
            signature and as the timestamp header value

    Returns:
        Header pairs to append to the request, in order
    """
    signature = compute_signature(
        credentials.secret, method, path_with_query, body, timestamp
    )

    return [
        (ACCESS_KEY_HEADER, credentials.key),
        (ACCESS_SIGN_HEADER, signature),
        (ACCESS_TIMESTAMP_HEADER, timestamp),
    ]
