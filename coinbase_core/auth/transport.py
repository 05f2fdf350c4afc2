"""
Signing Transports
==================
httpx transports that sign every outbound request before handing it to an
underlying transport.

Usage:
    from coinbase_core.auth import SigningTransport

    transport = SigningTransport(key, secret)
    with httpx.Client(transport=transport) as client:
        client.get("https://api.coinbase.com/api/v3/brokerage/accounts")
"""

import time
from typing import Callable, Optional, Union

import httpx
import structlog

from ..exceptions import TransportError
from .headers import create_auth_headers
from .models import Credentials
from .signature import build_path_with_query

logger = structlog.get_logger(__name__)

Clock = Callable[[], float]


class _RequestSigner:
    """Shared signing step for the sync and async transports."""

    def __init__(self, key: str, secret: Union[str, bytes], clock: Clock = time.time):
        self._credentials = Credentials.create(key, secret)
        self._clock = clock

    def _sign(self, request: httpx.Request, body: bytes) -> httpx.Request:
        path_with_query = build_path_with_query(request.url.path, request.url.query)
        timestamp = str(int(self._clock()))

        auth_headers = create_auth_headers(
            self._credentials, request.method, path_with_query, body, timestamp
        )

        # Appended, not set: existing values under the same names are kept.
        headers = httpx.Headers(
            list(request.headers.raw)
            + [(name.encode(), value.encode()) for name, value in auth_headers]
        )

        logger.debug(
            "Signed request",
            method=request.method,
            path=path_with_query,
            timestamp=timestamp,
        )

        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=request.extensions,
        )

    def _wrap_error(self, request: httpx.Request, exc: httpx.TransportError) -> TransportError:
        logger.warning(
            "Request failed",
            method=request.method,
            path=request.url.path,
            error=str(exc),
        )
        return TransportError(f"error making request: {exc}")


class SigningTransport(_RequestSigner, httpx.BaseTransport):
    """
    Synchronous transport that adds Coinbase auth headers to each request.

    Each request is sent exactly once; there are no retries.
    """

    def __init__(
        self,
        key: str,
        secret: Union[str, bytes],
        transport: Optional[httpx.BaseTransport] = None,
        clock: Clock = time.time,
    ):
        super().__init__(key, secret, clock)
        self._transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        # read() buffers the body and leaves the request re-readable.
        body = request.read()
        signed = self._sign(request, body)
        try:
            return self._transport.handle_request(signed)
        except httpx.TransportError as exc:
            raise self._wrap_error(request, exc) from exc

    def close(self) -> None:
        self._transport.close()


class AsyncSigningTransport(_RequestSigner, httpx.AsyncBaseTransport):
    """Async counterpart of SigningTransport."""

    def __init__(
        self,
        key: str,
        secret: Union[str, bytes],
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Clock = time.time,
    ):
        super().__init__(key, secret, clock)
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        signed = self._sign(request, body)
        try:
            return await self._transport.handle_async_request(signed)
        except httpx.TransportError as exc:
            raise self._wrap_error(request, exc) from exc

    async def aclose(self) -> None:
        await self._transport.aclose()
