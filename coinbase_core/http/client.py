from typing import Optional, Type, TypeVar, Union

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from ..auth.transport import AsyncSigningTransport
from ..brokerage.accounts import Accounts
from ..brokerage.orders import Order, OrderRequest
from ..config import API_URL, ClientConfig
from ..exceptions import ResponseDecodeError, StatusNotOKError

# Generic type for Pydantic models
T = TypeVar("T", bound=BaseModel)

logger = structlog.get_logger(__name__)


class CoinbaseClient:
    """
    Async client for the Coinbase Advanced Trade API.

    Every request goes through an AsyncSigningTransport, so the API key and
    secret are attached as cb-access-* headers without any per-call work.

    Features:
    - Connection pooling (via httpx.AsyncClient).
    - Pydantic model deserialization.
    - One attempt per call: no retries, no caching.
    """

    def __init__(
        self,
        key: str,
        secret: Union[str, bytes],
        base_url: str = API_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=AsyncSigningTransport(key, secret, transport=transport),
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CoinbaseClient":
        config = config or ClientConfig()
        return cls(
            config.api_key,
            config.api_secret,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        response_model: Type[T],
        **kwargs,
    ) -> T:
        """Send one request and decode a 200 response into response_model."""
        response = await self.client.request(method, path, **kwargs)

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Unexpected status code",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise StatusNotOKError(response.status_code, response.text)

        try:
            return response_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Failed to decode response", method=method, path=path, error=str(e))
            raise ResponseDecodeError(
                f"failed to decode response: {e}",
                status_code=response.status_code,
                details=response.text,
            ) from e

    async def accounts(self) -> Accounts:
        """
        List the brokerage accounts of the authenticated user.

        https://docs.cloud.coinbase.com/advanced-trade-api/reference/retailbrokerageapi_getaccounts
        """
        return await self._request("GET", "/brokerage/accounts", Accounts)

    async def create_order(self, order: OrderRequest) -> Order:
        """
        Create an order for a product (BASE-QUOTE) and side.

        https://docs.cloud.coinbase.com/advanced-trade-api/reference/retailbrokerageapi_postorder
        """
        return await self._request(
            "POST", "/brokerage/orders", Order, json=order.to_payload()
        )
