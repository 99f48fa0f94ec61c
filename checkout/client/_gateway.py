"""
HTTP order gateway — PUT /api/orders.
"""

from __future__ import annotations

import httpx
from kungfu import Result, Ok, Error
from checkout import lift as L

from checkout.config import CheckoutConfig
from checkout.gateway import GatewayError, OrderResult, OrderSubmission
from checkout.logging import get_logger
from checkout.wire import OrderRequest, OrderResponse
from checkout.client._decode import decode, server_message

logger = get_logger(__name__)


class HTTPOrderGateway:
    """
    Submits orders to the backend.

    Non-2xx responses become GatewayError with the backend's `error` text
    attached as server_message. A 2xx without order ids is also an error.
    No idempotency key is sent: a retried submit may create a second order.
    """

    def __init__(self, client: httpx.AsyncClient, config: CheckoutConfig | None = None) -> None:
        self._client = client
        self._config = config or CheckoutConfig()

    @property
    def url(self) -> str:
        return f"{self._config.base_url}{self._config.orders_path}"

    async def submit(self, order: OrderSubmission) -> Result[OrderResult, GatewayError]:
        async def put() -> httpx.Response:
            body = OrderRequest.from_domain(order).to_wire()
            return await self._client.put(self.url, json=body)

        sent = await L.catching_async(
            put,
            on_error=lambda e: GatewayError(f"Order submission failed: {e}", cause=e),
        )

        match sent:
            case Error(err):
                logger.warning("order_submit_unreachable", url=self.url, error=err.message)
                return Error(err)
            case Ok(response) if response.is_error:
                message = server_message(response)
                logger.warning(
                    "order_submit_rejected",
                    status=response.status_code,
                    server_message=message,
                )
                return Error(GatewayError(
                    f"Order submission returned {response.status_code}",
                    status_code=response.status_code,
                    server_message=message,
                ))
            case Ok(response):
                match decode(response, OrderResponse):
                    case Ok(outcome):
                        return outcome
                    case Error(exc):
                        return Error(GatewayError(
                            "Malformed order response",
                            status_code=response.status_code,
                            cause=exc,
                        ))


__all__ = ("HTTPOrderGateway",)
