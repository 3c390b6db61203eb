"""Delivery dispatch clients."""
import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from uuid import UUID

import httpx

from kitchenpos.core.config import settings

logger = logging.getLogger(__name__)


class KitchenridersClient(ABC):
    """Abstract base class for requesting a rider."""

    @abstractmethod
    async def request_delivery(
        self, order_id: UUID, amount: Decimal, delivery_address: str
    ) -> None:
        """Ask for a rider to deliver the order."""
        pass


class HttpKitchenridersClient(KitchenridersClient):
    """Rider dispatch over HTTP. The response body is ignored."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.kitchenriders_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds

    async def request_delivery(
        self, order_id: UUID, amount: Decimal, delivery_address: str
    ) -> None:
        """
        Post a delivery request.

        Args:
            order_id: ID of the accepted order
            amount: Order price used to price the delivery
            delivery_address: Where the rider should go

        Raises:
            httpx.HTTPError: If the dispatch service is unreachable or refuses
        """
        logger.info(
            f"[KITCHENRIDERS] Requesting delivery - order: {order_id}, amount: {amount}"
        )
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                f"{self.base_url}/api/deliveries",
                json={
                    "orderId": str(order_id),
                    "amount": str(amount),
                    "deliveryAddress": delivery_address,
                },
            )
            response.raise_for_status()
