"""Order request models."""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from kitchenpos.core.schemas import CamelModel
from kitchenpos.services.ordering.statuses import OrderType


class OrderLineItemRequest(CamelModel):
    """Order line item as sent by the client."""

    menu_id: Optional[UUID] = None
    quantity: int = 0
    price: Optional[Decimal] = None  # Must match the current menu price


class OrderRequest(CamelModel):
    """Order placement request."""

    type: Optional[OrderType] = None
    order_line_items: Optional[List[OrderLineItemRequest]] = None
    delivery_address: Optional[str] = None
    order_table_id: Optional[UUID] = None
