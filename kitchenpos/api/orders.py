"""Order API endpoints."""
import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response

from kitchenpos.api.menus import MenuResponse
from kitchenpos.api.order_tables import OrderTableResponse
from kitchenpos.core.dependencies import get_order_service
from kitchenpos.core.schemas import CamelModel, Money
from kitchenpos.services.ordering.models import OrderRequest
from kitchenpos.services.ordering.service import OrderService
from kitchenpos.services.ordering.statuses import OrderStatus, OrderType

router = APIRouter()
logger = logging.getLogger(__name__)


class OrderLineItemResponse(CamelModel):
    """Order line item response model."""
    seq: int
    menu: MenuResponse
    quantity: int
    price: Money


class OrderResponse(CamelModel):
    """Order response model."""
    id: UUID
    type: OrderType
    status: OrderStatus
    order_date_time: datetime
    order_line_items: List[OrderLineItemResponse] = []
    delivery_address: Optional[str] = None
    order_table: Optional[OrderTableResponse] = None


@router.post("/api/orders", response_model=OrderResponse, status_code=201)
async def create_order(
    order_request: OrderRequest,
    request: Request,
    response: Response,
    service: OrderService = Depends(get_order_service),
):
    """Place an order."""
    logger.info(
        f"[ORDERS] Create requested - type: {order_request.type}, "
        f"line items: {len(order_request.order_line_items or [])}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    order = await service.create(order_request)
    response.headers["Location"] = f"/api/orders/{order.id}"
    return OrderResponse.model_validate(order)


@router.put("/api/orders/{order_id}/accept", response_model=OrderResponse)
async def accept(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Accept a waiting order."""
    return OrderResponse.model_validate(await service.accept(order_id))


@router.put("/api/orders/{order_id}/serve", response_model=OrderResponse)
async def serve(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Serve an accepted order."""
    return OrderResponse.model_validate(await service.serve(order_id))


@router.put("/api/orders/{order_id}/start-delivery", response_model=OrderResponse)
async def start_delivery(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Start delivering a served order."""
    return OrderResponse.model_validate(await service.start_delivery(order_id))


@router.put("/api/orders/{order_id}/complete-delivery", response_model=OrderResponse)
async def complete_delivery(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Finish delivering an order."""
    return OrderResponse.model_validate(await service.complete_delivery(order_id))


@router.put("/api/orders/{order_id}/complete", response_model=OrderResponse)
async def complete(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Complete an order."""
    return OrderResponse.model_validate(await service.complete(order_id))


@router.get("/api/orders", response_model=List[OrderResponse])
async def list_orders(service: OrderService = Depends(get_order_service)):
    """Get all orders."""
    orders = await service.find_all()
    logger.info(f"[ORDERS] Found {len(orders)} orders")
    return [OrderResponse.model_validate(order) for order in orders]
