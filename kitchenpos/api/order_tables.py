"""Order table API endpoints."""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from kitchenpos.core.dependencies import get_order_table_service
from kitchenpos.core.schemas import CamelModel
from kitchenpos.services.tables.models import NumberOfGuestsRequest, OrderTableRequest
from kitchenpos.services.tables.order_tables import OrderTableService

router = APIRouter()
logger = logging.getLogger(__name__)


class OrderTableResponse(CamelModel):
    """Order table response model."""
    id: UUID
    name: str
    number_of_guests: int
    occupied: bool


@router.post("/api/order-tables", response_model=OrderTableResponse, status_code=201)
async def create_order_table(
    request: OrderTableRequest,
    response: Response,
    service: OrderTableService = Depends(get_order_table_service),
):
    """Register an order table."""
    order_table = await service.create(request)
    response.headers["Location"] = f"/api/order-tables/{order_table.id}"
    return OrderTableResponse.model_validate(order_table)


@router.put("/api/order-tables/{order_table_id}/sit", response_model=OrderTableResponse)
async def sit(
    order_table_id: UUID,
    service: OrderTableService = Depends(get_order_table_service),
):
    """Seat guests at a table."""
    return OrderTableResponse.model_validate(await service.sit(order_table_id))


@router.put("/api/order-tables/{order_table_id}/clear", response_model=OrderTableResponse)
async def clear(
    order_table_id: UUID,
    service: OrderTableService = Depends(get_order_table_service),
):
    """Free a table."""
    return OrderTableResponse.model_validate(await service.clear(order_table_id))


@router.put(
    "/api/order-tables/{order_table_id}/number-of-guests",
    response_model=OrderTableResponse,
)
async def change_number_of_guests(
    order_table_id: UUID,
    request: NumberOfGuestsRequest,
    service: OrderTableService = Depends(get_order_table_service),
):
    """Change the guest count of a table."""
    order_table = await service.change_number_of_guests(order_table_id, request)
    return OrderTableResponse.model_validate(order_table)


@router.get("/api/order-tables", response_model=List[OrderTableResponse])
async def list_order_tables(service: OrderTableService = Depends(get_order_table_service)):
    """Get all order tables."""
    order_tables = await service.find_all()
    return [OrderTableResponse.model_validate(order_table) for order_table in order_tables]
