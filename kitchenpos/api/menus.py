"""Menu API endpoints."""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from kitchenpos.api.menu_groups import MenuGroupResponse
from kitchenpos.api.products import ProductResponse
from kitchenpos.core.dependencies import get_menu_service
from kitchenpos.core.schemas import CamelModel, Money
from kitchenpos.services.catalog.menus import MenuService
from kitchenpos.services.catalog.models import MenuPriceRequest, MenuRequest

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuProductResponse(CamelModel):
    """Menu product response model."""
    seq: int
    product: ProductResponse
    quantity: int


class MenuResponse(CamelModel):
    """Menu response model."""
    id: UUID
    name: str
    price: Money
    menu_group: MenuGroupResponse
    displayed: bool
    menu_products: List[MenuProductResponse] = []


@router.post("/api/menus", response_model=MenuResponse, status_code=201)
async def create_menu(
    request: MenuRequest,
    response: Response,
    service: MenuService = Depends(get_menu_service),
):
    """Register a menu."""
    logger.info(
        f"[MENUS] Create requested - name: {request.name}, price: {request.price}, "
        f"products: {len(request.menu_products or [])}"
    )
    menu = await service.create(request)
    response.headers["Location"] = f"/api/menus/{menu.id}"
    return MenuResponse.model_validate(menu)


@router.put("/api/menus/{menu_id}/price", response_model=MenuResponse)
async def change_menu_price(
    menu_id: UUID,
    request: MenuPriceRequest,
    service: MenuService = Depends(get_menu_service),
):
    """Change a menu's price."""
    return MenuResponse.model_validate(await service.change_price(menu_id, request))


@router.put("/api/menus/{menu_id}/display", response_model=MenuResponse)
async def display_menu(menu_id: UUID, service: MenuService = Depends(get_menu_service)):
    """Show a menu to customers."""
    return MenuResponse.model_validate(await service.display(menu_id))


@router.put("/api/menus/{menu_id}/hide", response_model=MenuResponse)
async def hide_menu(menu_id: UUID, service: MenuService = Depends(get_menu_service)):
    """Hide a menu from customers."""
    return MenuResponse.model_validate(await service.hide(menu_id))


@router.get("/api/menus", response_model=List[MenuResponse])
async def list_menus(service: MenuService = Depends(get_menu_service)):
    """Get all menus."""
    menus = await service.find_all()
    logger.debug(f"[MENUS] Found {len(menus)} menus")
    return [MenuResponse.model_validate(menu) for menu in menus]
