"""Menu group API endpoints."""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from kitchenpos.core.dependencies import get_menu_group_service
from kitchenpos.core.schemas import CamelModel
from kitchenpos.services.catalog.menu_groups import MenuGroupService
from kitchenpos.services.catalog.models import MenuGroupRequest

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuGroupResponse(CamelModel):
    """Menu group response model."""
    id: UUID
    name: str


@router.post("/api/menu-groups", response_model=MenuGroupResponse, status_code=201)
async def create_menu_group(
    request: MenuGroupRequest,
    response: Response,
    service: MenuGroupService = Depends(get_menu_group_service),
):
    """Register a menu group."""
    menu_group = await service.create(request)
    response.headers["Location"] = f"/api/menu-groups/{menu_group.id}"
    return MenuGroupResponse.model_validate(menu_group)


@router.get("/api/menu-groups", response_model=List[MenuGroupResponse])
async def list_menu_groups(service: MenuGroupService = Depends(get_menu_group_service)):
    """Get all menu groups."""
    menu_groups = await service.find_all()
    return [MenuGroupResponse.model_validate(menu_group) for menu_group in menu_groups]
