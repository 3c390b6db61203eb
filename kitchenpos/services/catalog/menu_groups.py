"""Menu group service."""
import logging
import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from kitchenpos.core.exceptions import InvalidArgumentError
from kitchenpos.db.models import MenuGroup
from kitchenpos.services.catalog.models import MenuGroupRequest
from kitchenpos.services.persistence.menu_groups import MenuGroupPersistenceService

logger = logging.getLogger(__name__)


class MenuGroupService:
    """Service for menu groups."""

    def __init__(self, db: AsyncSession):
        self.menu_groups = MenuGroupPersistenceService(db)

    async def create(self, request: MenuGroupRequest) -> MenuGroup:
        """Register a menu group."""
        if not request.name:
            raise InvalidArgumentError("Menu group name is required")

        menu_group = MenuGroup(id=uuid.uuid4(), name=request.name)
        await self.menu_groups.save(menu_group)
        logger.info(f"[MENU GROUPS] Created menu group {menu_group.id} ({menu_group.name})")
        return menu_group

    async def find_all(self) -> List[MenuGroup]:
        """Get all menu groups."""
        return await self.menu_groups.find_all()
