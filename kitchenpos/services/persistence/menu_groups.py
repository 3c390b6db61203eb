"""Menu group persistence service."""
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from kitchenpos.db.models import MenuGroup


class MenuGroupPersistenceService:
    """Service for persisting menu groups."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, menu_group: MenuGroup) -> MenuGroup:
        """Insert a menu group and commit."""
        self.db.add(menu_group)
        await self.db.commit()
        return menu_group

    async def get_by_id(self, menu_group_id: Optional[UUID]) -> Optional[MenuGroup]:
        """Get menu group by ID."""
        if menu_group_id is None:
            return None
        return await self.db.get(MenuGroup, menu_group_id)

    async def find_all(self) -> List[MenuGroup]:
        """Get all menu groups."""
        result = await self.db.execute(select(MenuGroup))
        return list(result.scalars().all())
