"""Menu persistence service."""
from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from kitchenpos.db.models import Menu, MenuProduct


class MenuPersistenceService:
    """Service for persisting menus and their menu products."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, menu: Menu) -> Menu:
        """Insert or update a menu and commit."""
        self.db.add(menu)
        await self.db.commit()
        return menu

    async def get_by_id(self, menu_id: Optional[UUID]) -> Optional[Menu]:
        """Get menu by ID with its menu products."""
        if menu_id is None:
            return None
        return await self.db.get(Menu, menu_id)

    async def find_all_by_ids(self, menu_ids: Sequence[UUID]) -> List[Menu]:
        """Get every menu whose ID is in the given list."""
        result = await self.db.execute(
            select(Menu).where(Menu.id.in_(list(menu_ids)))
        )
        return list(result.scalars().all())

    async def find_all_by_product_id(self, product_id: UUID) -> List[Menu]:
        """Get every menu that contains the given product."""
        result = await self.db.execute(
            select(Menu)
            .join(Menu.menu_products)
            .where(MenuProduct.product_id == product_id)
            .distinct()
        )
        return list(result.scalars().all())

    async def find_all(self) -> List[Menu]:
        """Get all menus."""
        result = await self.db.execute(select(Menu))
        return list(result.scalars().all())
