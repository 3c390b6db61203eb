"""Product persistence service."""
from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from kitchenpos.db.models import Product


class ProductPersistenceService:
    """Service for persisting products."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, product: Product) -> Product:
        """Insert or update a product and commit."""
        self.db.add(product)
        await self.db.commit()
        return product

    async def get_by_id(self, product_id: Optional[UUID]) -> Optional[Product]:
        """Get product by ID."""
        if product_id is None:
            return None
        return await self.db.get(Product, product_id)

    async def find_all_by_ids(self, product_ids: Sequence[UUID]) -> List[Product]:
        """Get every product whose ID is in the given list."""
        result = await self.db.execute(
            select(Product).where(Product.id.in_(list(product_ids)))
        )
        return list(result.scalars().all())

    async def find_all(self) -> List[Product]:
        """Get all products."""
        result = await self.db.execute(select(Product))
        return list(result.scalars().all())
