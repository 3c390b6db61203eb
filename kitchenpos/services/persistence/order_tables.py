"""Order table persistence service."""
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from kitchenpos.db.models import OrderTable


class OrderTablePersistenceService:
    """Service for persisting order tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, order_table: OrderTable) -> OrderTable:
        """Insert or update an order table and commit."""
        self.db.add(order_table)
        await self.db.commit()
        return order_table

    async def get_by_id(self, order_table_id: Optional[UUID]) -> Optional[OrderTable]:
        """Get order table by ID."""
        if order_table_id is None:
            return None
        return await self.db.get(OrderTable, order_table_id)

    async def find_all(self) -> List[OrderTable]:
        """Get all order tables."""
        result = await self.db.execute(select(OrderTable))
        return list(result.scalars().all())
