"""Order persistence service."""
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, exists

from kitchenpos.db.models import Order, OrderTable
from kitchenpos.services.ordering.statuses import OrderStatus


class OrderPersistenceService:
    """Service for persisting order data."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, order: Order) -> Order:
        """Insert or update an order and commit."""
        self.db.add(order)
        await self.db.commit()
        return order

    async def get_order_by_id(self, order_id: UUID) -> Optional[Order]:
        """Get order by ID with items."""
        return await self.db.get(Order, order_id)

    async def find_all(self) -> List[Order]:
        """Get all orders, oldest first."""
        result = await self.db.execute(select(Order).order_by(Order.order_date_time))
        return list(result.scalars().all())

    async def exists_by_order_table_and_status_not(
        self, order_table: OrderTable, status: OrderStatus
    ) -> bool:
        """Check whether the table has an order in any status but the given one."""
        result = await self.db.execute(
            select(
                exists().where(
                    Order.order_table_id == order_table.id,
                    Order.status != status,
                )
            )
        )
        return bool(result.scalar())
