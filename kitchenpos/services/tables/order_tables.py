"""Order table service."""
import logging
import uuid
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from kitchenpos.core.exceptions import IllegalStateError, InvalidArgumentError, NotFoundError
from kitchenpos.db.models import OrderTable
from kitchenpos.services.ordering.statuses import OrderStatus
from kitchenpos.services.persistence.order_tables import OrderTablePersistenceService
from kitchenpos.services.persistence.orders import OrderPersistenceService
from kitchenpos.services.tables.models import NumberOfGuestsRequest, OrderTableRequest

logger = logging.getLogger(__name__)


class OrderTableService:
    """Seats guests at tables and frees them again."""

    def __init__(self, db: AsyncSession):
        self.order_tables = OrderTablePersistenceService(db)
        self.orders = OrderPersistenceService(db)

    async def create(self, request: OrderTableRequest) -> OrderTable:
        """Register an empty table."""
        if not request.name:
            raise InvalidArgumentError("Order table name is required")

        order_table = OrderTable(
            id=uuid.uuid4(),
            name=request.name,
            number_of_guests=0,
            occupied=False,
        )
        await self.order_tables.save(order_table)
        logger.info(f"[ORDER TABLES] Created table {order_table.id} ({order_table.name})")
        return order_table

    async def sit(self, order_table_id: UUID) -> OrderTable:
        """Mark a table as occupied."""
        order_table = await self._get_order_table(order_table_id)
        order_table.occupied = True
        await self.order_tables.save(order_table)
        logger.info(f"[ORDER TABLES] Table {order_table.id} occupied")
        return order_table

    async def clear(self, order_table_id: UUID) -> OrderTable:
        """
        Free a table.

        Raises:
            IllegalStateError: An order on the table is not completed yet
        """
        order_table = await self._get_order_table(order_table_id)
        if await self.orders.exists_by_order_table_and_status_not(
            order_table, OrderStatus.COMPLETED
        ):
            raise IllegalStateError(f"Table {order_table.id} still has open orders")

        order_table.clear()
        await self.order_tables.save(order_table)
        logger.info(f"[ORDER TABLES] Table {order_table.id} cleared")
        return order_table

    async def change_number_of_guests(
        self, order_table_id: UUID, request: NumberOfGuestsRequest
    ) -> OrderTable:
        """Change the guest count of an occupied table."""
        number_of_guests = request.number_of_guests
        if number_of_guests < 0:
            raise InvalidArgumentError(
                f"Number of guests must be zero or more, got {number_of_guests}"
            )

        order_table = await self._get_order_table(order_table_id)
        if not order_table.occupied:
            raise IllegalStateError(f"Table {order_table.id} is empty")

        order_table.number_of_guests = number_of_guests
        await self.order_tables.save(order_table)
        logger.info(
            f"[ORDER TABLES] Table {order_table.id} now seats {number_of_guests} guests"
        )
        return order_table

    async def find_all(self) -> List[OrderTable]:
        """Get all order tables."""
        return await self.order_tables.find_all()

    async def _get_order_table(self, order_table_id: UUID) -> OrderTable:
        order_table = await self.order_tables.get_by_id(order_table_id)
        if order_table is None:
            raise NotFoundError(f"Order table {order_table_id} not found")
        return order_table
