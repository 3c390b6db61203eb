"""Order service."""
import logging
import uuid
from datetime import datetime
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from kitchenpos.core.exceptions import NotFoundError
from kitchenpos.db.models import Order, OrderLineItem
from kitchenpos.services.clients.kitchenriders import KitchenridersClient
from kitchenpos.services.ordering.models import OrderRequest
from kitchenpos.services.ordering.statuses import OrderStatus, OrderType
from kitchenpos.services.ordering.transitions import StatusTransitionHandler
from kitchenpos.services.ordering.validator import OrderValidator
from kitchenpos.services.persistence.menus import MenuPersistenceService
from kitchenpos.services.persistence.order_tables import OrderTablePersistenceService
from kitchenpos.services.persistence.orders import OrderPersistenceService

logger = logging.getLogger(__name__)


class OrderService:
    """Places orders and drives them through their lifecycle."""

    def __init__(self, db: AsyncSession, kitchenriders_client: KitchenridersClient):
        self.orders = OrderPersistenceService(db)
        self.validator = OrderValidator(
            menus=MenuPersistenceService(db),
            order_tables=OrderTablePersistenceService(db),
        )
        self.kitchenriders_client = kitchenriders_client

    async def create(self, request: OrderRequest) -> Order:
        """
        Place an order.

        Args:
            request: Order type, line items and the channel-specific fields

        Returns:
            The stored order in WAITING status

        Raises:
            InvalidArgumentError: Missing type, empty or invalid line items,
                unknown menus, or a DELIVERY order without an address
            NotFoundError: EAT_IN order for an unknown table
            IllegalStateError: Hidden menu, or EAT_IN order for an empty table
        """
        menus, order_table = await self.validator.validate(request)

        order_line_items = [
            OrderLineItem(
                menu=menus[line_item.menu_id],
                quantity=line_item.quantity,
                price=menus[line_item.menu_id].price,
            )
            for line_item in request.order_line_items
        ]

        order = Order(
            id=uuid.uuid4(),
            type=request.type,
            status=OrderStatus.WAITING,
            order_date_time=datetime.now(),
            order_line_items=order_line_items,
            delivery_address=(
                request.delivery_address if request.type == OrderType.DELIVERY else None
            ),
            order_table=order_table,
        )

        await self.orders.save(order)
        logger.info(
            f"[ORDERS] Created {order.type} order {order.id} "
            f"with {len(order_line_items)} line items"
        )
        return order

    async def accept(self, order_id: UUID) -> Order:
        """Accept a waiting order, calling a rider for DELIVERY orders."""
        order = await self._get_order(order_id)
        StatusTransitionHandler.check_transition(order, OrderStatus.ACCEPTED)

        if order.type == OrderType.DELIVERY:
            await self.kitchenriders_client.request_delivery(
                order.id, order.delivery_amount(), order.delivery_address
            )

        StatusTransitionHandler.transition(order, OrderStatus.ACCEPTED)
        return await self.orders.save(order)

    async def serve(self, order_id: UUID) -> Order:
        """Serve an accepted order."""
        return await self._transition(order_id, OrderStatus.SERVED)

    async def start_delivery(self, order_id: UUID) -> Order:
        """Hand a served DELIVERY order to the rider."""
        return await self._transition(order_id, OrderStatus.DELIVERING)

    async def complete_delivery(self, order_id: UUID) -> Order:
        """Mark a DELIVERY order as dropped off."""
        return await self._transition(order_id, OrderStatus.DELIVERED)

    async def complete(self, order_id: UUID) -> Order:
        """Complete an order. Completing an EAT_IN order frees its table."""
        order = await self._get_order(order_id)
        StatusTransitionHandler.transition(order, OrderStatus.COMPLETED)

        if order.type == OrderType.EAT_IN and order.order_table is not None:
            order.order_table.clear()
            logger.info(f"[ORDERS] Cleared table {order.order_table.id} after order {order.id}")

        return await self.orders.save(order)

    async def find_all(self) -> List[Order]:
        """Get all orders."""
        return await self.orders.find_all()

    async def _transition(self, order_id: UUID, target: OrderStatus) -> Order:
        order = await self._get_order(order_id)
        StatusTransitionHandler.transition(order, target)
        return await self.orders.save(order)

    async def _get_order(self, order_id: UUID) -> Order:
        order = await self.orders.get_order_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return order
