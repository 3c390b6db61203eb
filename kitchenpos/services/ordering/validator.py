"""Order validation service."""
import logging
from typing import Dict, List, Optional
from uuid import UUID

from kitchenpos.core.exceptions import IllegalStateError, InvalidArgumentError, NotFoundError
from kitchenpos.db.models import Menu, OrderTable
from kitchenpos.services.ordering.models import OrderLineItemRequest, OrderRequest
from kitchenpos.services.ordering.statuses import OrderType
from kitchenpos.services.persistence.menus import MenuPersistenceService
from kitchenpos.services.persistence.order_tables import OrderTablePersistenceService

logger = logging.getLogger(__name__)


class OrderValidator:
    """Checks an order request against menu and table state."""

    def __init__(
        self,
        menus: MenuPersistenceService,
        order_tables: OrderTablePersistenceService,
    ):
        self.menus = menus
        self.order_tables = order_tables

    async def validate(self, request: OrderRequest) -> tuple[Dict[UUID, Menu], Optional[OrderTable]]:
        """
        Validate a complete order request.

        Returns:
            Tuple of (menus by ID, order table for EAT_IN orders or None)
        """
        order_type = request.type
        if order_type is None:
            raise InvalidArgumentError("Order type is required")

        line_items = request.order_line_items
        if not line_items:
            raise InvalidArgumentError("An order needs at least one line item")

        menus = await self.load_menus(line_items)
        for line_item in line_items:
            self.validate_line_item(order_type, line_item, menus[line_item.menu_id])

        if order_type == OrderType.DELIVERY and not request.delivery_address:
            raise InvalidArgumentError("Delivery orders need a delivery address")

        order_table = None
        if order_type == OrderType.EAT_IN:
            order_table = await self.get_occupied_table(request.order_table_id)

        return menus, order_table

    async def load_menus(self, line_items: List[OrderLineItemRequest]) -> Dict[UUID, Menu]:
        """Load every referenced menu, failing if any is unknown."""
        menu_ids = {line_item.menu_id for line_item in line_items}
        menus = {
            menu.id: menu
            for menu in await self.menus.find_all_by_ids(
                [menu_id for menu_id in menu_ids if menu_id is not None]
            )
        }
        if len(menus) != len(menu_ids):
            raise InvalidArgumentError("Order refers to unknown menus")
        return menus

    @staticmethod
    def validate_line_item(
        order_type: OrderType, line_item: OrderLineItemRequest, menu: Menu
    ) -> None:
        """Validate one line item against its menu."""
        # EAT_IN orders may carry negative quantities
        if order_type != OrderType.EAT_IN and line_item.quantity < 0:
            raise InvalidArgumentError(
                f"Quantity must be zero or more for {order_type} orders, "
                f"got {line_item.quantity}"
            )

        if not menu.displayed:
            raise IllegalStateError(f"Menu {menu.id} is not displayed")

        if line_item.price is None or menu.price != line_item.price:
            raise InvalidArgumentError(
                f"Line price {line_item.price} does not match menu price {menu.price}"
            )

    async def get_occupied_table(self, order_table_id: Optional[UUID]) -> OrderTable:
        """Get the table for an EAT_IN order."""
        order_table = await self.order_tables.get_by_id(order_table_id)
        if order_table is None:
            raise NotFoundError(f"Order table {order_table_id} not found")
        if not order_table.occupied:
            raise IllegalStateError(f"Order table {order_table.id} is empty")
        return order_table
