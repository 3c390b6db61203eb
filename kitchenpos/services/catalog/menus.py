"""Menu service."""
import logging
import uuid
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from kitchenpos.core.exceptions import IllegalStateError, InvalidArgumentError, NotFoundError
from kitchenpos.db.models import Menu, MenuProduct
from kitchenpos.services.catalog.models import MenuPriceRequest, MenuRequest
from kitchenpos.services.catalog.products import validate_price
from kitchenpos.services.clients.profanity import ProfanityClient
from kitchenpos.services.persistence.menu_groups import MenuGroupPersistenceService
from kitchenpos.services.persistence.menus import MenuPersistenceService
from kitchenpos.services.persistence.products import ProductPersistenceService

logger = logging.getLogger(__name__)


class MenuService:
    """Registers menus and guards their price and display state."""

    def __init__(self, db: AsyncSession, profanity_client: ProfanityClient):
        self.menus = MenuPersistenceService(db)
        self.menu_groups = MenuGroupPersistenceService(db)
        self.products = ProductPersistenceService(db)
        self.profanity_client = profanity_client

    async def create(self, request: MenuRequest) -> Menu:
        """
        Register a menu.

        Raises:
            InvalidArgumentError: Bad price, name, or menu products
            NotFoundError: Unknown menu group
        """
        price = validate_price(request.price)
        menu_group = await self.menu_groups.get_by_id(request.menu_group_id)
        if menu_group is None:
            raise NotFoundError(f"Menu group {request.menu_group_id} not found")

        menu_product_requests = request.menu_products
        if not menu_product_requests:
            raise InvalidArgumentError("A menu needs at least one product")

        product_ids = {item.product_id for item in menu_product_requests}
        products = {
            product.id: product
            for product in await self.products.find_all_by_ids(
                [product_id for product_id in product_ids if product_id is not None]
            )
        }
        if len(products) != len(product_ids):
            raise InvalidArgumentError("Menu refers to unknown products")

        menu_products = []
        for item in menu_product_requests:
            if item.quantity < 0:
                raise InvalidArgumentError(
                    f"Product quantity must be zero or more, got {item.quantity}"
                )
            menu_products.append(
                MenuProduct(product=products[item.product_id], quantity=item.quantity)
            )

        menu = Menu(
            id=uuid.uuid4(),
            price=price,
            menu_group=menu_group,
            displayed=request.displayed,
            menu_products=menu_products,
        )
        if menu.is_overpriced():
            raise InvalidArgumentError(
                f"Menu price {price} exceeds products amount {menu.products_amount()}"
            )

        name = request.name
        if name is None or await self.profanity_client.contains_profanity(name):
            raise InvalidArgumentError(f"Invalid menu name: {name!r}")
        menu.name = name

        await self.menus.save(menu)
        logger.info(f"[MENUS] Created menu {menu.id} ({name}, {price})")
        return menu

    async def change_price(self, menu_id: UUID, request: MenuPriceRequest) -> Menu:
        """Change a menu's price, keeping it within its products amount."""
        price = validate_price(request.price)
        menu = await self._get_menu(menu_id)

        amount = menu.products_amount()
        if price > amount:
            raise InvalidArgumentError(f"Menu price {price} exceeds products amount {amount}")

        menu.price = price
        await self.menus.save(menu)
        logger.info(f"[MENUS] Changed price of menu {menu.id} to {price}")
        return menu

    async def display(self, menu_id: UUID) -> Menu:
        """Show a menu to customers."""
        menu = await self._get_menu(menu_id)
        if menu.is_overpriced():
            raise IllegalStateError(
                f"Menu {menu.id} costs {menu.price}, more than its products "
                f"amount {menu.products_amount()}"
            )

        menu.displayed = True
        await self.menus.save(menu)
        logger.info(f"[MENUS] Displayed menu {menu.id}")
        return menu

    async def hide(self, menu_id: UUID) -> Menu:
        """Hide a menu from customers."""
        menu = await self._get_menu(menu_id)
        menu.displayed = False
        await self.menus.save(menu)
        logger.info(f"[MENUS] Hid menu {menu.id}")
        return menu

    async def find_all(self) -> List[Menu]:
        """Get all menus."""
        return await self.menus.find_all()

    async def _get_menu(self, menu_id: UUID) -> Menu:
        menu = await self.menus.get_by_id(menu_id)
        if menu is None:
            raise NotFoundError(f"Menu {menu_id} not found")
        return menu
