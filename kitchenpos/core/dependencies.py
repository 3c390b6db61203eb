"""FastAPI dependencies."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from kitchenpos.db.database import get_db
from kitchenpos.services.catalog.menu_groups import MenuGroupService
from kitchenpos.services.catalog.menus import MenuService
from kitchenpos.services.catalog.products import ProductService
from kitchenpos.services.clients.kitchenriders import HttpKitchenridersClient, KitchenridersClient
from kitchenpos.services.clients.profanity import ProfanityClient, PurgomalumClient
from kitchenpos.services.ordering.service import OrderService
from kitchenpos.services.tables.order_tables import OrderTableService


def get_profanity_client() -> ProfanityClient:
    """Get profanity client instance."""
    return PurgomalumClient()


def get_kitchenriders_client() -> KitchenridersClient:
    """Get rider dispatch client instance."""
    return HttpKitchenridersClient()


def get_product_service(
    db: AsyncSession = Depends(get_db),
    profanity_client: ProfanityClient = Depends(get_profanity_client),
) -> ProductService:
    """Get product service bound to the request session."""
    return ProductService(db, profanity_client)


def get_menu_group_service(db: AsyncSession = Depends(get_db)) -> MenuGroupService:
    """Get menu group service bound to the request session."""
    return MenuGroupService(db)


def get_menu_service(
    db: AsyncSession = Depends(get_db),
    profanity_client: ProfanityClient = Depends(get_profanity_client),
) -> MenuService:
    """Get menu service bound to the request session."""
    return MenuService(db, profanity_client)


def get_order_table_service(db: AsyncSession = Depends(get_db)) -> OrderTableService:
    """Get order table service bound to the request session."""
    return OrderTableService(db)


def get_order_service(
    db: AsyncSession = Depends(get_db),
    kitchenriders_client: KitchenridersClient = Depends(get_kitchenriders_client),
) -> OrderService:
    """Get order service bound to the request session."""
    return OrderService(db, kitchenriders_client)
