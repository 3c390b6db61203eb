"""Product service."""
import logging
import uuid
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from kitchenpos.core.exceptions import InvalidArgumentError, NotFoundError
from kitchenpos.db.models import Product
from kitchenpos.services.catalog.models import ProductPriceRequest, ProductRequest
from kitchenpos.services.clients.profanity import ProfanityClient
from kitchenpos.services.persistence.menus import MenuPersistenceService
from kitchenpos.services.persistence.products import ProductPersistenceService

logger = logging.getLogger(__name__)


def validate_price(price: Optional[Decimal]) -> Decimal:
    """Reject missing and negative prices."""
    if price is None or price < 0:
        raise InvalidArgumentError(f"Price must be zero or more, got {price}")
    return price


class ProductService:
    """Registers products and keeps menus consistent with their prices."""

    def __init__(self, db: AsyncSession, profanity_client: ProfanityClient):
        self.products = ProductPersistenceService(db)
        self.menus = MenuPersistenceService(db)
        self.profanity_client = profanity_client

    async def create(self, request: ProductRequest) -> Product:
        """Register a product."""
        price = validate_price(request.price)
        name = request.name
        if name is None or await self.profanity_client.contains_profanity(name):
            raise InvalidArgumentError(f"Invalid product name: {name!r}")

        product = Product(id=uuid.uuid4(), name=name, price=price)
        await self.products.save(product)
        logger.info(f"[PRODUCTS] Created product {product.id} ({name}, {price})")
        return product

    async def change_price(self, product_id: UUID, request: ProductPriceRequest) -> Product:
        """
        Change a product's price.

        Menus that would cost more than their products after the change are
        hidden.
        """
        price = validate_price(request.price)
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")

        product.price = price
        for menu in await self.menus.find_all_by_product_id(product.id):
            if menu.is_overpriced():
                menu.displayed = False
                logger.info(
                    f"[PRODUCTS] Hid menu {menu.id}: price {menu.price} exceeds "
                    f"products amount {menu.products_amount()}"
                )

        await self.products.save(product)
        logger.info(f"[PRODUCTS] Changed price of product {product.id} to {price}")
        return product

    async def find_all(self) -> List[Product]:
        """Get all products."""
        return await self.products.find_all()
