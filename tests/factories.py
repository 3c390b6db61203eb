"""Test data stored straight through the ORM, bypassing service validation."""
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from kitchenpos.db.models import (
    Menu,
    MenuGroup,
    MenuProduct,
    Order,
    OrderLineItem,
    OrderTable,
    Product,
)
from kitchenpos.services.ordering.statuses import OrderStatus, OrderType


async def _save(db: AsyncSession, entity):
    db.add(entity)
    await db.commit()
    return entity


async def create_product(
    db: AsyncSession, name: str = "fried chicken", price: Decimal = Decimal("16000")
) -> Product:
    return await _save(db, Product(id=uuid.uuid4(), name=name, price=price))


async def create_menu_group(db: AsyncSession, name: str = "recommended") -> MenuGroup:
    return await _save(db, MenuGroup(id=uuid.uuid4(), name=name))


async def create_menu(
    db: AsyncSession,
    menu_group: MenuGroup,
    products: Sequence[Tuple[Product, int]],
    price: Decimal = Decimal("19000"),
    displayed: bool = True,
    name: str = "chicken set",
) -> Menu:
    return await _save(
        db,
        Menu(
            id=uuid.uuid4(),
            name=name,
            price=price,
            menu_group=menu_group,
            displayed=displayed,
            menu_products=[
                MenuProduct(product=product, quantity=quantity)
                for product, quantity in products
            ],
        ),
    )


async def create_order_table(
    db: AsyncSession,
    occupied: bool = False,
    number_of_guests: int = 0,
    name: str = "table 1",
) -> OrderTable:
    return await _save(
        db,
        OrderTable(
            id=uuid.uuid4(),
            name=name,
            number_of_guests=number_of_guests,
            occupied=occupied,
        ),
    )


async def create_order(
    db: AsyncSession,
    menu: Menu,
    order_type: OrderType = OrderType.DELIVERY,
    status: OrderStatus = OrderStatus.WAITING,
    quantity: int = 1,
    delivery_address: Optional[str] = "1 Main Street",
    order_table: Optional[OrderTable] = None,
) -> Order:
    return await _save(
        db,
        Order(
            id=uuid.uuid4(),
            type=order_type,
            status=status,
            order_date_time=datetime.now(),
            delivery_address=delivery_address,
            order_table=order_table,
            order_line_items=[
                OrderLineItem(menu=menu, quantity=quantity, price=menu.price)
            ],
        ),
    )
