"""Database models."""
from datetime import datetime
from decimal import Decimal
import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import declarative_base, relationship

from kitchenpos.services.ordering.statuses import OrderStatus, OrderType

Base = declarative_base()

# Relationships are loaded with "selectin" so that async sessions never
# trigger an implicit lazy load.


class Product(Base):
    """Product model."""

    __tablename__ = "product"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    price = Column(Numeric(19, 2), nullable=False)


class MenuGroup(Base):
    """Menu group model."""

    __tablename__ = "menu_group"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)


class MenuProduct(Base):
    """Product line of a menu."""

    __tablename__ = "menu_product"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    menu_id = Column(Uuid, ForeignKey("menu.id"), nullable=False)
    product_id = Column(Uuid, ForeignKey("product.id"), nullable=False)
    quantity = Column(Integer, nullable=False)

    # Relationships
    menu = relationship("Menu", back_populates="menu_products")
    product = relationship("Product", lazy="selectin")

    @property
    def amount(self) -> Decimal:
        """Product price multiplied by quantity."""
        return self.product.price * self.quantity


class Menu(Base):
    """Menu model."""

    __tablename__ = "menu"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    price = Column(Numeric(19, 2), nullable=False)
    menu_group_id = Column(Uuid, ForeignKey("menu_group.id"), nullable=False)
    displayed = Column(Boolean, default=False, nullable=False)

    # Relationships
    menu_group = relationship("MenuGroup", lazy="selectin")
    menu_products = relationship(
        "MenuProduct",
        back_populates="menu",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def products_amount(self) -> Decimal:
        """Sum of product price times quantity over all menu products."""
        return sum((menu_product.amount for menu_product in self.menu_products), Decimal("0"))

    def is_overpriced(self) -> bool:
        """Whether the menu costs more than its products bought separately."""
        return self.price > self.products_amount()


class OrderTable(Base):
    """Order table model."""

    __tablename__ = "order_table"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    number_of_guests = Column(Integer, default=0, nullable=False)
    occupied = Column(Boolean, default=False, nullable=False)

    def clear(self) -> None:
        """Free the table."""
        self.number_of_guests = 0
        self.occupied = False


class Order(Base):
    """Order model."""

    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    type = Column(Enum(OrderType, native_enum=False, length=16), nullable=False)
    status = Column(Enum(OrderStatus, native_enum=False, length=16), nullable=False)
    order_date_time = Column(DateTime, default=datetime.now, nullable=False)
    delivery_address = Column(String, nullable=True)
    order_table_id = Column(Uuid, ForeignKey("order_table.id"), nullable=True)

    # Relationships
    order_table = relationship("OrderTable", lazy="selectin")
    order_line_items = relationship(
        "OrderLineItem",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderLineItem.seq",
    )

    def delivery_amount(self) -> Decimal:
        """Menu price times quantity summed over the line items."""
        return sum(
            (item.menu.price * item.quantity for item in self.order_line_items),
            Decimal("0"),
        )


class OrderLineItem(Base):
    """Order line item model."""

    __tablename__ = "order_line_item"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Uuid, ForeignKey("orders.id"), nullable=False)
    menu_id = Column(Uuid, ForeignKey("menu.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(19, 2), nullable=False)  # Menu price when ordered

    # Relationships
    order = relationship("Order", back_populates="order_line_items")
    menu = relationship("Menu", lazy="selectin")
