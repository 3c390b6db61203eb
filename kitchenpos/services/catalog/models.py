"""Catalog request models."""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from kitchenpos.core.schemas import CamelModel


class ProductRequest(CamelModel):
    """Product registration request."""

    name: Optional[str] = None
    price: Optional[Decimal] = None


class ProductPriceRequest(CamelModel):
    """Product price change request."""

    price: Optional[Decimal] = None


class MenuGroupRequest(CamelModel):
    """Menu group registration request."""

    name: Optional[str] = None


class MenuProductRequest(CamelModel):
    """Product line of a menu registration request."""

    product_id: Optional[UUID] = None
    quantity: int = 0


class MenuRequest(CamelModel):
    """Menu registration request."""

    name: Optional[str] = None
    price: Optional[Decimal] = None
    menu_group_id: Optional[UUID] = None
    displayed: bool = False
    menu_products: Optional[List[MenuProductRequest]] = None


class MenuPriceRequest(CamelModel):
    """Menu price change request."""

    price: Optional[Decimal] = None
