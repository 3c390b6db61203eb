"""Product API endpoints."""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from kitchenpos.core.dependencies import get_product_service
from kitchenpos.core.schemas import CamelModel, Money
from kitchenpos.services.catalog.models import ProductPriceRequest, ProductRequest
from kitchenpos.services.catalog.products import ProductService

router = APIRouter()
logger = logging.getLogger(__name__)


class ProductResponse(CamelModel):
    """Product response model."""
    id: UUID
    name: str
    price: Money


@router.post("/api/products", response_model=ProductResponse, status_code=201)
async def create_product(
    request: ProductRequest,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """Register a product."""
    logger.info(f"[PRODUCTS] Create requested - name: {request.name}, price: {request.price}")
    product = await service.create(request)
    response.headers["Location"] = f"/api/products/{product.id}"
    return ProductResponse.model_validate(product)


@router.put("/api/products/{product_id}/price", response_model=ProductResponse)
async def change_product_price(
    product_id: UUID,
    request: ProductPriceRequest,
    service: ProductService = Depends(get_product_service),
):
    """Change a product's price."""
    product = await service.change_price(product_id, request)
    return ProductResponse.model_validate(product)


@router.get("/api/products", response_model=List[ProductResponse])
async def list_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    products = await service.find_all()
    logger.debug(f"[PRODUCTS] Found {len(products)} products")
    return [ProductResponse.model_validate(product) for product in products]
