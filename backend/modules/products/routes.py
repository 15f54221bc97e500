"""
Product API endpoints.

Provides REST endpoints for product catalog CRUD. Unknown IDs raise
ProductNotFoundError, which the app error handler turns into a 404.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_product_service

from .interfaces import IProductService
from .models import Product, ProductCreate, ProductUpdate

router = APIRouter()


@router.get("", response_model=list[Product])
async def list_products(
    service: IProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products, oldest first."""
    return await service.list_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Get a single product."""
    return await service.get_product(product_id)


@router.post("", response_model=Product, status_code=201)
async def create_product(
    request: ProductCreate,
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Add a product to the catalog."""
    return await service.create_product(request)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    request: ProductUpdate,
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Update some or all fields of a product."""
    return await service.update_product(product_id, request)


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: str,
    service: IProductService = Depends(get_product_service),
) -> None:
    """Remove a product from the catalog."""
    await service.delete_product(product_id)
