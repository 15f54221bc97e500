"""
Product catalog service.

Thin pass-through to the repository; its only job beyond that is
turning missing rows into ProductNotFoundError.
"""

import logging

from .exceptions import ProductNotFoundError
from .interfaces import IProductService
from .models import Product, ProductCreate, ProductUpdate
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """Implements IProductService on top of ProductRepository."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def list_products(self) -> list[Product]:
        return await self._repository.list_all()

    async def get_product(self, product_id: str) -> Product:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create_product(self, request: ProductCreate) -> Product:
        product = await self._repository.create(request.model_dump())
        logger.info("Created product %s", product.id)
        return product

    async def update_product(self, product_id: str, request: ProductUpdate) -> Product:
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return await self.get_product(product_id)

        product = await self._repository.update(product_id, changes)
        if product is None:
            raise ProductNotFoundError(product_id)
        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)))
        return product

    async def delete_product(self, product_id: str) -> None:
        if not await self._repository.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.info("Deleted product %s", product_id)
