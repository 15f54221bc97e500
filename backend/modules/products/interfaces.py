"""
Products module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Product, ProductCreate, ProductUpdate


@runtime_checkable
class IProductService(Protocol):
    """
    Interface for product catalog operations.

    Lookups by ID raise ProductNotFoundError for unknown products.
    """

    async def list_products(self) -> list[Product]:
        ...

    async def get_product(self, product_id: str) -> Product:
        ...

    async def create_product(self, request: ProductCreate) -> Product:
        ...

    async def update_product(self, product_id: str, request: ProductUpdate) -> Product:
        ...

    async def delete_product(self, product_id: str) -> None:
        ...
