"""
Product repository for database access.

Encapsulates all Supabase queries for the ``products`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository, STORE_ERRORS
from .exceptions import ProductStoreError
from .models import Product

PRODUCTS_TABLE = "products"


class ProductRepository(BaseRepository[Product]):
    """
    Repository for product data access.

    Methods that take an ID return None (or False) when no row matches,
    including when the ID is not a well-formed UUID.
    """

    async def list_all(self) -> list[Product]:
        query = self._db.table(PRODUCTS_TABLE).select("*").order("created_at")
        result = await self._run("list", query)
        rows = result.data if result is not None else []
        return [self._map_to_product(row) for row in rows]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        query = self._db.table(PRODUCTS_TABLE).select("*").eq("id", product_id)
        result = await self._run("get", query)
        if result is None or not result.data:
            return None
        return self._map_to_product(result.data[0])

    async def create(self, data: dict[str, Any]) -> Product:
        query = self._db.table(PRODUCTS_TABLE).insert(data)
        result = await self._run("create", query)
        if result is None or not result.data:
            raise ProductStoreError("create", "store returned no row")
        return self._map_to_product(result.data[0])

    async def update(self, product_id: str, data: dict[str, Any]) -> Optional[Product]:
        query = self._db.table(PRODUCTS_TABLE).update(data).eq("id", product_id)
        result = await self._run("update", query)
        if result is None or not result.data:
            return None
        return self._map_to_product(result.data[0])

    async def delete(self, product_id: str) -> bool:
        query = self._db.table(PRODUCTS_TABLE).delete().eq("id", product_id)
        result = await self._run("delete", query)
        return bool(result is not None and result.data)

    async def _run(self, operation: str, query: Any) -> Any:
        """
        Execute a query, translating store errors.

        Returns None when the store rejected a malformed ID filter.
        """
        try:
            return await self._execute(query)
        except STORE_ERRORS as e:
            if self._is_invalid_input(e):
                return None
            raise ProductStoreError(operation, str(e)) from e

    def _map_to_product(self, data: dict[str, Any]) -> Product:
        """Map database row to Product model."""
        return Product(
            id=str(data["id"]),
            title=data["title"],
            price=float(data["price"]),
            img=data["img"],
            created_at=data.get("created_at"),
        )
