"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the thread offloading every query needs.
"""

import asyncio
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

# Postgres SQLSTATE for invalid_text_representation (e.g. a malformed uuid)
INVALID_TEXT_REPRESENTATION = "22P02"

# Failures a query can raise: PostgREST errors and transport errors
STORE_ERRORS = (APIError, httpx.HTTPError)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() to run a built query off the event loop

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ProductRepository(BaseRepository[Product]):
            async def get_by_id(self, product_id: str) -> Optional[Product]:
                query = self._db.table("products").select("*").eq("id", product_id)
                result = await self._execute(query)
                if not result.data:
                    return None
                return self._map_to_product(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    async def _execute(self, query: Any) -> Any:
        """
        Execute a query builder in a worker thread.

        The Supabase client performs blocking HTTP calls, so queries are
        never executed directly on the event loop.
        """
        return await asyncio.to_thread(query.execute)

    @staticmethod
    def _is_unique_violation(error: Exception) -> bool:
        """Whether a store error is a unique constraint violation."""
        return isinstance(error, APIError) and str(error.code) == UNIQUE_VIOLATION

    @staticmethod
    def _is_invalid_input(error: Exception) -> bool:
        """Whether a store error means a filter value had the wrong format."""
        return isinstance(error, APIError) and str(error.code) == INVALID_TEXT_REPRESENTATION
