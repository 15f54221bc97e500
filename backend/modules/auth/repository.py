"""
User repository for database access.

Encapsulates the Supabase queries for the ``users`` table. The table
carries a UNIQUE constraint on ``username`` (see
migrations/001_create_users.sql); that constraint, not the service-level
existence check, is what guarantees one account per username.
"""

import logging
from typing import Any, Optional

from shared.repository import BaseRepository, STORE_ERRORS
from .exceptions import DuplicateUsernameError, UserStoreError
from .models import User

logger = logging.getLogger(__name__)

USERS_TABLE = "users"


class UserRepository(BaseRepository[User]):
    """
    Repository for user records.

    Only lookup and insert are supported; accounts are never updated or
    deleted by this service.
    """

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Look up a user by exact username.

        Returns:
            The User, or None if no account has that username.

        Raises:
            UserStoreError: If the store cannot be queried.
        """
        query = self._db.table(USERS_TABLE).select("*").eq("username", username).limit(1)
        try:
            result = await self._execute(query)
        except STORE_ERRORS as e:
            raise UserStoreError("find_by_username", str(e)) from e

        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def insert(self, username: str, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateUsernameError: If the username unique constraint fires,
                e.g. a concurrent signup won the race.
            UserStoreError: For any other store failure.
        """
        data = {
            "username": username,
            "email": email,
            "password_hash": password_hash,
        }
        query = self._db.table(USERS_TABLE).insert(data)
        try:
            result = await self._execute(query)
        except STORE_ERRORS as e:
            if self._is_unique_violation(e):
                logger.info("Insert for username %s hit the unique constraint", username)
                raise DuplicateUsernameError(username) from e
            raise UserStoreError("insert", str(e)) from e

        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]) if data.get("id") is not None else None,
            username=data["username"],
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data.get("created_at"),
        )
