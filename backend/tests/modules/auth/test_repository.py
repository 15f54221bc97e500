"""Tests for the Supabase-backed user repository."""

import httpx
import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from modules.auth.exceptions import DuplicateUsernameError, UserStoreError
from modules.auth.repository import UserRepository


def create_mock_user_data(username: str = "alice") -> dict:
    """Helper to create a users row."""
    return {
        "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
        "username": username,
        "email": "a@x.com",
        "password_hash": "$2b$04$hash",
        "created_at": "2024-01-01T00:00:00+00:00",
    }


def api_error(code: str) -> APIError:
    return APIError({"message": "boom", "code": code, "details": "detail", "hint": None})


class TestFindByUsername:
    @pytest.mark.asyncio
    async def test_found(self):
        """Should map the first row to a User."""
        mock_db = MagicMock()
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.limit.return_value.execute.return_value.data = [
            create_mock_user_data()
        ]

        user = await UserRepository(mock_db).find_by_username("alice")

        assert user.username == "alice"
        assert user.password_hash == "$2b$04$hash"
        mock_db.table.assert_called_with("users")
        select.eq.assert_called_once_with("username", "alice")

    @pytest.mark.asyncio
    async def test_absent(self):
        """Absence is not an error."""
        mock_db = MagicMock()
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.limit.return_value.execute.return_value.data = []

        assert await UserRepository(mock_db).find_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_store_failure(self):
        """Transport errors should become UserStoreError."""
        mock_db = MagicMock()
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.limit.return_value.execute.side_effect = httpx.ConnectError(
            "connection refused"
        )

        with pytest.raises(UserStoreError) as exc_info:
            await UserRepository(mock_db).find_by_username("alice")
        assert exc_info.value.details["operation"] == "find_by_username"


class TestInsert:
    @pytest.mark.asyncio
    async def test_insert(self):
        """Should insert the row and return the stored user."""
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_user_data()
        ]

        user = await UserRepository(mock_db).insert("alice", "a@x.com", "$2b$04$hash")

        assert user.username == "alice"
        mock_db.table.return_value.insert.assert_called_once_with({
            "username": "alice",
            "email": "a@x.com",
            "password_hash": "$2b$04$hash",
        })

    @pytest.mark.asyncio
    async def test_unique_violation(self):
        """A unique violation should raise DuplicateUsernameError."""
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.side_effect = api_error("23505")

        with pytest.raises(DuplicateUsernameError) as exc_info:
            await UserRepository(mock_db).insert("alice", "a@x.com", "hash")
        assert exc_info.value.details["username"] == "alice"

    @pytest.mark.asyncio
    async def test_other_store_error(self):
        """Other PostgREST errors should raise UserStoreError."""
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.side_effect = api_error("42P01")

        with pytest.raises(UserStoreError):
            await UserRepository(mock_db).insert("alice", "a@x.com", "hash")
