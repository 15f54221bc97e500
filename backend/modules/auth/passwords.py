"""
Password hashing with bcrypt.

bcrypt is CPU-bound by design, so the async helpers push the work to a
worker thread instead of stalling the event loop.
"""

import asyncio

import bcrypt


class PasswordHasher:
    """
    Salted one-way password hashing.

    Every hash gets a fresh salt, so hashing the same password twice
    yields different strings that both verify.
    """

    def __init__(self, rounds: int = 10):
        """
        Args:
            rounds: bcrypt work factor (log2 of iterations)
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            ValueError: If the password is empty
        """
        if not password:
            raise ValueError("Password cannot be empty")
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Comparison is constant-time (bcrypt.checkpw). A malformed hash
        is treated as a mismatch.
        """
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.verify, password, password_hash)
