"""Password hashing utilities (bcrypt)."""

import anyio
import bcrypt


class PasswordHasher:
    """bcrypt password hasher.

    Hashing is CPU bound, so it runs in a worker thread to keep the
    event loop responsive.
    """

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify_sync(plain_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(
                plain_password.encode("utf-8"), hashed_password.encode("utf-8")
            )
        except (ValueError, TypeError):
            return False

    async def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises:
            ValueError: If password is empty
        """
        if not password:
            raise ValueError("Password cannot be empty")
        return await anyio.to_thread.run_sync(self._hash_sync, password)

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Check a plaintext password against a stored hash."""
        if not plain_password or not hashed_password:
            return False
        return await anyio.to_thread.run_sync(
            self._verify_sync, plain_password, hashed_password
        )
