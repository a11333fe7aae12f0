"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from newsdesk.domain.model import User
from newsdesk.domain.repository import UserRepository
from newsdesk.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.root.lower()
        for user in self._users.values():
            if user.email.root.lower() == wanted:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If another account already uses the email
        """
        existing = await self.find_by_email(user.email)
        if existing and existing.id != user.id:
            raise IntegrityError("Duplicate email", None, Exception())

        self._users[user.id] = user
        return user
