"""Star repository interface."""

from abc import ABC, abstractmethod
from typing import List

from newsdesk.domain.model.star import Star
from newsdesk.domain.value import ArticleId, UserId


class StarRepository(ABC):
    """Repository for starred articles."""

    @abstractmethod
    async def exists(self, user_id: UserId, article_id: ArticleId) -> bool:
        """Check whether the user starred the article."""
        pass

    @abstractmethod
    async def save(self, star: Star) -> Star:
        """Save a star (create).

        Raises:
            IntegrityError: If the user already starred the article
        """
        pass

    @abstractmethod
    async def delete_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> bool:
        """Remove a star.

        Returns:
            True if a star was deleted, False if there was none
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Star]:
        """Find a user's stars, newest first."""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int:
        """Count a user's stars."""
        pass

    @abstractmethod
    async def find_article_ids_by_user(self, user_id: UserId) -> List[ArticleId]:
        """List every article the user starred, newest first."""
        pass
