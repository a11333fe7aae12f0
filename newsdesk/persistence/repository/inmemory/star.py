"""In-memory star repository for testing."""

from typing import List

from sqlalchemy.exc import IntegrityError

from newsdesk.domain.model import Star
from newsdesk.domain.repository import StarRepository
from newsdesk.domain.value import ArticleId, UserId


class InMemoryStarRepository(StarRepository):
    """In-memory implementation of StarRepository for testing."""

    def __init__(self) -> None:
        self._stars: list[Star] = []

    def _for_user(self, user_id: UserId) -> list[Star]:
        indexed = [(i, s) for i, s in enumerate(self._stars) if s.user_id == user_id]
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [s for _, s in indexed]

    async def exists(self, user_id: UserId, article_id: ArticleId) -> bool:
        """Check whether the user starred the article."""
        return any(
            s.user_id == user_id and s.article_id == article_id for s in self._stars
        )

    async def save(self, star: Star) -> Star:
        """Save a star.

        Raises:
            IntegrityError: If the user already starred the article
        """
        if await self.exists(star.user_id, star.article_id):
            raise IntegrityError("Duplicate star", None, Exception())
        self._stars.append(star)
        return star

    async def delete_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> bool:
        """Remove a star."""
        for i, star in enumerate(self._stars):
            if star.user_id == user_id and star.article_id == article_id:
                self._stars.pop(i)
                return True
        return False

    async def find_by_user(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Star]:
        """Find a user's stars, newest first."""
        return self._for_user(user_id)[offset : offset + limit]

    async def count_by_user(self, user_id: UserId) -> int:
        """Count a user's stars."""
        return sum(1 for s in self._stars if s.user_id == user_id)

    async def find_article_ids_by_user(self, user_id: UserId) -> List[ArticleId]:
        """List every article the user starred, newest first."""
        return [s.article_id for s in self._for_user(user_id)]
