"""Unit tests for StarArticleUseCase and UnstarArticleUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from newsdesk.application.usecase.star import (
    StarArticleRequest,
    StarArticleUseCase,
    UnstarArticleRequest,
    UnstarArticleUseCase,
)
from newsdesk.domain.error import DuplicateOperationError, NotFoundError
from newsdesk.domain.model import Article
from newsdesk.domain.repository import ArticleRepository
from newsdesk.domain.value import ArticleId, ColumnId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestStarArticleUseCase:
    """Tests for starring and unstarring."""

    @pytest.mark.asyncio
    async def test_star_then_star_again(self, unit_env: AsyncContainer):
        """Second star on the same article is a duplicate."""
        # Arrange
        repo = await unit_env.get(ArticleRepository)
        repo.add(Article(id=ArticleId(1), title="Story", column_id=ColumnId(6)))
        use_case = await unit_env.get(StarArticleUseCase)
        user_id = str(uuid4())

        # Act
        response = await use_case.execute(StarArticleRequest(article_id=1, user_id=user_id))

        # Assert
        assert response.user_id == user_id
        assert response.starred_articles == [1]
        with pytest.raises(DuplicateOperationError):
            await use_case.execute(StarArticleRequest(article_id=1, user_id=user_id))

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(StarArticleUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(StarArticleRequest(article_id=9, user_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_unstar_allows_star_again(self, unit_env: AsyncContainer):
        repo = await unit_env.get(ArticleRepository)
        repo.add(Article(id=ArticleId(1), title="Story", column_id=ColumnId(6)))
        star = await unit_env.get(StarArticleUseCase)
        unstar = await unit_env.get(UnstarArticleUseCase)
        user_id = str(uuid4())
        await star.execute(StarArticleRequest(article_id=1, user_id=user_id))

        await unstar.execute(UnstarArticleRequest(article_id=1, user_id=user_id))

        response = await star.execute(StarArticleRequest(article_id=1, user_id=user_id))
        assert response.starred_articles == [1]
