"""Unit tests for the article read use cases."""

from datetime import datetime, timedelta
from uuid import uuid4

from dishka import AsyncContainer
import pytest

from newsdesk.application.usecase.article import (
    GetArticleRequest,
    GetArticleUseCase,
    GetHomeUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ListReportColumnsUseCase,
)
from newsdesk.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
)
from newsdesk.application.usecase.star import StarArticleRequest, StarArticleUseCase
from newsdesk.domain.error import NotFoundError
from newsdesk.domain.model import Article, Column
from newsdesk.domain.repository import ArticleRepository, ColumnRepository
from newsdesk.domain.value import ArticleId, ColumnId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

BASE = datetime(2024, 1, 1, 12, 0, 0)


async def seed(unit_env: AsyncContainer) -> None:
    articles = await unit_env.get(ArticleRepository)
    columns = await unit_env.get(ColumnRepository)
    columns.add(
        Column(id=ColumnId(6), name="News", parent_id=ColumnId(1)),
        Column(id=ColumnId(3), name="Research", parent_id=ColumnId(1)),
        Column(id=ColumnId(120), name="Annual report", parent_id=ColumnId(113)),
    )
    articles.add(
        Article(
            id=ArticleId(1),
            title="Lead story",
            column_id=ColumnId(6),
            origin="Desk",
            content='<p>Body <img src="/uploads/a.jpg"></p>',
            has_picture=True,
            thumbnail_url="/uploads/t1.jpg",
            created_at=BASE,
        ),
        Article(
            id=ArticleId(2),
            title="Follow-up",
            column_id=ColumnId(6),
            origin="Desk",
            created_at=BASE + timedelta(hours=1),
        ),
        Article(
            id=ArticleId(3),
            title="Paper",
            column_id=ColumnId(3),
            created_at=BASE + timedelta(hours=2),
        ),
    )


class TestGetArticleUseCase:
    """Tests for GetArticleUseCase."""

    @pytest.mark.asyncio
    async def test_article_detail(self, unit_env: AsyncContainer):
        """Should return normalized content, related articles and comment preview."""
        # Arrange
        await seed(unit_env)
        create_comment = await unit_env.get(CreateCommentUseCase)
        create_reply = await unit_env.get(CreateReplyUseCase)
        comment = await create_comment.execute(
            CreateCommentRequest(article_id=1, content="First!", client_ip="10.0.0.1")
        )
        await create_reply.execute(
            CreateReplyRequest(
                article_id=1,
                comment_id=comment.comment_id,
                content="Second",
                client_ip="10.0.0.2",
            )
        )
        use_case = await unit_env.get(GetArticleUseCase)

        # Act
        response = await use_case.execute(GetArticleRequest(article_id=1))

        # Assert
        assert response.article.title == "Lead story"
        assert 'src="http://sisi-smu.org/uploads/a.jpg"' in response.article.content
        assert response.article.is_starred is False
        assert [a.id for a in response.related_articles] == [2]
        assert response.comment_count == 1
        assert [r.content for r in response.comments[0].replies] == ["Second"]

    @pytest.mark.asyncio
    async def test_is_starred_for_reader(self, unit_env: AsyncContainer):
        await seed(unit_env)
        user_id = str(uuid4())
        star = await unit_env.get(StarArticleUseCase)
        await star.execute(StarArticleRequest(article_id=1, user_id=user_id))
        use_case = await unit_env.get(GetArticleUseCase)

        response = await use_case.execute(GetArticleRequest(article_id=1, user_id=user_id))

        assert response.article.is_starred is True

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetArticleUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetArticleRequest(article_id=404))


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_paginates(self, unit_env: AsyncContainer):
        await seed(unit_env)
        create_comment = await unit_env.get(CreateCommentUseCase)
        for i in range(3):
            await create_comment.execute(
                CreateCommentRequest(article_id=1, content=f"c{i}", client_ip="10.0.0.1")
            )
        use_case = await unit_env.get(ListCommentsUseCase)

        response = await use_case.execute(
            ListCommentsRequest(article_id=1, page=2, per_page=2)
        )

        assert response.pagination.total == 3
        assert [c.content for c in response.comments] == ["c0"]

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListCommentsRequest(article_id=404))


class TestHomeAndReports:
    """Tests for GetHomeUseCase and ListReportColumnsUseCase."""

    @pytest.mark.asyncio
    async def test_home(self, unit_env: AsyncContainer):
        await seed(unit_env)
        use_case = await unit_env.get(GetHomeUseCase)

        response = await use_case.execute()

        assert [a.id for a in response.picture_news] == [1]
        assert response.picture_news[0].thumbnail_url == (
            "http://sisi-smu.org/uploads/t1.jpg"
        )
        assert [(c.column_id, c.name) for c in response.article_list] == [
            (6, "News"),
            (3, "Research"),
        ]
        assert [a.id for a in response.article_list[0].articles] == [2, 1]

    @pytest.mark.asyncio
    async def test_report_columns(self, unit_env: AsyncContainer):
        await seed(unit_env)
        use_case = await unit_env.get(ListReportColumnsUseCase)

        columns = await use_case.execute()

        assert [(c.id, c.name) for c in columns] == [(120, "Annual report")]
