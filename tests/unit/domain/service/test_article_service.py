"""Unit tests for ArticleService."""

from datetime import datetime, timedelta

import pytest

from newsdesk.config import ContentSettings
from newsdesk.domain.error import NotFoundError
from newsdesk.domain.model import Article, Column
from newsdesk.domain.service import ArticleService
from newsdesk.domain.value import ArticleId, ColumnId
from newsdesk.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryColumnRepository,
)

BASE = datetime(2024, 1, 1, 12, 0, 0)


def article(article_id: int, column_id: int, minutes: int = 0, **kwargs) -> Article:
    return Article(
        id=ArticleId(article_id),
        title=f"Article {article_id}",
        column_id=ColumnId(column_id),
        created_at=BASE + timedelta(minutes=minutes),
        **kwargs,
    )


def make_service(
    settings: ContentSettings | None = None,
) -> tuple[ArticleService, InMemoryArticleRepository, InMemoryColumnRepository]:
    articles = InMemoryArticleRepository()
    columns = InMemoryColumnRepository()
    service = ArticleService(articles, columns, settings or ContentSettings())
    return service, articles, columns


class TestNormalizeContent:
    """Tests for ArticleService.normalize_content() and image_url()."""

    def test_prefixes_root_relative_images(self):
        service, _, _ = make_service()

        content = service.normalize_content(
            '<img src="/uploads/a.jpg"><img src="http://cdn.example.org/b.jpg">'
        )

        assert content == (
            '<img src="http://sisi-smu.org/uploads/a.jpg">'
            '<img src="http://cdn.example.org/b.jpg">'
        )

    def test_unescapes_quotes(self):
        service, _, _ = make_service()

        assert service.normalize_content("&#34;quoted&#34;") == '"quoted"'

    @pytest.mark.parametrize(
        "path,expected",
        [
            (None, None),
            ("", None),
            ("/uploads/t.jpg", "http://sisi-smu.org/uploads/t.jpg"),
            ("uploads/t.jpg", "http://sisi-smu.org/uploads/t.jpg"),
            ("https://cdn.example.org/t.jpg", "https://cdn.example.org/t.jpg"),
        ],
    )
    def test_image_url(self, path, expected):
        service, _, _ = make_service()

        assert service.image_url(path) == expected


class TestGetArticle:
    """Tests for ArticleService.get_article()."""

    @pytest.mark.asyncio
    async def test_returns_normalized_article(self):
        service, articles, _ = make_service()
        articles.add(
            article(1, 6, content='<img src="/a.png">', thumbnail_url="/t.png")
        )

        result = await service.get_article(ArticleId(1))

        assert result.content == '<img src="http://sisi-smu.org/a.png">'
        assert result.thumbnail_url == "http://sisi-smu.org/t.png"

    @pytest.mark.asyncio
    async def test_missing_article_not_found(self):
        service, _, _ = make_service()

        with pytest.raises(NotFoundError):
            await service.get_article(ArticleId(404))


class TestGetRelatedArticles:
    """Tests for ArticleService.get_related_articles()."""

    @pytest.mark.asyncio
    async def test_same_origin_excluding_self(self):
        """Should list the latest other articles by the same writer."""
        service, articles, _ = make_service()
        articles.add(
            article(1, 6, minutes=0, origin="Desk"),
            article(2, 6, minutes=1, origin="Desk"),
            article(3, 6, minutes=2, origin="Desk"),
            article(4, 6, minutes=3, origin="Desk"),
            article(5, 6, minutes=4, origin="Other"),
        )

        related = await service.get_related_articles(article(1, 6, origin="Desk"))

        assert [a.id for a in related] == [4, 3]

    @pytest.mark.asyncio
    async def test_no_origin_no_related(self):
        service, articles, _ = make_service()
        articles.add(article(2, 6))

        assert await service.get_related_articles(article(1, 6)) == []


class TestGetHomePage:
    """Tests for ArticleService.get_home_page()."""

    @pytest.mark.asyncio
    async def test_orders_columns_by_weight_and_skips_excluded(self):
        """Should sort by weight, keep ID order on ties and drop excluded columns."""
        # Arrange
        service, _, columns = make_service()
        columns.add(
            Column(id=ColumnId(3), name="Research", parent_id=ColumnId(1)),
            Column(id=ColumnId(6), name="News", parent_id=ColumnId(1)),
            Column(id=ColumnId(13), name="Events", parent_id=ColumnId(1)),
            Column(id=ColumnId(32), name="Hidden", parent_id=ColumnId(1)),
            Column(id=ColumnId(99), name="Misc", parent_id=ColumnId(52)),
            Column(id=ColumnId(200), name="Elsewhere", parent_id=ColumnId(7)),
        )

        # Act
        home = await service.get_home_page()

        # Assert
        assert [c.column.id for c in home.columns] == [6, 3, 13, 99]

    @pytest.mark.asyncio
    async def test_picture_news_and_column_limits(self):
        """Should cap picture news and per-column articles, newest first."""
        service, articles, columns = make_service()
        columns.add(Column(id=ColumnId(6), name="News", parent_id=ColumnId(1)))
        articles.add(
            *[
                article(i, 6, minutes=i, has_picture=True, thumbnail_url=f"/p{i}.jpg")
                for i in range(1, 6)
            ]
        )

        home = await service.get_home_page()

        assert [a.id for a in home.picture_news] == [5, 4, 3]
        assert home.picture_news[0].thumbnail_url == "http://sisi-smu.org/p5.jpg"
        assert [a.id for a in home.columns[0].articles] == [5, 4, 3]

    @pytest.mark.asyncio
    async def test_empty_column_borrows_from_children(self):
        """Should fall back to sub-column articles when a column has none."""
        service, articles, columns = make_service()
        columns.add(
            Column(id=ColumnId(7), name="Reports", parent_id=ColumnId(1)),
            Column(id=ColumnId(71), name="Annual", parent_id=ColumnId(7)),
        )
        articles.add(article(10, 71, minutes=1), article(11, 71, minutes=2))

        home = await service.get_home_page()

        assert [a.id for a in home.columns[0].articles] == [11, 10]


class TestGetReportColumns:
    """Tests for ArticleService.get_report_columns()."""

    @pytest.mark.asyncio
    async def test_filters_by_parent_and_language(self):
        service, _, columns = make_service()
        columns.add(
            Column(id=ColumnId(120), name="报告", parent_id=ColumnId(113)),
            Column(
                id=ColumnId(121), name="Report", parent_id=ColumnId(113), language="en"
            ),
            Column(id=ColumnId(170), name="简报", parent_id=ColumnId(167)),
            Column(id=ColumnId(5), name="Other", parent_id=ColumnId(1)),
        )

        result = await service.get_report_columns()

        assert [c.id for c in result] == [120, 170]
