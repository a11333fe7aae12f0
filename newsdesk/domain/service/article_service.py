"""Article domain service.

Read side of the content store: home page assembly, article detail
normalisation and related articles.
"""

import re
from dataclasses import dataclass

import logfire

from newsdesk.config import ContentSettings
from newsdesk.domain.error import NotFoundError
from newsdesk.domain.model import Article, Column
from newsdesk.domain.repository import ArticleRepository, ColumnRepository
from newsdesk.domain.value import ArticleId, ColumnId

from .base import Service

ROOT_RELATIVE_SRC = re.compile(r'(src=")/')
ABSOLUTE_URL = re.compile(r"^https?://")


@dataclass
class ColumnArticles:
    """A home page column and its latest articles."""

    column: Column
    articles: list[Article]


@dataclass
class HomePage:
    """Home page payload."""

    picture_news: list[Article]
    columns: list[ColumnArticles]


class ArticleService(Service):
    """Domain service for reading articles and columns."""

    def __init__(
        self,
        article_repository: ArticleRepository,
        column_repository: ColumnRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
            column_repository: Column repository
            content_settings: Column selection, limits and image prefix
        """
        self.article_repository = article_repository
        self.column_repository = column_repository
        self.settings = content_settings

    def image_url(self, path: str | None) -> str | None:
        """Prefix a content-store image path with the image host."""
        if not path:
            return None
        if ABSOLUTE_URL.match(path):
            return path
        return self.settings.image_base_url.rstrip("/") + "/" + path.lstrip("/")

    def normalize_content(self, content: str) -> str:
        """Unescape quotes and point root-relative images at the image host."""
        content = content.replace("&#34;", '"')
        base = self.settings.image_base_url.rstrip("/") + "/"
        return ROOT_RELATIVE_SRC.sub(lambda m: m.group(1) + base, content)

    def _with_thumbnail(self, article: Article) -> Article:
        return article.model_copy(
            update={"thumbnail_url": self.image_url(article.thumbnail_url)}
        )

    def column_sort_key(self, column: Column) -> int:
        return self.settings.column_sort_weights.get(
            column.id, self.settings.default_column_sort_weight
        )

    async def get_article(self, article_id: ArticleId) -> Article:
        """Get an article ready for display.

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span("article_service.get_article", article_id=article_id):
            article = await self.article_repository.find_by_id(article_id)
            if not article:
                logfire.warn("Article not found", article_id=article_id)
                raise NotFoundError("Article", str(article_id))

            return article.model_copy(
                update={
                    "content": self.normalize_content(article.content),
                    "thumbnail_url": self.image_url(article.thumbnail_url),
                }
            )

    async def ensure_exists(self, article_id: ArticleId) -> Article:
        """Get an article without display normalisation.

        Raises:
            NotFoundError: If the article does not exist
        """
        article = await self.article_repository.find_by_id(article_id)
        if not article:
            logfire.warn("Article not found", article_id=article_id)
            raise NotFoundError("Article", str(article_id))
        return article

    async def get_articles_by_ids(
        self, article_ids: list[ArticleId]
    ) -> dict[ArticleId, Article]:
        """Load several articles keyed by ID, thumbnails prefixed."""
        if not article_ids:
            return {}
        articles = await self.article_repository.find_by_ids(article_ids)
        return {a.id: self._with_thumbnail(a) for a in articles}

    async def get_related_articles(self, article: Article) -> list[Article]:
        """Other articles by the same writer."""
        if not article.origin:
            return []
        related = await self.article_repository.find_by_origin(
            article.origin, article.id, self.settings.related_article_limit
        )
        return [self._with_thumbnail(a) for a in related]

    async def get_home_page(self) -> HomePage:
        """Assemble the home page.

        Picture news, then the configured columns in weight order, each
        with its latest articles. A column without articles of its own
        borrows the latest ones from its sub-columns.
        """
        with logfire.span("article_service.get_home_page"):
            picture_news = await self.article_repository.find_latest_with_picture(
                self.settings.picture_news_limit
            )

            parents = [ColumnId(i) for i in self.settings.home_parent_column_ids]
            excluded = set(self.settings.home_excluded_column_ids)
            columns = [
                c
                for c in await self.column_repository.find_by_parent_ids(parents)
                if c.id not in excluded
            ]
            # sorted() is stable, so equal weights keep repository order
            columns = sorted(columns, key=self.column_sort_key)

            result = []
            for column in columns:
                articles = await self._column_articles(column.id)
                result.append(ColumnArticles(column=column, articles=articles))

            logfire.info(
                "Home page assembled",
                picture_news=len(picture_news),
                columns=len(result),
            )
            return HomePage(
                picture_news=[self._with_thumbnail(a) for a in picture_news],
                columns=result,
            )

    async def _column_articles(self, column_id: ColumnId) -> list[Article]:
        limit = self.settings.column_article_limit
        articles = await self.article_repository.find_latest_by_columns(
            [column_id], limit
        )
        if not articles:
            children = await self.column_repository.find_by_parent_ids([column_id])
            if children:
                articles = await self.article_repository.find_latest_by_columns(
                    [c.id for c in children], limit
                )
        return [self._with_thumbnail(a) for a in articles]

    async def get_report_columns(self) -> list[Column]:
        """Columns listed on the reports page."""
        with logfire.span("article_service.get_report_columns"):
            parents = [ColumnId(i) for i in self.settings.report_parent_column_ids]
            return await self.column_repository.find_by_parent_ids(
                parents, language=self.settings.report_language
            )
