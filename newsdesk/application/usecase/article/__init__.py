"""Article use cases."""

from .get_article import ArticleDetail, GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .get_home import ColumnItem, GetHomeResponse, GetHomeUseCase
from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase
from .list_report_columns import ListReportColumnsUseCase, ReportColumnItem

__all__ = [
    "ArticleDetail",
    "ColumnItem",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "GetHomeResponse",
    "GetHomeUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ListReportColumnsUseCase",
    "ReportColumnItem",
]
