"""List report columns use case."""

from pydantic import BaseModel

from newsdesk.domain.service import ArticleService


class ReportColumnItem(BaseModel):
    """Report column."""

    id: int
    name: str


class ListReportColumnsUseCase:
    """Use case for listing the report columns."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self) -> list[ReportColumnItem]:
        columns = await self.article_service.get_report_columns()
        return [ReportColumnItem(id=c.id, name=c.name) for c in columns]
