"""Article and report column routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from newsdesk.application.usecase.article import (
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
    GetHomeResponse,
    GetHomeUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListReportColumnsUseCase,
    ReportColumnItem,
)
from newsdesk.domain.service import JWTService

router = APIRouter(tags=["articles"], route_class=DishkaRoute)


@router.get("/articles", response_model=GetHomeResponse)
async def get_home(get_home_use_case: FromDishka[GetHomeUseCase]) -> GetHomeResponse:
    """Home page: picture news plus the latest articles of each home column."""
    return await get_home_use_case.execute()


@router.get("/articles/{article_id}", response_model=GetArticleResponse)
async def get_article(
    article_id: int,
    get_article_use_case: FromDishka[GetArticleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetArticleResponse:
    """Article detail with related articles and the latest comments.

    Works signed out; ``is_starred`` is then always false.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    return await get_article_use_case.execute(
        GetArticleRequest(article_id=article_id, user_id=user_id)
    )


@router.get("/articles/{article_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    article_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=10, ge=1, le=50),
) -> ListCommentsResponse:
    """Page through an article's comments, each with its replies."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(article_id=article_id, page=page, per_page=per_page)
    )


@router.get("/reports", response_model=list[ReportColumnItem])
async def list_reports(
    list_reports_use_case: FromDishka[ListReportColumnsUseCase],
) -> list[ReportColumnItem]:
    """Report columns."""
    return await list_reports_use_case.execute()
