"""Star routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status

from newsdesk.application.usecase.star import (
    StarArticleRequest,
    StarArticleResponse,
    StarArticleUseCase,
    UnstarArticleRequest,
    UnstarArticleUseCase,
)
from newsdesk.domain.service import JWTService
from newsdesk.interface.api.session import require_user_id

router = APIRouter(prefix="/articles", tags=["stars"], route_class=DishkaRoute)


@router.post("/{article_id}/star", response_model=StarArticleResponse)
async def star_article(
    article_id: int,
    star_use_case: FromDishka[StarArticleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StarArticleResponse:
    """Star an article.

    Returns every article the user has starred. Starring the same article
    again yields 409.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await star_use_case.execute(
        StarArticleRequest(article_id=article_id, user_id=user_id)
    )


@router.delete("/{article_id}/star", status_code=status.HTTP_204_NO_CONTENT)
async def unstar_article(
    article_id: int,
    unstar_use_case: FromDishka[UnstarArticleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Remove a star. Succeeds whether or not the article was starred."""
    user_id = require_user_id(jwt_service, auth_token)
    await unstar_use_case.execute(
        UnstarArticleRequest(article_id=article_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
