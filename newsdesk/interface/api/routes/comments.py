"""Comment and reply routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, status
from pydantic import BaseModel

from newsdesk.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
)
from newsdesk.application.usecase.common import CommentItem, ReplyItem
from newsdesk.domain.service import JWTService
from newsdesk.interface.api.session import client_ip, require_user_id

router = APIRouter(prefix="/articles", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for a comment or reply body."""

    content: str | None = None


@router.post(
    "/{article_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    article_id: int,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on an article as the signed-in user."""
    user_id = require_user_id(jwt_service, auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            article_id=article_id, content=request.content, user_id=user_id
        )
    )


@router.post(
    "/{article_id}/comments/anonymous",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_anonymous_comment(
    article_id: int,
    request: CommentAPIRequest,
    http_request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Comment on an article without an account.

    The author is shown as the caller's IP with its last segment masked.
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            article_id=article_id,
            content=request.content,
            client_ip=client_ip(http_request),
        )
    )


@router.post(
    "/{article_id}/comments/{comment_id}/replies",
    response_model=ReplyItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    article_id: int,
    comment_id: UUID,
    request: CommentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReplyItem:
    """Reply to a comment as the signed-in user."""
    user_id = require_user_id(jwt_service, auth_token)
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            article_id=article_id,
            comment_id=str(comment_id),
            content=request.content,
            user_id=user_id,
        )
    )


@router.post(
    "/{article_id}/comments/{comment_id}/replies/anonymous",
    response_model=ReplyItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_anonymous_reply(
    article_id: int,
    comment_id: UUID,
    request: CommentAPIRequest,
    http_request: Request,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
) -> ReplyItem:
    """Reply to a comment without an account."""
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            article_id=article_id,
            comment_id=str(comment_id),
            content=request.content,
            client_ip=client_ip(http_request),
        )
    )
