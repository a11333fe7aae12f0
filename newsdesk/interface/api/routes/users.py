"""User account and profile routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status
from pydantic import BaseModel

from newsdesk.application.usecase.common import UserProfile
from newsdesk.application.usecase.user import (
    CheckNoticeResponse,
    CheckNoticeUseCase,
    ClearNoticeUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListMyCommentsRequest,
    ListMyCommentsResponse,
    ListMyCommentsUseCase,
    ListMyInformationRequest,
    ListMyInformationResponse,
    ListMyInformationUseCase,
    ListMyStarsRequest,
    ListMyStarsResponse,
    ListMyStarsUseCase,
    NoticeRequest,
    RegisterUserRequest,
    RegisterUserUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from newsdesk.domain.service import JWTService
from newsdesk.interface.api.session import require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the signed-in user's profile."""

    display_name: str | None = None
    gender: str | None = None
    email: str | None = None
    company: str | None = None
    avatar_url: str | None = None


@router.post("", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterUserRequest,
    register_use_case: FromDishka[RegisterUserUseCase],
) -> UserProfile:
    """Create a site account.

    A ``token`` from a third-party callback attaches the new credentials to
    that Link Record; a malformed or unknown token is ignored. Rule
    violations come back together as a 422 message list.

    Example:
        POST /users
        {
            "email": "a@x.com",
            "password": "secret1",
            "password_confirmation": "secret1",
            "token": "<30-character link token>"
        }
    """
    profile = await register_use_case.execute(request)
    logger.info(f"Account registered: {profile.user_id}")
    return profile


@router.get("/me", response_model=UserProfile)
async def get_my_profile(
    get_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserProfile:
    """Get the signed-in user's profile."""
    user_id = require_user_id(jwt_service, auth_token)
    return await get_profile_use_case.execute(GetUserProfileRequest(user_id=user_id))


@router.patch("/me", response_model=UserProfile)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserProfile:
    """Update the signed-in user's profile. Empty fields are left unchanged."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_profile_use_case.execute(
        UpdateUserProfileRequest(user_id=user_id, **request.model_dump())
    )


@router.get("/me/comments", response_model=ListMyCommentsResponse)
async def list_my_comments(
    list_comments_use_case: FromDishka[ListMyCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=10, ge=1, le=50),
    auth_token: str | None = Cookie(default=None),
) -> ListMyCommentsResponse:
    """List the signed-in user's comments, newest first."""
    user_id = require_user_id(jwt_service, auth_token)
    return await list_comments_use_case.execute(
        ListMyCommentsRequest(user_id=user_id, page=page, per_page=per_page)
    )


@router.get("/me/stars", response_model=ListMyStarsResponse)
async def list_my_stars(
    list_stars_use_case: FromDishka[ListMyStarsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=10, ge=1, le=50),
    auth_token: str | None = Cookie(default=None),
) -> ListMyStarsResponse:
    """List the articles the signed-in user has starred."""
    user_id = require_user_id(jwt_service, auth_token)
    return await list_stars_use_case.execute(
        ListMyStarsRequest(user_id=user_id, page=page, per_page=per_page)
    )


@router.get("/me/information", response_model=ListMyInformationResponse)
async def list_my_information(
    list_information_use_case: FromDishka[ListMyInformationUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=10, ge=1, le=50),
    auth_token: str | None = Cookie(default=None),
) -> ListMyInformationResponse:
    """List replies to the signed-in user's comments, newest first."""
    user_id = require_user_id(jwt_service, auth_token)
    return await list_information_use_case.execute(
        ListMyInformationRequest(user_id=user_id, page=page, per_page=per_page)
    )


@router.get("/me/notice", response_model=CheckNoticeResponse)
async def check_notice(
    check_notice_use_case: FromDishka[CheckNoticeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CheckNoticeResponse:
    """Whether the signed-in user has unread information."""
    user_id = require_user_id(jwt_service, auth_token)
    return await check_notice_use_case.execute(NoticeRequest(user_id=user_id))


@router.delete("/me/notice", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notice(
    clear_notice_use_case: FromDishka[ClearNoticeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Mark all of the signed-in user's information as read."""
    user_id = require_user_id(jwt_service, auth_token)
    await clear_notice_use_case.execute(NoticeRequest(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
