"""Account session routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from newsdesk.application.usecase.auth import LoginRequest, LoginResponse, LoginUseCase
from newsdesk.config import Settings
from newsdesk.interface.api.session import clear_auth_cookie, set_auth_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Sign in with email and password.

    Sets the ``auth_token`` cookie and returns the same token in the body.
    Wrong credentials yield 401.
    """
    result = await login_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    logger.info(f"User signed in: {result.user_id}")
    return result


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout() -> Response:
    """Sign out by clearing the session cookie."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_auth_cookie(response)
    return response
