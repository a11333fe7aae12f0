"""Third-party login routes (Weibo, QQ, WeChat)."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from newsdesk.application.usecase.oauth import (
    GetAuthorizeUrlRequest,
    GetAuthorizeUrlUseCase,
    GetEntryRequest,
    GetEntryResponse,
    GetEntryUseCase,
    ThirdPartyCallbackRequest,
    ThirdPartyCallbackUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth", tags=["oauth"], route_class=DishkaRoute)


# Declared before /{provider} so "entry" is not taken for a provider key
@router.get(
    "/entry",
    response_model=GetEntryResponse,
    response_model_exclude_none=True,
)
async def get_entry(
    token: str,
    get_entry_use_case: FromDishka[GetEntryUseCase],
) -> GetEntryResponse:
    """Return the credentials attached to a link token.

    Responds with ``{}`` while the link has no entry yet, and 404 for an
    unknown token.

    Example:
        GET /oauth/entry?token=Ab3...

        {"username": "a@x.com", "password": "secret1"}
    """
    return await get_entry_use_case.execute(GetEntryRequest(token=token))


@router.get("/{provider}")
async def authorize(
    provider: str,
    get_authorize_url_use_case: FromDishka[GetAuthorizeUrlUseCase],
) -> RedirectResponse:
    """Redirect the browser to the provider's consent page.

    Args:
        provider: One of ``weibo``, ``qq`` or ``weixin``
        get_authorize_url_use_case: Authorize URL use case from DI

    Returns:
        HTTP 302 redirect to the provider
    """
    result = await get_authorize_url_use_case.execute(
        GetAuthorizeUrlRequest(provider=provider)
    )
    logger.info(f"Redirecting to {result.provider} consent page")
    return RedirectResponse(url=result.url, status_code=status.HTTP_302_FOUND)


@router.get("/{provider}/callback", response_class=PlainTextResponse)
async def callback(
    provider: str,
    code: str,
    callback_use_case: FromDishka[ThirdPartyCallbackUseCase],
    state: str | None = None,
) -> PlainTextResponse:
    """Complete a third-party login.

    Returns the avatar and link token as plain text for the front end to
    parse, e.g. ``QueryString ?avatar_url=https://...&token=Ab3...``.
    """
    result = await callback_use_case.execute(
        ThirdPartyCallbackRequest(provider=provider, code=code, state=state)
    )
    return PlainTextResponse(result.as_query_string())
