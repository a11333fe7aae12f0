"""Third-party login use cases."""

from .get_authorize_url import (
    GetAuthorizeUrlRequest,
    GetAuthorizeUrlResponse,
    GetAuthorizeUrlUseCase,
)
from .get_entry import GetEntryRequest, GetEntryResponse, GetEntryUseCase
from .handle_callback import (
    ThirdPartyCallbackRequest,
    ThirdPartyCallbackResponse,
    ThirdPartyCallbackUseCase,
)

__all__ = [
    "GetAuthorizeUrlRequest",
    "GetAuthorizeUrlResponse",
    "GetAuthorizeUrlUseCase",
    "GetEntryRequest",
    "GetEntryResponse",
    "GetEntryUseCase",
    "ThirdPartyCallbackRequest",
    "ThirdPartyCallbackResponse",
    "ThirdPartyCallbackUseCase",
]
