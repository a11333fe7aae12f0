"""User use cases."""

from .get_user_profile import GetUserProfileRequest, GetUserProfileUseCase
from .list_my_comments import (
    ListMyCommentsRequest,
    ListMyCommentsResponse,
    ListMyCommentsUseCase,
)
from .list_my_information import (
    ListMyInformationRequest,
    ListMyInformationResponse,
    ListMyInformationUseCase,
)
from .list_my_stars import ListMyStarsRequest, ListMyStarsResponse, ListMyStarsUseCase
from .notice import (
    CheckNoticeResponse,
    CheckNoticeUseCase,
    ClearNoticeUseCase,
    NoticeRequest,
)
from .register_user import RegisterUserRequest, RegisterUserUseCase
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "CheckNoticeResponse",
    "CheckNoticeUseCase",
    "ClearNoticeUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "ListMyCommentsRequest",
    "ListMyCommentsResponse",
    "ListMyCommentsUseCase",
    "ListMyInformationRequest",
    "ListMyInformationResponse",
    "ListMyInformationUseCase",
    "ListMyStarsRequest",
    "ListMyStarsResponse",
    "ListMyStarsUseCase",
    "NoticeRequest",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
]
