"""Get user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.application.usecase.common import UserProfile, to_user_profile
from newsdesk.domain.service import UserService
from newsdesk.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # From authenticated user


class GetUserProfileUseCase:
    """Use case for reading the signed-in user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfile:
        """Raises NotFoundError if the account no longer exists."""
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return to_user_profile(user)
