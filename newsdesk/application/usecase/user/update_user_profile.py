"""Update user profile use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from newsdesk.application.usecase.common import UserProfile, to_user_profile
from newsdesk.domain.service import IdentityLinkService, UserService
from newsdesk.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request. Empty fields are left unchanged."""

    user_id: str  # From authenticated user
    display_name: str | None = None
    gender: str | None = None
    email: str | None = None
    company: str | None = None
    avatar_url: str | None = None


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile.

    Changing the email also renames the username stored in Link Record
    entries, so the third-party login page keeps pre-filling the right
    account.
    """

    def __init__(
        self,
        user_service: UserService,
        identity_link_service: IdentityLinkService,
    ) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
            identity_link_service: Identity link domain service
        """
        self.user_service = user_service
        self.identity_link_service = identity_link_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfile:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If user not found
            ValidationError: If any field is invalid
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("update_user_profile", user_id=request.user_id):
            before = await self.user_service.get_by_id(user_id)
            user = await self.user_service.update_profile(
                user_id,
                display_name=request.display_name,
                gender=request.gender,
                email=request.email,
                company=request.company,
                avatar_url=request.avatar_url,
            )

            if user.email != before.email:
                await self.identity_link_service.rename_entry_username(
                    str(before.email), str(user.email)
                )

            return to_user_profile(user)
