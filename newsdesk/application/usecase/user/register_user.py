"""Register user use case."""

import logfire
from pydantic import BaseModel

from newsdesk.application.usecase.common import UserProfile, to_user_profile
from newsdesk.domain.error import ValidationError
from newsdesk.domain.service import IdentityLinkService, UserService


class RegisterUserRequest(BaseModel):
    """Registration form.

    Fields are optional here so missing ones are reported together with
    the other validation messages.
    """

    email: str | None = None
    password: str | None = None
    password_confirmation: str | None = None
    avatar_url: str | None = None
    token: str | None = None  # Link token from a third-party callback


class RegisterUserUseCase:
    """Use case for creating an account, optionally completing a third-party link."""

    def __init__(
        self,
        user_service: UserService,
        identity_link_service: IdentityLinkService,
    ) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            identity_link_service: Identity link domain service
        """
        self.user_service = user_service
        self.identity_link_service = identity_link_service

    async def execute(self, request: RegisterUserRequest) -> UserProfile:
        """Execute registration flow.

        Steps:
        1. Validate and save the account
        2. Attach email and password to the link token, if it is well-formed

        A malformed or unknown token never fails registration.

        Raises:
            ValidationError: If any registration rule is violated
        """
        with logfire.span("register_user", has_token=bool(request.token)):
            user = await self.user_service.register(
                email=request.email,
                password=request.password,
                password_confirmation=request.password_confirmation,
                avatar_url=request.avatar_url,
            )

            if request.password is None:
                raise ValidationError("The password field is required.")

            await self.identity_link_service.attach_entry(
                request.token, str(user.email), request.password
            )

            return to_user_profile(user)
