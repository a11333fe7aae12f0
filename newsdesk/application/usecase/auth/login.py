"""Login use case."""

from pydantic import BaseModel

from newsdesk.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Email/password login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    email: str


class LoginUseCase:
    """Use case for signing in with a site account."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a session token.

        Raises:
            AuthenticationError: If the email or password is wrong
        """
        user = await self.user_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(str(user.id), str(user.email))
        return LoginResponse(token=token, user_id=str(user.id), email=str(user.email))
