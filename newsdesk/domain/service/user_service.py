"""User domain service."""

import re
from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from newsdesk.domain.error import AuthenticationError, NotFoundError, ValidationError
from newsdesk.domain.model import User
from newsdesk.domain.repository import UserRepository
from newsdesk.domain.value import Email, Gender, UserId
from newsdesk.util.password import PasswordHasher

from .base import Service

MIN_PASSWORD_LENGTH = 6

# bcrypt only reads the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72

HTTP_URL_PATTERN = re.compile(r"^https?://")


def normalize_avatar_url(avatar_url: str | None, default_avatar_url: str) -> str:
    """Keep absolute http(s) avatars, fall back to the site default otherwise."""
    if avatar_url and HTTP_URL_PATTERN.match(avatar_url):
        return avatar_url
    return default_avatar_url


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        default_avatar_url: str,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_hasher: bcrypt hasher for account passwords
            default_avatar_url: Avatar used when none (or a bad one) is given
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.default_avatar_url = default_avatar_url

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(
        self,
        email: str | None,
        password: str | None,
        password_confirmation: str | None,
        avatar_url: str | None = None,
    ) -> User:
        """Create an account.

        Every rule is checked before failing so the caller can show all
        problems at once.

        Args:
            email: Account email (required, valid, unique)
            password: Plaintext password (required, at least 6 chars)
            password_confirmation: Must equal password
            avatar_url: Optional absolute http(s) avatar URL

        Returns:
            Saved user

        Raises:
            ValidationError: If any rule is violated
        """
        with logfire.span("user_service.register"):
            messages: list[str] = []

            parsed_email = await self._check_email(email, messages)

            if not password:
                messages.append("The password field is required.")
            else:
                if len(password) < MIN_PASSWORD_LENGTH:
                    messages.append(
                        f"The password must be at least {MIN_PASSWORD_LENGTH} characters."
                    )
                if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
                    messages.append(
                        f"The password may not be greater than {MAX_PASSWORD_BYTES} bytes."
                    )
                if password != password_confirmation:
                    messages.append("The password confirmation does not match.")

            if messages or parsed_email is None or password is None:
                logfire.warn("Registration rejected", errors=messages)
                raise ValidationError(messages)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                email=parsed_email,
                password_hash=await self.password_hasher.hash(password),
                avatar_url=normalize_avatar_url(avatar_url, self.default_avatar_url),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Concurrent registration for email")
                raise ValidationError("The email has already been taken.")

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check email and password.

        Raises:
            AuthenticationError: If no account matches or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            try:
                parsed = Email(email)
            except PydanticValidationError:
                raise AuthenticationError("Invalid email or password")

            user = await self.user_repository.find_by_email(parsed)
            if not user or not await self.password_hasher.verify(
                password, user.password_hash
            ):
                logfire.warn("Login failed")
                raise AuthenticationError("Invalid email or password")

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def update_profile(
        self,
        user_id: UserId,
        display_name: str | None = None,
        gender: str | None = None,
        email: str | None = None,
        company: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Update profile fields. Empty values leave the field unchanged.

        Args:
            user_id: User to update
            display_name: New display name
            gender: 男 or 女
            email: New email (valid, unique ignoring this user)
            company: New company
            avatar_url: New absolute http(s) avatar URL

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If any field is invalid
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            messages: list[str] = []
            update: dict = {}

            if display_name:
                if len(display_name) > 100:
                    messages.append(
                        "The display name may not be greater than 100 characters."
                    )
                else:
                    update["display_name"] = display_name

            if gender:
                try:
                    update["gender"] = Gender(gender)
                except ValueError:
                    messages.append("The selected gender is invalid.")

            if email:
                parsed = await self._check_email(email, messages, ignore=user.id)
                if parsed is not None and parsed != user.email:
                    update["email"] = parsed

            if company:
                if len(company) > 255:
                    messages.append("The company may not be greater than 255 characters.")
                else:
                    update["company"] = company

            if avatar_url:
                if HTTP_URL_PATTERN.match(avatar_url):
                    update["avatar_url"] = avatar_url
                else:
                    messages.append("The avatar url format is invalid.")

            if messages:
                logfire.warn("Profile update rejected", errors=messages)
                raise ValidationError(messages)

            if not update:
                return user

            update["updated_at"] = datetime.now()
            try:
                saved = await self.user_repository.save(user.model_copy(update=update))
            except IntegrityError:
                raise ValidationError("The email has already been taken.")

            logfire.info(
                "User profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return saved

    async def _check_email(
        self,
        email: str | None,
        messages: list[str],
        ignore: UserId | None = None,
    ) -> Email | None:
        """Validate an email and check nobody else uses it.

        Appends problems to messages instead of raising.
        """
        if not email:
            messages.append("The email field is required.")
            return None

        try:
            parsed = Email(email)
        except PydanticValidationError:
            messages.append("The email must be a valid email address.")
            return None

        existing = await self.user_repository.find_by_email(parsed)
        if existing and existing.id != ignore:
            messages.append("The email has already been taken.")
            return None
        return parsed
