"""Domain layer errors."""

from collections.abc import Iterable


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries every violated rule so callers can report them together.
    """

    def __init__(self, messages: str | Iterable[str]):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class DuplicateOperationError(DomainError):
    """Raised when an operation that may only happen once is repeated."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthenticationError(DomainError):
    """Raised when credentials are missing or do not match."""

    pass


class UnsupportedProviderError(DomainError):
    """Raised for a third-party login provider key we do not know."""

    def __init__(self, provider_key: str):
        self.provider_key = provider_key
        super().__init__(f"Unsupported provider: {provider_key}")


class OAuthStateMismatchError(DomainError):
    """Raised when the callback state differs from the one we sent."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"OAuth state mismatch for provider {provider}")
