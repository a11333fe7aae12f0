"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class ThirdPartyAuthorizationError(ProviderError):
    """A third-party login provider call failed or returned an error.

    Covers transport errors, non-2xx statuses, unparsable bodies and
    error payloads from the provider.
    """

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
