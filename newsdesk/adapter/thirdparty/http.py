"""Shared HTTP plumbing for third-party login clients."""

import json
from typing import Any

import httpx
import logfire

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.domain.service.third_party_service import ThirdPartyClient
from newsdesk.domain.value import AuthProvider


class HttpThirdPartyClient(ThirdPartyClient):
    """Base class for clients that talk to a real provider over HTTP.

    Holds the registered app credentials and outbound limits only.
    Every request opens its own httpx client.
    """

    provider: AuthProvider

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        callback_url: str,
        state: str | None = None,
        timeout: float = 30.0,
        max_redirects: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize provider client.

        Args:
            app_id: App ID registered with the provider
            app_secret: App secret registered with the provider
            callback_url: Callback URL registered with the provider
            state: Constant state the provider echoes back (None to skip)
            timeout: Per-request timeout in seconds
            max_redirects: Redirects followed per request
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.app_id = app_id
        self.app_secret = app_secret
        self.callback_url = callback_url
        self.state = state
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.transport = transport

    @property
    def expected_state(self) -> str | None:
        return self.state

    def _error(self, message: str) -> ThirdPartyAuthorizationError:
        return ThirdPartyAuthorizationError(self.provider.value, message)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        data: dict[str, str] | None = None,
        step: str,
    ) -> httpx.Response:
        """Send one request and fail on transport errors or non-2xx statuses.

        Args:
            method: HTTP method
            url: Endpoint URL
            params: Query parameters
            data: Form body
            step: Short name of the flow step, for logs and errors

        Returns:
            Successful response

        Raises:
            ThirdPartyAuthorizationError: If the call fails
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                max_redirects=self.max_redirects,
                transport=self.transport,
            ) as client:
                response = await client.request(method, url, params=params, data=data)
        except httpx.HTTPError as e:
            logfire.error(
                "Third-party HTTP error",
                provider=self.provider.value,
                step=step,
                error=str(e),
            )
            raise self._error(f"HTTP error during {step}: {e}")

        if not response.is_success:
            logfire.error(
                "Third-party request failed",
                provider=self.provider.value,
                step=step,
                status_code=response.status_code,
                error=response.text,
            )
            raise self._error(f"{step} failed: {response.status_code}")

        return response

    def _parse_json(self, text: str, step: str) -> dict[str, Any]:
        """Parse a JSON object body.

        Raises:
            ThirdPartyAuthorizationError: If the body is not a JSON object
        """
        try:
            body = json.loads(text)
        except ValueError:
            logfire.error(
                "Third-party response is not JSON",
                provider=self.provider.value,
                step=step,
            )
            raise self._error(f"Malformed {step} response")

        if not isinstance(body, dict):
            raise self._error(f"Malformed {step} response")
        return body

    def _require(self, body: dict[str, Any], key: str, step: str) -> str:
        """Read a required, non-empty field as a string."""
        value = body.get(key)
        if value is None or value == "":
            logfire.error(
                "Third-party response missing field",
                provider=self.provider.value,
                step=step,
                field=key,
            )
            raise self._error(f"{step} response missing {key}")
        return str(value)
