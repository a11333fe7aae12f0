"""Unit tests for the HTTP error mapping."""

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.domain.error import (
    AuthenticationError,
    DuplicateOperationError,
    NotFoundError,
    OAuthStateMismatchError,
    UnsupportedProviderError,
    ValidationError,
)
from newsdesk.interface.error import register_exception_handlers, status_for
from newsdesk.util.crypto import DecryptionError


@pytest.mark.parametrize(
    "exc,expected",
    [
        (ValidationError("bad"), 422),
        (DuplicateOperationError("您已收藏！"), 409),
        (NotFoundError("Article", "1"), 404),
        (UnsupportedProviderError("github"), 404),
        (AuthenticationError("nope"), 401),
        (OAuthStateMismatchError("qq"), 400),
        (ThirdPartyAuthorizationError("qq", "boom"), 401),
        (RuntimeError("other"), 500),
    ],
)
def test_status_for(exc, expected):
    assert status_for(exc) == expected


def make_client(exc: Exception) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    """Tests for register_exception_handlers()."""

    def test_validation_error_lists_messages(self):
        client = make_client(ValidationError(["first", "second"]))

        response = client.get("/boom")

        assert response.status_code == 422
        assert response.json() == {"detail": ["first", "second"]}

    def test_duplicate_star_message(self):
        response = make_client(DuplicateOperationError("您已收藏！")).get("/boom")

        assert response.status_code == 409
        assert response.json() == {"detail": "您已收藏！"}

    def test_provider_error_hides_details(self):
        response = make_client(
            ThirdPartyAuthorizationError("weibo", "secret upstream body")
        ).get("/boom")

        assert response.status_code == 401
        assert response.json() == {"detail": "Third-party authorization failed"}

    def test_util_error_is_internal(self):
        response = make_client(DecryptionError("bad key")).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
