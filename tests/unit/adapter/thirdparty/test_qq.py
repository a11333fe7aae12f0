"""Unit tests for the QQ login client."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.adapter.thirdparty import QQClient
from newsdesk.domain.value import ProviderToken

CALLBACK = "http://localhost:8000/oauth/qq/callback"


def make_client(handler) -> QQClient:
    return QQClient(
        app_id="qq-app",
        app_secret="qq-secret",
        callback_url=CALLBACK,
        state="test",
        transport=httpx.MockTransport(handler),
    )


class TestAuthorizeUrl:
    """Tests for QQClient.authorize_url()."""

    def test_includes_configured_state(self):
        """Should carry client_id, redirect_uri and the configured state once each."""
        client = QQClient("qq-app", "qq-secret", CALLBACK, state="test")

        url = client.authorize_url()

        query = parse_qs(urlparse(url).query)
        assert url.startswith("https://graph.qq.com/oauth2.0/authorize?")
        assert query == {
            "response_type": ["code"],
            "client_id": ["qq-app"],
            "redirect_uri": [CALLBACK],
            "state": ["test"],
        }


class TestExchangeCode:
    """Tests for QQClient.exchange_code()."""

    @pytest.mark.asyncio
    async def test_parses_form_token_then_jsonp_open_id(self):
        """Should read the form-encoded token, then the JSONP open id."""
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/oauth2.0/token":
                assert request.method == "GET"
                assert request.url.params["code"] == "code-1"
                return httpx.Response(
                    200, text="access_token=at-1&expires_in=7776000&refresh_token=rt"
                )
            if request.url.path == "/oauth2.0/me":
                assert request.url.params["access_token"] == "at-1"
                return httpx.Response(
                    200,
                    text='callback( {"client_id":"qq-app","openid":"OPENID-1"} );',
                )
            return httpx.Response(404)

        client = make_client(handler)

        # Act
        token = await client.exchange_code("code-1")

        # Assert
        assert token == ProviderToken(access_token="at-1", open_id="OPENID-1")

    @pytest.mark.asyncio
    async def test_jsonp_error_raises(self):
        """Should raise when the token endpoint answers with a JSONP error."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                text='callback( {"error":100019,"error_description":"code to access token error"} );',
            )

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError):
            await client.exchange_code("bad")

    @pytest.mark.asyncio
    async def test_missing_access_token_raises(self):
        """Should raise when the form lacks access_token."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="expires_in=7776000")

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError):
            await client.exchange_code("code-1")

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        """Should raise on a non-2xx status."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError):
            await client.exchange_code("code-1")


class TestFetchProfile:
    """Tests for QQClient.fetch_profile()."""

    @pytest.mark.asyncio
    async def test_prefers_qq_avatar(self):
        """Should pick figureurl_qq_2 and pass appid and openid."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["appid"] == "qq-app"
            assert request.url.params["openid"] == "OPENID-1"
            return httpx.Response(
                200,
                json={
                    "ret": 0,
                    "nickname": "qq reader",
                    "figureurl_qq_2": "http://q.qlogo.cn/qq_2.jpg",
                    "figureurl_2": "http://qzapp.qlogo.cn/2.jpg",
                },
            )

        client = make_client(handler)

        profile = await client.fetch_profile(
            ProviderToken(access_token="at-1", open_id="OPENID-1")
        )

        assert profile.avatar_url == "http://q.qlogo.cn/qq_2.jpg"
        assert profile.nickname == "qq reader"

    @pytest.mark.asyncio
    async def test_nonzero_ret_raises(self):
        """Should raise when QQ reports ret != 0."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"ret": -1, "msg": "client request's app is blocked"})

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError):
            await client.fetch_profile(
                ProviderToken(access_token="at-1", open_id="OPENID-1")
            )
