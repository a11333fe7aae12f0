"""Unit tests for the Weibo login client."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.adapter.thirdparty import WeiboClient
from newsdesk.domain.value import AuthProvider, ProviderToken

CALLBACK = "http://localhost:8000/oauth/weibo/callback"


def make_client(handler) -> WeiboClient:
    return WeiboClient(
        app_id="weibo-app",
        app_secret="weibo-secret",
        callback_url=CALLBACK,
        transport=httpx.MockTransport(handler),
    )


class TestAuthorizeUrl:
    """Tests for WeiboClient.authorize_url()."""

    def test_contains_single_client_id_and_encoded_redirect(self):
        """Should carry exactly one client_id and one URL-encoded redirect_uri."""
        # Arrange
        client = WeiboClient("weibo-app", "weibo-secret", CALLBACK)

        # Act
        url = client.authorize_url()

        # Assert
        query = parse_qs(urlparse(url).query)
        assert url.startswith("https://api.weibo.com/oauth2/authorize?")
        assert query["client_id"] == ["weibo-app"]
        assert query["redirect_uri"] == [CALLBACK]
        assert query["response_type"] == ["code"]
        assert "state" not in query
        assert url.count("redirect_uri=") == 1
        assert "redirect_uri=http%3A%2F%2Flocalhost%3A8000%2Foauth%2Fweibo%2Fcallback" in url


class TestExchangeCode:
    """Tests for WeiboClient.exchange_code()."""

    @pytest.mark.asyncio
    async def test_posts_form_and_reads_uid(self):
        """Should POST the code as a form and map uid to the open id."""
        # Arrange
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"access_token": "at-1", "uid": 12345})

        client = make_client(handler)

        # Act
        token = await client.exchange_code("code-1")

        # Assert
        assert seen["method"] == "POST"
        assert seen["form"]["code"] == ["code-1"]
        assert seen["form"]["grant_type"] == ["authorization_code"]
        assert seen["form"]["client_secret"] == ["weibo-secret"]
        assert token == ProviderToken(access_token="at-1", open_id="12345")

    @pytest.mark.asyncio
    async def test_error_payload_raises(self):
        """Should raise when Weibo answers with an error body."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400, json={"error": "invalid_grant", "error_code": 21325}
            )

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError):
            await client.exchange_code("bad")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Should turn transport failures into an authorization error."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError) as exc_info:
            await client.exchange_code("code-1")
        assert exc_info.value.provider == "weibo"

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        """Should reject a body that is not JSON."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError):
            await client.exchange_code("code-1")


class TestFetchProfile:
    """Tests for WeiboClient.fetch_profile()."""

    @pytest.mark.asyncio
    async def test_prefers_hd_avatar(self):
        """Should pick avatar_hd over avatar_large."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["uid"] == "12345"
            return httpx.Response(
                200,
                json={
                    "screen_name": "读者",
                    "avatar_hd": "https://tva.sinaimg.cn/hd.jpg",
                    "avatar_large": "https://tva.sinaimg.cn/large.jpg",
                },
            )

        client = make_client(handler)

        profile = await client.fetch_profile(
            ProviderToken(access_token="at-1", open_id="12345")
        )

        assert profile.provider == AuthProvider.WEIBO
        assert profile.avatar_url == "https://tva.sinaimg.cn/hd.jpg"
        assert profile.nickname == "读者"

    @pytest.mark.asyncio
    async def test_falls_back_to_large_avatar(self):
        """Should use avatar_large when there is no HD avatar."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"avatar_large": "https://tva.sinaimg.cn/large.jpg"}
            )

        client = make_client(handler)

        profile = await client.fetch_profile(
            ProviderToken(access_token="at-1", open_id="12345")
        )

        assert profile.avatar_url == "https://tva.sinaimg.cn/large.jpg"
