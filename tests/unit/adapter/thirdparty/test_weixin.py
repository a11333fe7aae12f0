"""Unit tests for the WeChat login client."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.adapter.thirdparty import WeixinClient
from newsdesk.domain.value import ProviderToken

CALLBACK = "http://localhost:8000/oauth/weixin/callback"


def make_client(handler) -> WeixinClient:
    return WeixinClient(
        app_id="wx-app",
        app_secret="wx-secret",
        callback_url=CALLBACK,
        state="STATE",
        transport=httpx.MockTransport(handler),
    )


class TestAuthorizeUrl:
    """Tests for WeixinClient.authorize_url()."""

    def test_uses_appid_and_wechat_fragment(self):
        """Should name the app id appid, carry the state and end with #wechat_redirect."""
        client = WeixinClient("wx-app", "wx-secret", CALLBACK, state="STATE")

        url = client.authorize_url()

        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert parsed.fragment == "wechat_redirect"
        assert query["appid"] == ["wx-app"]
        assert "client_id" not in query
        assert query["redirect_uri"] == [CALLBACK]
        assert query["scope"] == ["snsapi_userinfo"]
        assert query["state"] == ["STATE"]


class TestExchangeCode:
    """Tests for WeixinClient.exchange_code()."""

    @pytest.mark.asyncio
    async def test_reads_token_and_openid(self):
        """Should GET the token endpoint and read access_token and openid."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.params["secret"] == "wx-secret"
            return httpx.Response(
                200,
                json={"access_token": "at-1", "openid": "wx-open-1", "expires_in": 7200},
            )

        client = make_client(handler)

        token = await client.exchange_code("code-1")

        assert token == ProviderToken(access_token="at-1", open_id="wx-open-1")

    @pytest.mark.asyncio
    async def test_errcode_with_200_raises(self):
        """Should treat an errcode body as a failure even with HTTP 200."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"errcode": 40029, "errmsg": "invalid code"})

        client = make_client(handler)

        with pytest.raises(ThirdPartyAuthorizationError):
            await client.exchange_code("bad")


class TestFetchProfile:
    """Tests for WeixinClient.fetch_profile()."""

    @pytest.mark.asyncio
    async def test_reads_headimgurl(self):
        """Should request zh_CN user info and use headimgurl as avatar."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["lang"] == "zh_CN"
            return httpx.Response(
                200,
                json={
                    "openid": "wx-open-1",
                    "nickname": "微信用户",
                    "headimgurl": "https://thirdwx.qlogo.cn/head.jpg",
                },
            )

        client = make_client(handler)

        profile = await client.fetch_profile(
            ProviderToken(access_token="at-1", open_id="wx-open-1")
        )

        assert profile.avatar_url == "https://thirdwx.qlogo.cn/head.jpg"
        assert profile.nickname == "微信用户"

    @pytest.mark.asyncio
    async def test_missing_avatar_is_none(self):
        """Should report no avatar when headimgurl is empty."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"openid": "wx-open-1", "headimgurl": ""})

        client = make_client(handler)

        profile = await client.fetch_profile(
            ProviderToken(access_token="at-1", open_id="wx-open-1")
        )

        assert profile.avatar_url is None
