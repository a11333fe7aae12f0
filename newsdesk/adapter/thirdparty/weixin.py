"""WeChat (Weixin) OAuth 2.0 client for the in-app browser."""

from urllib.parse import urlencode

from newsdesk.adapter.thirdparty.http import HttpThirdPartyClient
from newsdesk.domain.value import AuthProvider, ProviderProfile, ProviderToken

AUTHORIZE_URL = "https://open.weixin.qq.com/connect/oauth2/authorize"
TOKEN_URL = "https://api.weixin.qq.com/sns/oauth2/access_token"
USER_INFO_URL = "https://api.weixin.qq.com/sns/userinfo"


class WeixinClient(HttpThirdPartyClient):
    """WeChat login.

    WeChat calls the app id ``appid`` and reports failures as a JSON
    body with ``errcode`` (often with HTTP 200).
    """

    provider = AuthProvider.WEIXIN

    def authorize_url(self) -> str:
        params = {
            "appid": self.app_id,
            "redirect_uri": self.callback_url,
            "response_type": "code",
            "scope": "snsapi_userinfo",
        }
        if self.state is not None:
            params["state"] = self.state
        return f"{AUTHORIZE_URL}?{urlencode(params)}#wechat_redirect"

    def _check_errcode(self, body: dict, step: str) -> None:
        if body.get("errcode"):
            raise self._error(f"{step} rejected: {body.get('errmsg')}")

    async def exchange_code(self, code: str) -> ProviderToken:
        response = await self._request(
            "GET",
            TOKEN_URL,
            params={
                "appid": self.app_id,
                "secret": self.app_secret,
                "code": code,
                "grant_type": "authorization_code",
            },
            step="token exchange",
        )
        body = self._parse_json(response.text, "token exchange")
        self._check_errcode(body, "token exchange")

        return ProviderToken(
            access_token=self._require(body, "access_token", "token exchange"),
            open_id=self._require(body, "openid", "token exchange"),
        )

    async def fetch_profile(self, token: ProviderToken) -> ProviderProfile:
        response = await self._request(
            "GET",
            USER_INFO_URL,
            params={
                "access_token": token.access_token,
                "openid": token.open_id,
                "lang": "zh_CN",
            },
            step="profile",
        )
        body = self._parse_json(response.text, "profile")
        self._check_errcode(body, "profile")

        return ProviderProfile(
            provider=self.provider,
            open_id=token.open_id,
            avatar_url=body.get("headimgurl") or None,
            nickname=body.get("nickname"),
        )
