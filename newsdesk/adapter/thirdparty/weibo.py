"""Weibo OAuth 2.0 client."""

from urllib.parse import urlencode

from newsdesk.adapter.thirdparty.http import HttpThirdPartyClient
from newsdesk.domain.value import AuthProvider, ProviderProfile, ProviderToken

AUTHORIZE_URL = "https://api.weibo.com/oauth2/authorize"
TOKEN_URL = "https://api.weibo.com/oauth2/access_token"
USER_SHOW_URL = "https://api.weibo.com/2/users/show.json"


class WeiboClient(HttpThirdPartyClient):
    """Weibo login.

    Token exchange is a form POST answered with JSON carrying the
    access token and the numeric uid.
    """

    provider = AuthProvider.WEIBO

    def authorize_url(self) -> str:
        params = {
            "client_id": self.app_id,
            "redirect_uri": self.callback_url,
            "response_type": "code",
        }
        return f"{AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> ProviderToken:
        response = await self._request(
            "POST",
            TOKEN_URL,
            data={
                "client_id": self.app_id,
                "client_secret": self.app_secret,
                "grant_type": "authorization_code",
                "redirect_uri": self.callback_url,
                "code": code,
            },
            step="token exchange",
        )
        body = self._parse_json(response.text, "token exchange")
        if "error" in body or "error_code" in body:
            raise self._error(
                f"token exchange rejected: {body.get('error_description') or body.get('error')}"
            )

        return ProviderToken(
            access_token=self._require(body, "access_token", "token exchange"),
            open_id=self._require(body, "uid", "token exchange"),
        )

    async def fetch_profile(self, token: ProviderToken) -> ProviderProfile:
        response = await self._request(
            "GET",
            USER_SHOW_URL,
            params={"access_token": token.access_token, "uid": token.open_id},
            step="profile",
        )
        body = self._parse_json(response.text, "profile")
        if "error" in body or "error_code" in body:
            raise self._error(f"profile rejected: {body.get('error')}")

        return ProviderProfile(
            provider=self.provider,
            open_id=token.open_id,
            avatar_url=body.get("avatar_hd") or body.get("avatar_large") or None,
            nickname=body.get("screen_name"),
        )
