"""QQ Connect OAuth 2.0 client."""

from typing import Any
from urllib.parse import parse_qs, urlencode

from newsdesk.adapter.thirdparty.http import HttpThirdPartyClient
from newsdesk.domain.value import AuthProvider, ProviderProfile, ProviderToken

AUTHORIZE_URL = "https://graph.qq.com/oauth2.0/authorize"
TOKEN_URL = "https://graph.qq.com/oauth2.0/token"
ME_URL = "https://graph.qq.com/oauth2.0/me"
USER_INFO_URL = "https://graph.qq.com/user/get_user_info"


class QQClient(HttpThirdPartyClient):
    """QQ login.

    The token endpoint answers with a URL-encoded form, errors and the
    open-id endpoint with JSONP (``callback( {...} );``).
    """

    provider = AuthProvider.QQ

    def authorize_url(self) -> str:
        params = {
            "response_type": "code",
            "client_id": self.app_id,
            "redirect_uri": self.callback_url,
        }
        if self.state is not None:
            params["state"] = self.state
        return f"{AUTHORIZE_URL}?{urlencode(params)}"

    def _parse_jsonp(self, text: str, step: str) -> dict[str, Any]:
        """Extract the JSON object between the outermost braces."""
        start = text.find("{")
        end = text.rfind("}")
        if start == -1 or end < start:
            raise self._error(f"Malformed {step} response")
        return self._parse_json(text[start : end + 1], step)

    async def exchange_code(self, code: str) -> ProviderToken:
        response = await self._request(
            "GET",
            TOKEN_URL,
            params={
                "grant_type": "authorization_code",
                "client_id": self.app_id,
                "client_secret": self.app_secret,
                "code": code,
                "redirect_uri": self.callback_url,
            },
            step="token exchange",
        )

        text = response.text.strip()
        if "callback" in text or text.startswith("{"):
            error = self._parse_jsonp(text, "token exchange")
            raise self._error(
                f"token exchange rejected: {error.get('error_description') or error.get('error')}"
            )

        form = parse_qs(text)
        access_token = form.get("access_token", [""])[0]
        if not access_token:
            raise self._error("token exchange response missing access_token")

        open_id = await self._fetch_open_id(access_token)
        return ProviderToken(access_token=access_token, open_id=open_id)

    async def _fetch_open_id(self, access_token: str) -> str:
        response = await self._request(
            "GET",
            ME_URL,
            params={"access_token": access_token},
            step="open id",
        )
        body = self._parse_jsonp(response.text, "open id")
        if "error" in body:
            raise self._error(f"open id rejected: {body.get('error_description')}")
        return self._require(body, "openid", "open id")

    async def fetch_profile(self, token: ProviderToken) -> ProviderProfile:
        response = await self._request(
            "GET",
            USER_INFO_URL,
            params={
                "access_token": token.access_token,
                "openid": token.open_id,
                "appid": self.app_id,
            },
            step="profile",
        )
        body = self._parse_json(response.text, "profile")
        if body.get("ret", 0) != 0:
            raise self._error(f"profile rejected: {body.get('msg')}")

        return ProviderProfile(
            provider=self.provider,
            open_id=token.open_id,
            avatar_url=body.get("figureurl_qq_2") or body.get("figureurl_2") or None,
            nickname=body.get("nickname"),
        )
