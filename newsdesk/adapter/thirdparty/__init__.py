"""Third-party login adapters (Weibo, QQ, WeChat)."""

from .http import HttpThirdPartyClient
from .mock import MockThirdPartyClient
from .qq import QQClient
from .weibo import WeiboClient
from .weixin import WeixinClient

__all__ = [
    "HttpThirdPartyClient",
    "MockThirdPartyClient",
    "QQClient",
    "WeiboClient",
    "WeixinClient",
]
