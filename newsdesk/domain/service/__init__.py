"""Domain services."""

from .article_service import ArticleService, ColumnArticles, HomePage
from .base import Service
from .comment_service import CommentService
from .identity_link_service import IdentityLinkService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .star_service import StarService
from .third_party_service import ThirdPartyClient, ThirdPartyService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "ColumnArticles",
    "CommentService",
    "HomePage",
    "IdentityLinkService",
    "JWTService",
    "NotificationService",
    "Service",
    "StarService",
    "ThirdPartyClient",
    "ThirdPartyService",
    "UserService",
]
