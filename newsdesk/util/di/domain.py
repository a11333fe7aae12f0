"""Domain layer DI providers."""

from dishka import Scope, provide

from newsdesk.config import AuthSettings, ContentSettings
from newsdesk.domain.repository import (
    ArticleRepository,
    ColumnRepository,
    CommentRepository,
    IdentityLinkRepository,
    NotificationRepository,
    ReplyRepository,
    StarRepository,
    UserRepository,
)
from newsdesk.domain.service import (
    ArticleService,
    CommentService,
    IdentityLinkService,
    JWTService,
    NotificationService,
    StarService,
    ThirdPartyClient,
    ThirdPartyService,
    UserService,
)
from newsdesk.domain.value import AuthProvider
from newsdesk.util.crypto import EntryCipher
from newsdesk.util.di.base import ProviderBase
from newsdesk.util.password import PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_third_party_service(
        self, clients: dict[AuthProvider, ThirdPartyClient]
    ) -> ThirdPartyService:
        """Provide third-party login service over all configured providers."""
        return ThirdPartyService(clients=clients)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_link_service(
        self, identity_link_repository: IdentityLinkRepository, cipher: EntryCipher
    ) -> IdentityLinkService:
        """Provide identity link domain service."""
        return IdentityLinkService(
            identity_link_repository=identity_link_repository, cipher=cipher
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        content_settings: ContentSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            password_hasher=password_hasher,
            default_avatar_url=content_settings.default_avatar_url,
        )

    @provide
    def get_article_service(
        self,
        article_repository: ArticleRepository,
        column_repository: ColumnRepository,
        content_settings: ContentSettings,
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(
            article_repository=article_repository,
            column_repository=column_repository,
            content_settings=content_settings,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            notification_service=notification_service,
        )

    @provide
    def get_star_service(
        self, star_repository: StarRepository, article_service: ArticleService
    ) -> StarService:
        """Provide star domain service."""
        return StarService(
            star_repository=star_repository, article_service=article_service
        )
