"""Application layer DI providers."""

from dishka import Scope, provide

from newsdesk.application.usecase.article import (
    GetArticleUseCase,
    GetHomeUseCase,
    ListCommentsUseCase,
    ListReportColumnsUseCase,
)
from newsdesk.application.usecase.auth import LoginUseCase
from newsdesk.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
)
from newsdesk.application.usecase.oauth import (
    GetAuthorizeUrlUseCase,
    GetEntryUseCase,
    ThirdPartyCallbackUseCase,
)
from newsdesk.application.usecase.star import StarArticleUseCase, UnstarArticleUseCase
from newsdesk.application.usecase.user import (
    CheckNoticeUseCase,
    ClearNoticeUseCase,
    GetUserProfileUseCase,
    ListMyCommentsUseCase,
    ListMyInformationUseCase,
    ListMyStarsUseCase,
    RegisterUserUseCase,
    UpdateUserProfileUseCase,
)
from newsdesk.config import ContentSettings
from newsdesk.domain.service import (
    ArticleService,
    CommentService,
    IdentityLinkService,
    JWTService,
    NotificationService,
    StarService,
    ThirdPartyService,
    UserService,
)
from newsdesk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Third-party login use cases
    @provide
    def get_authorize_url_use_case(
        self, third_party_service: ThirdPartyService
    ) -> GetAuthorizeUrlUseCase:
        """Provide authorize URL use case."""
        return GetAuthorizeUrlUseCase(third_party_service=third_party_service)

    @provide
    def get_callback_use_case(
        self,
        third_party_service: ThirdPartyService,
        identity_link_service: IdentityLinkService,
    ) -> ThirdPartyCallbackUseCase:
        """Provide third-party callback use case."""
        return ThirdPartyCallbackUseCase(
            third_party_service=third_party_service,
            identity_link_service=identity_link_service,
        )

    @provide
    def get_entry_use_case(
        self, identity_link_service: IdentityLinkService
    ) -> GetEntryUseCase:
        """Provide entry lookup use case."""
        return GetEntryUseCase(identity_link_service=identity_link_service)

    # Account use cases
    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_register_user_use_case(
        self, user_service: UserService, identity_link_service: IdentityLinkService
    ) -> RegisterUserUseCase:
        """Provide registration use case."""
        return RegisterUserUseCase(
            user_service=user_service, identity_link_service=identity_link_service
        )

    @provide
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService, identity_link_service: IdentityLinkService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(
            user_service=user_service, identity_link_service=identity_link_service
        )

    @provide
    def get_list_my_comments_use_case(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> ListMyCommentsUseCase:
        """Provide own comments use case."""
        return ListMyCommentsUseCase(
            comment_service=comment_service, article_service=article_service
        )

    @provide
    def get_list_my_stars_use_case(
        self, star_service: StarService, article_service: ArticleService
    ) -> ListMyStarsUseCase:
        """Provide own stars use case."""
        return ListMyStarsUseCase(
            star_service=star_service, article_service=article_service
        )

    @provide
    def get_list_my_information_use_case(
        self,
        notification_service: NotificationService,
        comment_service: CommentService,
        article_service: ArticleService,
    ) -> ListMyInformationUseCase:
        """Provide own information use case."""
        return ListMyInformationUseCase(
            notification_service=notification_service,
            comment_service=comment_service,
            article_service=article_service,
        )

    @provide
    def get_check_notice_use_case(
        self, notification_service: NotificationService
    ) -> CheckNoticeUseCase:
        """Provide check notice use case."""
        return CheckNoticeUseCase(notification_service=notification_service)

    @provide
    def get_clear_notice_use_case(
        self, notification_service: NotificationService
    ) -> ClearNoticeUseCase:
        """Provide clear notice use case."""
        return ClearNoticeUseCase(notification_service=notification_service)

    # Article use cases
    @provide
    def get_home_use_case(self, article_service: ArticleService) -> GetHomeUseCase:
        """Provide home page use case."""
        return GetHomeUseCase(article_service=article_service)

    @provide
    def get_article_use_case(
        self,
        article_service: ArticleService,
        star_service: StarService,
        comment_service: CommentService,
        content_settings: ContentSettings,
    ) -> GetArticleUseCase:
        """Provide article detail use case."""
        return GetArticleUseCase(
            article_service=article_service,
            star_service=star_service,
            comment_service=comment_service,
            content_settings=content_settings,
        )

    @provide
    def get_list_report_columns_use_case(
        self, article_service: ArticleService
    ) -> ListReportColumnsUseCase:
        """Provide report columns use case."""
        return ListReportColumnsUseCase(article_service=article_service)

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> ListCommentsUseCase:
        """Provide article comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, article_service=article_service
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            user_service=user_service,
            content_settings=content_settings,
        )

    @provide
    def get_create_reply_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            comment_service=comment_service,
            article_service=article_service,
            user_service=user_service,
            content_settings=content_settings,
        )

    # Star use cases
    @provide
    def get_star_article_use_case(self, star_service: StarService) -> StarArticleUseCase:
        """Provide star use case."""
        return StarArticleUseCase(star_service=star_service)

    @provide
    def get_unstar_article_use_case(
        self, star_service: StarService
    ) -> UnstarArticleUseCase:
        """Provide unstar use case."""
        return UnstarArticleUseCase(star_service=star_service)
