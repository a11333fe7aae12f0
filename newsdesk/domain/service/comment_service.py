"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from newsdesk.domain.error import NotFoundError, ValidationError
from newsdesk.domain.model import Comment, CommentAuthor, Reply, User
from newsdesk.domain.repository import CommentRepository, ReplyRepository
from newsdesk.domain.value import ArticleId, CommentId, Page, ReplyId, UserId

from .base import Service
from .notification_service import NotificationService


def mask_ip(ip: str | None) -> str:
    """Hide the last segment of an IPv4 or IPv6 address."""
    if not ip:
        return "*"
    separator = ":" if ":" in ip else "."
    parts = ip.split(separator)
    parts[-1] = "*"
    return separator.join(parts)


def author_from_user(user: User) -> CommentAuthor:
    """Snapshot a registered user as comment author."""
    return CommentAuthor(
        user_id=user.id,
        display_name=user.name,
        avatar_url=user.avatar_url,
    )


def anonymous_author(ip: str | None, default_avatar_url: str) -> CommentAuthor:
    """Author for visitors without an account, named after their masked IP."""
    return CommentAuthor(
        user_id=None,
        display_name=f"网友 {mask_ip(ip)}",
        avatar_url=default_avatar_url,
    )


MAX_CONTENT_LENGTH = 10000


def _require_content(content: str | None) -> str:
    if content is None or not content.strip():
        raise ValidationError("The content field is required.")
    if len(content) > MAX_CONTENT_LENGTH:
        raise ValidationError(
            f"The content may not be greater than {MAX_CONTENT_LENGTH} characters."
        )
    return content


class CommentService(Service):
    """Domain service for comments and replies."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            reply_repository: Reply repository
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.notification_service = notification_service

    async def create_comment(
        self,
        article_id: ArticleId,
        author: CommentAuthor,
        content: str | None,
    ) -> Comment:
        """Create a comment on an article.

        The caller checks that the article exists.

        Raises:
            ValidationError: If content is empty
        """
        content = _require_content(content)

        with logfire.span(
            "comment_service.create_comment",
            article_id=article_id,
            anonymous=author.is_anonymous,
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                author=author,
                content=content,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=article_id,
            )
            return saved

    async def create_reply(
        self,
        article_id: ArticleId,
        comment_id: CommentId,
        author: CommentAuthor,
        content: str | None,
    ) -> Reply:
        """Reply to a comment and notify its author.

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the comment does not exist on this article
        """
        content = _require_content(content)

        with logfire.span(
            "comment_service.create_reply",
            article_id=article_id,
            comment_id=str(comment_id),
            anonymous=author.is_anonymous,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.article_id != article_id:
                logfire.warn(
                    "Reply to unknown comment",
                    article_id=article_id,
                    comment_id=str(comment_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            reply = Reply(
                id=ReplyId(uuid4()),
                comment_id=comment_id,
                article_id=article_id,
                author=author,
                content=content,
                created_at=datetime.now(),
            )
            saved = await self.reply_repository.save(reply)
            await self.notification_service.notify_reply(comment, saved)

            logfire.info(
                "Reply created",
                reply_id=str(saved.id),
                comment_id=str(comment_id),
            )
            return saved

    async def get_comments_for_article(
        self, article_id: ArticleId, page: Page
    ) -> tuple[list[Comment], int]:
        """Page through an article's comments, newest first, with the total count."""
        with logfire.span(
            "comment_service.get_comments_for_article",
            article_id=article_id,
            page=page.page,
        ):
            comments = await self.comment_repository.find_by_article(
                article_id, offset=page.offset, limit=page.limit
            )
            total = await self.comment_repository.count_by_article(article_id)
            return comments, total

    async def get_comments_by_user(
        self, user_id: UserId, page: Page
    ) -> tuple[list[Comment], int]:
        """Page through a user's own comments, newest first, with the total count."""
        with logfire.span(
            "comment_service.get_comments_by_user", user_id=str(user_id), page=page.page
        ):
            comments = await self.comment_repository.find_by_author(
                user_id, offset=page.offset, limit=page.limit
            )
            total = await self.comment_repository.count_by_author(user_id)
            return comments, total

    async def get_replies_for_comments(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, list[Reply]]:
        """Group replies by comment, oldest first within each comment."""
        if not comment_ids:
            return {}

        # Single query for the whole page to avoid N+1
        replies = await self.reply_repository.find_by_comment_ids(comment_ids)
        grouped: dict[CommentId, list[Reply]] = {cid: [] for cid in comment_ids}
        for reply in replies:
            grouped.setdefault(reply.comment_id, []).append(reply)
        return grouped

    async def get_comments_by_ids(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, Comment]:
        if not comment_ids:
            return {}
        comments = await self.comment_repository.find_by_ids(comment_ids)
        return {c.id: c for c in comments}

    async def get_replies_by_ids(self, reply_ids: list[ReplyId]) -> dict[ReplyId, Reply]:
        if not reply_ids:
            return {}
        replies = await self.reply_repository.find_by_ids(reply_ids)
        return {r.id: r for r in replies}
