"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from newsdesk.domain.error import NotFoundError, ValidationError
from newsdesk.domain.model import CommentAuthor
from newsdesk.domain.service import CommentService, NotificationService
from newsdesk.domain.service.comment_service import anonymous_author, mask_ip
from newsdesk.domain.value import ArticleId, CommentId, Page, UserId
from newsdesk.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryReplyRepository,
)

DEFAULT_AVATAR = "/uploads/images/avatar/default.png"


def make_service() -> tuple[CommentService, InMemoryNotificationRepository]:
    notifications = InMemoryNotificationRepository()
    service = CommentService(
        InMemoryCommentRepository(),
        InMemoryReplyRepository(),
        NotificationService(notifications),
    )
    return service, notifications


def member(name: str = "Reader") -> CommentAuthor:
    return CommentAuthor(
        user_id=UserId(uuid4()), display_name=name, avatar_url=DEFAULT_AVATAR
    )


class TestMaskIp:
    """Tests for mask_ip()."""

    @pytest.mark.parametrize(
        "ip,expected",
        [
            ("203.0.113.42", "203.0.113.*"),
            ("2001:db8::1", "2001:db8::*"),
            (None, "*"),
            ("", "*"),
        ],
    )
    def test_masks_last_segment(self, ip, expected):
        assert mask_ip(ip) == expected

    def test_anonymous_author_named_after_ip(self):
        author = anonymous_author("203.0.113.42", DEFAULT_AVATAR)

        assert author.is_anonymous
        assert author.display_name == "网友 203.0.113.*"
        assert author.avatar_url == DEFAULT_AVATAR


class TestCreateComment:
    """Tests for CommentService.create_comment()."""

    @pytest.mark.asyncio
    async def test_creates_comment(self):
        service, _ = make_service()
        author = member()

        comment = await service.create_comment(ArticleId(1), author, "Nice piece")

        assert comment.article_id == 1
        assert comment.author == author
        assert comment.content == "Nice piece"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_requires_content(self, content):
        service, _ = make_service()

        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(ArticleId(1), member(), content)

        assert exc_info.value.messages == ["The content field is required."]

    @pytest.mark.asyncio
    async def test_rejects_overlong_content(self):
        service, _ = make_service()

        with pytest.raises(ValidationError):
            await service.create_comment(ArticleId(1), member(), "x" * 10001)


class TestCreateReply:
    """Tests for CommentService.create_reply()."""

    @pytest.mark.asyncio
    async def test_reply_notifies_comment_author(self):
        """Should notify the registered author of the comment."""
        # Arrange
        service, notifications = make_service()
        writer = member("Writer")
        comment = await service.create_comment(ArticleId(1), writer, "First")

        # Act
        reply = await service.create_reply(
            ArticleId(1), comment.id, member("Replier"), "Agreed"
        )

        # Assert
        items = await notifications.find_by_user(writer.user_id)
        assert len(items) == 1
        assert items[0].reply_id == reply.id
        assert items[0].comment_id == comment.id
        assert items[0].is_read is False

    @pytest.mark.asyncio
    async def test_self_reply_does_not_notify(self):
        service, notifications = make_service()
        writer = member("Writer")
        comment = await service.create_comment(ArticleId(1), writer, "First")

        await service.create_reply(ArticleId(1), comment.id, writer, "Also")

        assert await notifications.count_by_user(writer.user_id) == 0

    @pytest.mark.asyncio
    async def test_anonymous_comment_author_not_notified(self):
        service, notifications = make_service()
        comment = await service.create_comment(
            ArticleId(1), anonymous_author("10.0.0.1", DEFAULT_AVATAR), "First"
        )

        await service.create_reply(ArticleId(1), comment.id, member(), "Hi")

        assert notifications._notifications == []

    @pytest.mark.asyncio
    async def test_unknown_comment_not_found(self):
        service, _ = make_service()

        with pytest.raises(NotFoundError):
            await service.create_reply(
                ArticleId(1), CommentId(uuid4()), member(), "Hello?"
            )

    @pytest.mark.asyncio
    async def test_comment_on_other_article_not_found(self):
        """Should not let a reply attach across articles."""
        service, _ = make_service()
        comment = await service.create_comment(ArticleId(1), member(), "First")

        with pytest.raises(NotFoundError):
            await service.create_reply(ArticleId(2), comment.id, member(), "Hi")


class TestListing:
    """Tests for comment listing and reply grouping."""

    @pytest.mark.asyncio
    async def test_comments_newest_first_with_total(self):
        service, _ = make_service()
        for i in range(3):
            await service.create_comment(ArticleId(1), member(), f"Comment {i}")
        await service.create_comment(ArticleId(2), member(), "Elsewhere")

        comments, total = await service.get_comments_for_article(
            ArticleId(1), Page(page=1, per_page=2)
        )

        assert total == 3
        assert [c.content for c in comments] == ["Comment 2", "Comment 1"]

    @pytest.mark.asyncio
    async def test_comments_by_user(self):
        service, _ = make_service()
        author = member()
        await service.create_comment(ArticleId(1), author, "Mine")
        await service.create_comment(ArticleId(1), member(), "Theirs")

        comments, total = await service.get_comments_by_user(author.user_id, Page())

        assert total == 1
        assert comments[0].content == "Mine"

    @pytest.mark.asyncio
    async def test_replies_grouped_oldest_first(self):
        service, _ = make_service()
        first = await service.create_comment(ArticleId(1), member(), "First")
        second = await service.create_comment(ArticleId(1), member(), "Second")
        await service.create_reply(ArticleId(1), first.id, member(), "r1")
        await service.create_reply(ArticleId(1), first.id, member(), "r2")

        grouped = await service.get_replies_for_comments([first.id, second.id])

        assert [r.content for r in grouped[first.id]] == ["r1", "r2"]
        assert grouped[second.id] == []
