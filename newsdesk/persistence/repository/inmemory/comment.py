"""In-memory comment and reply repositories for testing."""

from typing import List, Optional, Sequence

from newsdesk.domain.model import Comment, Reply
from newsdesk.domain.repository import CommentRepository, ReplyRepository
from newsdesk.domain.value import ArticleId, CommentId, ReplyId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    def _newest_first(self, comments: list[Comment]) -> list[Comment]:
        # Later inserts win ties so equal timestamps still read newest first
        indexed = list(enumerate(comments))
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [c for _, c in indexed]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        for comment in self._comments:
            if comment.id == comment_id:
                return comment
        return None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once."""
        wanted = set(comment_ids)
        return [c for c in self._comments if c.id in wanted]

    async def find_by_article(
        self, article_id: ArticleId, offset: int = 0, limit: int = 10
    ) -> List[Comment]:
        """Find comments on an article, newest first."""
        matching = [c for c in self._comments if c.article_id == article_id]
        return self._newest_first(matching)[offset : offset + limit]

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments on an article."""
        return sum(1 for c in self._comments if c.article_id == article_id)

    async def find_by_author(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Comment]:
        """Find comments written by a registered user, newest first."""
        matching = [c for c in self._comments if c.author.user_id == user_id]
        return self._newest_first(matching)[offset : offset + limit]

    async def count_by_author(self, user_id: UserId) -> int:
        """Count comments written by a registered user."""
        return sum(1 for c in self._comments if c.author.user_id == user_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        self._comments.append(comment)
        return comment


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self) -> None:
        self._replies: list[Reply] = []

    async def find_by_ids(self, reply_ids: Sequence[ReplyId]) -> List[Reply]:
        """Find several replies at once."""
        wanted = set(reply_ids)
        return [r for r in self._replies if r.id in wanted]

    async def find_by_comment_ids(self, comment_ids: Sequence[CommentId]) -> List[Reply]:
        """Find replies to any of the given comments, oldest first."""
        wanted = set(comment_ids)
        # Insertion order is chronological; sorted() is stable on ties
        return sorted(
            (r for r in self._replies if r.comment_id in wanted),
            key=lambda r: r.created_at,
        )

    async def save(self, reply: Reply) -> Reply:
        """Save a new reply."""
        self._replies.append(reply)
        return reply
