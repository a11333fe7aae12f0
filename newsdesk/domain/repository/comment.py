"""Comment and reply repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from newsdesk.domain.model.comment import Comment, Reply
from newsdesk.domain.value import ArticleId, CommentId, ReplyId, UserId


class CommentRepository(ABC):
    """Repository for article comments."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once, in no particular order."""
        pass

    @abstractmethod
    async def find_by_article(
        self, article_id: ArticleId, offset: int = 0, limit: int = 10
    ) -> List[Comment]:
        """Find comments on an article, newest first.

        Args:
            article_id: Article ID
            offset: Number of comments to skip
            limit: Maximum number of comments

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments on an article."""
        pass

    @abstractmethod
    async def find_by_author(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Comment]:
        """Find comments written by a registered user, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, user_id: UserId) -> int:
        """Count comments written by a registered user."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: Comment to save

        Returns:
            The saved comment
        """
        pass


class ReplyRepository(ABC):
    """Repository for replies to comments."""

    @abstractmethod
    async def find_by_ids(self, reply_ids: Sequence[ReplyId]) -> List[Reply]:
        """Find several replies at once, in no particular order."""
        pass

    @abstractmethod
    async def find_by_comment_ids(self, comment_ids: Sequence[CommentId]) -> List[Reply]:
        """Find replies to any of the given comments, oldest first.

        Args:
            comment_ids: Comment IDs

        Returns:
            Replies in conversation order
        """
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a new reply."""
        pass
