"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from newsdesk.domain.model import Article, Comment, CommentAuthor, Reply, User


class PageInfo(BaseModel):
    """Pagination metadata."""

    page: int
    per_page: int
    total: int


class AuthorItem(BaseModel):
    """Comment or reply author."""

    user_id: str | None
    display_name: str
    avatar_url: str


class ReplyItem(BaseModel):
    """Reply in a response."""

    reply_id: str
    comment_id: str
    author: AuthorItem
    content: str
    created_at: datetime


class CommentItem(BaseModel):
    """Comment in a response, with its replies."""

    comment_id: str
    article_id: int
    author: AuthorItem
    content: str
    created_at: datetime
    replies: list[ReplyItem] = []


class ArticleItem(BaseModel):
    """Article in a listing (no body)."""

    id: int
    title: str
    column_id: int
    origin: str | None
    thumbnail_url: str | None
    has_picture: bool
    created_at: datetime


class UserProfile(BaseModel):
    """Public profile of an account."""

    user_id: str
    email: str
    display_name: str | None
    avatar_url: str
    gender: str | None
    company: str | None


def to_author_item(author: CommentAuthor) -> AuthorItem:
    return AuthorItem(
        user_id=str(author.user_id) if author.user_id else None,
        display_name=author.display_name,
        avatar_url=author.avatar_url,
    )


def to_reply_item(reply: Reply) -> ReplyItem:
    return ReplyItem(
        reply_id=str(reply.id),
        comment_id=str(reply.comment_id),
        author=to_author_item(reply.author),
        content=reply.content,
        created_at=reply.created_at,
    )


def to_comment_item(comment: Comment, replies: list[Reply] | None = None) -> CommentItem:
    return CommentItem(
        comment_id=str(comment.id),
        article_id=comment.article_id,
        author=to_author_item(comment.author),
        content=comment.content,
        created_at=comment.created_at,
        replies=[to_reply_item(r) for r in replies or []],
    )


def to_article_item(article: Article) -> ArticleItem:
    return ArticleItem(
        id=article.id,
        title=article.title,
        column_id=article.column_id,
        origin=article.origin,
        thumbnail_url=article.thumbnail_url,
        has_picture=article.has_picture,
        created_at=article.created_at,
    )


def to_user_profile(user: User) -> UserProfile:
    return UserProfile(
        user_id=str(user.id),
        email=str(user.email),
        display_name=user.display_name,
        avatar_url=user.avatar_url,
        gender=user.gender.value if user.gender else None,
        company=user.company,
    )
