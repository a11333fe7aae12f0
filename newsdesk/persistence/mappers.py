"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from newsdesk.domain.model import (
    Article,
    Column,
    Comment,
    CommentAuthor,
    IdentityLink,
    LinkEntry,
    Notification,
    Reply,
    Star,
    User,
)
from newsdesk.domain.value import (
    ArticleId,
    AuthProvider,
    ColumnId,
    CommentId,
    Email,
    Gender,
    IdentityLinkId,
    LinkToken,
    NotificationId,
    ReplyId,
    StarId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        display_name=row.get("display_name"),
        avatar_url=row["avatar_url"],
        gender=Gender(row["gender"]) if row.get("gender") else None,
        company=row.get("company"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Email is serialized by model_dump() (RootModel) and gender by enum value.
    """
    data = user.model_dump()
    data["gender"] = user.gender.value if user.gender else None
    return data


def row_to_identity_link(row: Dict[str, Any]) -> IdentityLink:
    """Convert database row to IdentityLink domain model.

    The entry columns are either both set or both NULL.
    """
    entry = None
    if row.get("entry_username") is not None and row.get("entry_password") is not None:
        entry = LinkEntry(
            username=row["entry_username"],
            encrypted_password=row["entry_password"],
        )

    return IdentityLink(
        id=IdentityLinkId(_uuid(row["id"])),
        provider=AuthProvider(row["provider"]),
        open_id=row["open_id"],
        token=LinkToken(row["token"]),
        entry=entry,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def identity_link_to_dict(link: IdentityLink) -> Dict[str, Any]:
    """Convert IdentityLink domain model to database dict."""
    return {
        "id": link.id,
        "provider": link.provider.value,
        "open_id": link.open_id,
        "token": link.token.root,
        "entry_username": link.entry.username if link.entry else None,
        "entry_password": link.entry.encrypted_password if link.entry else None,
        "created_at": link.created_at,
        "updated_at": link.updated_at,
    }


def row_to_column(row: Dict[str, Any]) -> Column:
    """Convert database row to Column domain model."""
    return Column(
        id=ColumnId(row["id"]),
        name=row["name"],
        parent_id=ColumnId(row["parent_id"]) if row.get("parent_id") is not None else None,
        language=row["language"],
    )


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(row["id"]),
        title=row["title"],
        column_id=ColumnId(row["column_id"]),
        origin=row.get("origin"),
        thumbnail_url=row.get("thumbnail_url"),
        has_picture=row["has_picture"],
        content=row.get("content") or "",
        created_at=row["created_at"],
    )


def _row_to_author(row: Dict[str, Any]) -> CommentAuthor:
    return CommentAuthor(
        user_id=UserId(_uuid(row["author_user_id"]))
        if row.get("author_user_id")
        else None,
        display_name=row["author_display_name"],
        avatar_url=row["author_avatar_url"],
    )


def _author_to_dict(author: CommentAuthor) -> Dict[str, Any]:
    return {
        "author_user_id": author.user_id,
        "author_display_name": author.display_name,
        "author_avatar_url": author.avatar_url,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(row["article_id"]),
        author=_row_to_author(row),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (author flattened)."""
    return {
        "id": comment.id,
        "article_id": comment.article_id,
        **_author_to_dict(comment.author),
        "content": comment.content,
        "created_at": comment.created_at,
    }


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        article_id=ArticleId(row["article_id"]),
        author=_row_to_author(row),
        content=row["content"],
        created_at=row["created_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict (author flattened)."""
    return {
        "id": reply.id,
        "comment_id": reply.comment_id,
        "article_id": reply.article_id,
        **_author_to_dict(reply.author),
        "content": reply.content,
        "created_at": reply.created_at,
    }


def row_to_star(row: Dict[str, Any]) -> Star:
    """Convert database row to Star domain model."""
    return Star(
        id=StarId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        article_id=ArticleId(row["article_id"]),
        created_at=row["created_at"],
    )


def star_to_dict(star: Star) -> Dict[str, Any]:
    """Convert Star domain model to database dict."""
    return star.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        article_id=ArticleId(row["article_id"]),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reply_id=ReplyId(_uuid(row["reply_id"])),
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return notification.model_dump()
