"""SQLAlchemy table definitions for newsdesk.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),  # bcrypt
    Column("display_name", String(100), nullable=True),
    Column("avatar_url", Text, nullable=False),
    Column("gender", String(10), nullable=True),  # '男' / '女'
    Column("company", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Emails are unique regardless of case
Index("uq_users_email_lower", func.lower(users_table.c.email), unique=True)

# ============================================================================
# IDENTITY LINKS TABLE (third-party login link records)
# ============================================================================
identity_links_table = Table(
    "identity_links",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("provider", String(20), nullable=False),  # 'weibo', 'qq', 'weixin'
    Column("open_id", String(255), nullable=False),
    Column("token", String(30), nullable=False),
    Column("entry_username", String(255), nullable=True),
    Column("entry_password", Text, nullable=True),  # Fernet ciphertext
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("provider", "open_id", name="uq_identity_links_provider_open_id"),
    UniqueConstraint("token", name="uq_identity_links_token"),
)

Index("idx_identity_links_entry_username", identity_links_table.c.entry_username)

# ============================================================================
# COLUMNS TABLE (content store)
# ============================================================================
columns_table = Table(
    "columns",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(255), nullable=False),
    Column("parent_id", Integer, nullable=True),
    Column("language", String(20), nullable=False, server_default="zh-cn"),
)

Index("idx_columns_parent_id", columns_table.c.parent_id)

# ============================================================================
# ARTICLES TABLE (content store)
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("title", String(500), nullable=False),
    Column("column_id", Integer, ForeignKey("columns.id"), nullable=False),
    Column("origin", String(255), nullable=True),  # Writer / source
    Column("thumbnail_url", Text, nullable=True),
    Column("has_picture", Boolean, nullable=False, server_default="false"),
    Column("content", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_articles_created_at", articles_table.c.created_at.desc())
Index("idx_articles_column_id", articles_table.c.column_id)
Index("idx_articles_origin", articles_table.c.origin)

# ============================================================================
# ARTICLE COMMENTS TABLE
# ============================================================================
article_comments_table = Table(
    "article_comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "article_id",
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # NULL for anonymous visitors
    Column(
        "author_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("author_display_name", String(255), nullable=False),
    Column("author_avatar_url", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_article_comments_article_id", article_comments_table.c.article_id)
Index("idx_article_comments_author_user_id", article_comments_table.c.author_user_id)
Index("idx_article_comments_created_at", article_comments_table.c.created_at.desc())

# ============================================================================
# COMMENT REPLIES TABLE
# ============================================================================
comment_replies_table = Table(
    "comment_replies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("article_comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "article_id",
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("author_display_name", String(255), nullable=False),
    Column("author_avatar_url", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comment_replies_comment_id", comment_replies_table.c.comment_id)

# ============================================================================
# ARTICLE STARS TABLE
# ============================================================================
article_stars_table = Table(
    "article_stars",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "article_id",
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "article_id", name="uq_article_stars_user_article"),
)

Index("idx_article_stars_user_id", article_stars_table.c.user_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "article_id",
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "comment_id",
        UUID,
        ForeignKey("article_comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "reply_id",
        UUID,
        ForeignKey("comment_replies.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_id_created_at",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)
