"""initial_schema

Create the newsdesk schema:
- Users (site accounts, bcrypt password hashes)
- Identity links (Weibo/QQ/WeChat link records with encrypted entry)
- Columns and articles (read-mostly content store)
- Article comments and comment replies (registered or anonymous authors)
- Article stars
- Notifications (replies to a user's comments)

Revision ID: 3c1f9a7d2b64
Revises:
Create Date: 2026-10-19 10:12:04.512338

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _uuid_pk(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=False),
        sa.Column("gender", sa.String(10), nullable=True),
        sa.Column("company", sa.String(255), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute("CREATE UNIQUE INDEX uq_users_email_lower ON users (lower(email))")

    # ========================================================================
    # IDENTITY_LINKS table
    # ========================================================================
    op.create_table(
        "identity_links",
        _uuid_pk(),
        sa.Column("provider", sa.String(20), nullable=False),  # 'weibo', 'qq', 'weixin'
        sa.Column("open_id", sa.String(255), nullable=False),
        sa.Column("token", sa.String(30), nullable=False),
        sa.Column("entry_username", sa.String(255), nullable=True),
        sa.Column("entry_password", sa.Text(), nullable=True),  # Fernet ciphertext
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "provider", "open_id", name="uq_identity_links_provider_open_id"
        ),
        sa.UniqueConstraint("token", name="uq_identity_links_token"),
    )
    op.create_index(
        "idx_identity_links_entry_username", "identity_links", ["entry_username"]
    )

    # ========================================================================
    # COLUMNS and ARTICLES tables (ids assigned by the content store)
    # ========================================================================
    op.create_table(
        "columns",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("language", sa.String(20), nullable=False, server_default="zh-cn"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_columns_parent_id", "columns", ["parent_id"])

    op.create_table(
        "articles",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("column_id", sa.Integer(), nullable=False),
        sa.Column("origin", sa.String(255), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column(
            "has_picture", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["column_id"], ["columns.id"]),
    )
    op.create_index(
        "idx_articles_created_at", "articles", [sa.text("created_at DESC")]
    )
    op.create_index("idx_articles_column_id", "articles", ["column_id"])
    op.create_index("idx_articles_origin", "articles", ["origin"])

    # ========================================================================
    # ARTICLE_COMMENTS and COMMENT_REPLIES tables
    # ========================================================================
    op.create_table(
        "article_comments",
        _uuid_pk(),
        sa.Column("article_id", sa.Integer(), nullable=False),
        sa.Column("author_user_id", sa.UUID(), nullable=True),  # NULL = anonymous
        sa.Column("author_display_name", sa.String(255), nullable=False),
        sa.Column("author_avatar_url", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["author_user_id"], ["users.id"], ondelete="SET NULL"
        ),
    )
    op.create_index(
        "idx_article_comments_article_id", "article_comments", ["article_id"]
    )
    op.create_index(
        "idx_article_comments_author_user_id", "article_comments", ["author_user_id"]
    )
    op.create_index(
        "idx_article_comments_created_at",
        "article_comments",
        [sa.text("created_at DESC")],
    )

    op.create_table(
        "comment_replies",
        _uuid_pk(),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("article_id", sa.Integer(), nullable=False),
        sa.Column("author_user_id", sa.UUID(), nullable=True),
        sa.Column("author_display_name", sa.String(255), nullable=False),
        sa.Column("author_avatar_url", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["article_comments.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["author_user_id"], ["users.id"], ondelete="SET NULL"
        ),
    )
    op.create_index(
        "idx_comment_replies_comment_id", "comment_replies", ["comment_id"]
    )

    # ========================================================================
    # ARTICLE_STARS table
    # ========================================================================
    op.create_table(
        "article_stars",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("article_id", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "user_id", "article_id", name="uq_article_stars_user_article"
        ),
    )
    op.create_index("idx_article_stars_user_id", "article_stars", ["user_id"])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("article_id", sa.Integer(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("reply_id", sa.UUID(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["article_comments.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["reply_id"], ["comment_replies.id"], ondelete="CASCADE"
        ),
    )
    op.create_index(
        "idx_notifications_user_id_created_at",
        "notifications",
        ["user_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("article_stars")
    op.drop_table("comment_replies")
    op.drop_table("article_comments")
    op.drop_table("articles")
    op.drop_table("columns")
    op.drop_table("identity_links")
    op.drop_table("users")
