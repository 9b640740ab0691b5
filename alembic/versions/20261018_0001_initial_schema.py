"""
Initial schema: posts, engagement, users, audit log, subscribers and contacts.

Revision ID: 0001
Revises:
Create Date: 2026-10-18

This migration creates the complete initial schema for the blog backend:
- blogs: Blog posts with an author snapshot and a like counter
- blog_likes: One row per (blog, user) like
- blog_reviews: Ordered reviews addressed by a stable review id
- users: Profiles mirrored from the identity provider, with a role
- activities: Append-only audit log
- subscribers / contacts: Mailing list and contact form messages
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# Revision identifiers, used by Alembic
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Apply schema changes for this revision."""
    # Create blogs table
    op.create_table(
        "blogs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("image", sa.String(length=2048), nullable=True),
        sa.Column("author_uid", sa.String(length=128), nullable=False),
        sa.Column("author_email", sa.String(length=320), nullable=True),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
    )
    op.create_index("ix_blogs_author_email", "blogs", ["author_email"], unique=False)
    op.create_index("ix_blogs_created_at", "blogs", ["created_at"], unique=False)
    op.create_index("ix_blogs_likes_created", "blogs", ["likes", "created_at"], unique=False)

    # Create blog_likes table
    op.create_table(
        "blog_likes",
        sa.Column("blog_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.String(length=128), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("blog_id", "user_id"),
    )

    # Create blog_reviews table
    op.create_table(
        "blog_reviews",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("review_id", sa.String(length=64), nullable=False),
        sa.Column("blog_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.String(length=128), nullable=True),
        sa.Column("user_name", sa.String(length=100), nullable=True),
        sa.Column("user_image", sa.String(length=2048), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("seq"),
        sa.UniqueConstraint("blog_id", "review_id", name="uq_blog_reviews_blog_review"),
    )
    op.create_index("ix_blog_reviews_blog_seq", "blog_reviews", ["blog_id", "seq"], unique=False)

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("uid", sa.String(length=128), nullable=True),
        sa.Column("display_name", sa.String(length=100), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("photo_url", sa.String(length=2048), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_log_in", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_updated", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_uid", "users", ["uid"], unique=False)

    # Create activities table
    op.create_table(
        "activities",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_uid", sa.String(length=128), nullable=False),
        sa.Column("user_email", sa.String(length=320), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("message", sa.String(length=500), nullable=False),
        sa.Column("blog_id", sa.Uuid(), nullable=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("seq"),
    )
    op.create_index(
        "ix_activities_uid_timestamp",
        "activities",
        ["user_uid", "timestamp"],
        unique=False,
    )

    # Create subscribers table
    op.create_table(
        "subscribers",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    # Create contacts table
    op.create_table(
        "contacts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Revert schema changes for this revision."""
    op.drop_table("contacts")
    op.drop_table("subscribers")
    op.drop_index("ix_activities_uid_timestamp", table_name="activities")
    op.drop_table("activities")
    op.drop_index("ix_users_uid", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_blog_reviews_blog_seq", table_name="blog_reviews")
    op.drop_table("blog_reviews")
    op.drop_table("blog_likes")
    op.drop_index("ix_blogs_likes_created", table_name="blogs")
    op.drop_index("ix_blogs_created_at", table_name="blogs")
    op.drop_index("ix_blogs_author_email", table_name="blogs")
    op.drop_table("blogs")
