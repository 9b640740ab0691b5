"""Blog post database models using SQLModel.

A post is stored as the ``blogs`` row plus two owned child tables:
``blog_likes`` holds the set of users who liked the post and
``blog_reviews`` holds the ordered review list.
"""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Index, Integer, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``author_uid``/``author_email`` are a snapshot of the creating identity
    and are never rewritten by updates. ``likes`` always equals the number
    of ``blog_likes`` rows for the post.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
        Index("ix_blogs_likes_created", "likes", "created_at"),
    )

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog content",
    )
    category: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="Blog category",
    )
    image: str | None = Field(
        default=None,
        sa_column=Column(String(2048)),
        description="Cover image URL",
    )

    # Author snapshot
    author_uid: str = Field(
        sa_column=Column(String(128), nullable=False),
        description="Identity-provider uid of the author",
    )
    author_email: str | None = Field(
        default=None,
        sa_column=Column(String(320), index=True),
        description="Author e-mail used for ownership checks",
    )

    likes: int = Field(default=0, nullable=False, description="Like counter")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Ten Days in Kyoto",
                "content": "Kyoto rewards slow travellers...",
                "category": "travel",
                "image": "https://i.ibb.co/abc/kyoto.jpg",
                "author_uid": "f3Ks9...",
                "author_email": "writer@example.com",
                "likes": 0,
            },
        },
    )


class BlogLikeDB(SQLModel, table=True):
    """One row per (post, user) like; the composite key rejects a second like."""

    __tablename__ = cast("declared_attr[str]", "blog_likes")

    blog_id: UUID = Field(
        sa_column=Column(
            "blog_id",
            Uuid,
            ForeignKey("blogs.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    user_id: str = Field(
        sa_column=Column(String(128), primary_key=True),
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class BlogReviewDB(SQLModel, table=True):
    """
    Review attached to a blog post.

    ``seq`` is the insertion sequence and defines review order; ``review_id``
    is the stable public identity used for targeted removal.
    """

    __tablename__ = cast("declared_attr[str]", "blog_reviews")

    __table_args__ = (
        UniqueConstraint("blog_id", "review_id", name="uq_blog_reviews_blog_review"),
        Index("ix_blog_reviews_blog_seq", "blog_id", "seq"),
    )

    seq: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    review_id: str = Field(sa_column=Column(String(64), nullable=False))
    blog_id: UUID = Field(
        sa_column=Column(
            "blog_id",
            Uuid,
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )

    user_id: str | None = Field(default=None, sa_column=Column(String(128)))
    user_name: str | None = Field(default=None, sa_column=Column(String(100)))
    user_image: str | None = Field(default=None, sa_column=Column(String(2048)))
    comment: str | None = Field(default=None, sa_column=Column(Text))
    rating: int | None = Field(default=None)
    date: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
    )
