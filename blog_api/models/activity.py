"""Audit log database model."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import cast
from uuid import UUID

from sqlalchemy import DateTime, Index, Integer, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

GUEST_UID = "guest"
UNKNOWN_EMAIL = "unknown"


class ActivityType(StrEnum):
    CREATE = "CREATE"


class ActivityDB(SQLModel, table=True):
    """
    Append-only audit entry.

    ``user_uid``/``user_email`` are copied at event time and are not a
    reference to ``users``; ``blog_id`` is kept after the post is deleted.
    """

    __tablename__ = cast("declared_attr[str]", "activities")

    __table_args__ = (Index("ix_activities_uid_timestamp", "user_uid", "timestamp"),)

    seq: int | None = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )
    user_uid: str = Field(sa_column=Column(String(128), nullable=False))
    user_email: str = Field(sa_column=Column(String(320), nullable=False))
    type: str = Field(sa_column=Column(String(32), nullable=False))
    message: str = Field(sa_column=Column(String(500), nullable=False))
    blog_id: UUID | None = Field(default=None, sa_column=Column(Uuid))
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
