"""User database model using SQLModel."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class Role(StrEnum):
    USER = "user"
    ADMIN = "admin"


class UserDB(SQLModel, table=True):
    """
    User profile mirrored from the external identity provider.

    The e-mail is unique and is the key the Role Resolver looks users up by.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    uid: str | None = Field(
        default=None,
        sa_column=Column(String(128), index=True),
        description="Identity-provider uid",
    )
    display_name: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="Display name",
    )
    email: str = Field(
        sa_column=Column(String(320), unique=True, nullable=False, index=True),
        description="E-mail address (unique)",
    )
    photo_url: str | None = Field(
        default=None,
        sa_column=Column(String(2048)),
        description="Profile photo URL",
    )
    role: str = Field(
        default="user",
        sa_column=Column(String(20), nullable=False, default="user"),
        description="User role (user, admin)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    last_log_in: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
    )
    last_updated: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
    )
