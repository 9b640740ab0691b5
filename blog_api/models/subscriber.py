"""Mailing-list subscriber and contact message models."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class SubscriberDB(SQLModel, table=True):
    __tablename__ = cast("declared_attr[str]", "subscribers")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    email: str = Field(sa_column=Column(String(320), unique=True, nullable=False))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class ContactDB(SQLModel, table=True):
    __tablename__ = cast("declared_attr[str]", "contacts")

    id: UUID = Field(default_factory=uuid4, primary_key=True, nullable=False)
    name: str = Field(sa_column=Column(String(100), nullable=False))
    email: str = Field(sa_column=Column(String(320), nullable=False))
    message: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
