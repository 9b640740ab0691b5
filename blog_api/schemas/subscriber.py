"""Subscriber and contact message schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from blog_api.configs.settings import MAX_MESSAGE_LENGTH, MAX_NAME_LENGTH


class SubscriberCreate(BaseModel):
    email: EmailStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class SubscriberResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    email: str
    created_at: datetime = Field(alias="createdAt")


class SubscriberListResponse(BaseModel):
    success: bool = True
    subscribers: list[SubscriberResponse]


class ContactCreate(BaseModel):
    """Contact form submission; every field is required and non-blank."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)


class ContactResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    name: str
    email: str
    message: str
    created_at: datetime = Field(alias="createdAt")
