"""User schemas for request validation and responses."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator

from blog_api.configs.settings import MAX_NAME_LENGTH, MAX_URL_LENGTH
from blog_api.models.user import Role


class UserCreate(BaseModel):
    """Profile sent by the front end after sign-in."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    uid: str | None = Field(default=None, max_length=128)
    display_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("displayName", "name", "display_name"),
        max_length=MAX_NAME_LENGTH,
    )
    email: EmailStr
    photo_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("photoURL", "photo_url"),
        max_length=MAX_URL_LENGTH,
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """E-mails are stored lowercased."""
        return v.lower()


class UserUpdate(BaseModel):
    """Self-service profile changes; ``role`` and ``email`` are not editable here."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    display_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("displayName", "name", "display_name"),
        min_length=1,
        max_length=MAX_NAME_LENGTH,
    )
    photo_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("photoURL", "photo_url"),
        max_length=MAX_URL_LENGTH,
    )


class RoleUpdate(BaseModel):
    role: Role


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    uid: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    email: str
    photo_url: str | None = Field(default=None, alias="photoURL")
    role: str
    created_at: datetime = Field(alias="createdAt")
    last_log_in: datetime | None = Field(default=None, alias="lastLogIn")
    last_updated: datetime | None = Field(default=None, alias="lastUpdated")


class RoleResponse(BaseModel):
    role: Role


class UserListResponse(BaseModel):
    success: bool = True
    data: list[UserResponse]


class UserMutationResponse(BaseModel):
    success: bool = True
    message: str
    user: UserResponse
