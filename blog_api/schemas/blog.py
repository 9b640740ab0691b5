"""
Blog schemas for the blog backend.

Request bodies name only the caller-editable fields; anything else in
the payload (``author``, ``likes``, ``likedUsers``, ``reviews``,
``createdAt``) is dropped at the boundary.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from blog_api.configs.settings import MAX_CATEGORY_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH
from blog_api.models import BlogDB, BlogReviewDB
from blog_api.schemas.review import ReviewResponse

UPDATABLE_FIELDS = frozenset({"title", "content", "category", "image"})


class BlogCreate(BaseModel):
    """Blog creation model (request body)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["Ten Days in Kyoto"],
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Blog content",
        examples=["Kyoto rewards slow travellers..."],
    )
    category: str | None = Field(default=None, max_length=MAX_CATEGORY_LENGTH)
    image: str | None = Field(default=None, max_length=MAX_URL_LENGTH)


class BlogUpdate(BaseModel):
    """Shallow merge of caller-editable fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, max_length=MAX_CATEGORY_LENGTH)
    image: str | None = Field(default=None, max_length=MAX_URL_LENGTH)

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller actually supplied."""
        data = self.model_dump(exclude_unset=True)
        # title/content are NOT NULL
        return {
            k: v
            for k, v in data.items()
            if k in UPDATABLE_FIELDS and not (v is None and k in ("title", "content"))
        }


@dataclass(frozen=True)
class BlogDocument:
    """A post with its owned engagement data, as loaded by the repository."""

    blog: BlogDB
    liked_users: list[str]
    reviews: list[BlogReviewDB]


class AuthorResponse(BaseModel):
    uid: str
    email: str | None = None


class BlogResponse(BaseModel):
    """Blog post with embedded engagement data."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    category: str | None = None
    image: str | None = None
    author: AuthorResponse
    likes: int
    liked_users: list[str] = Field(alias="likedUsers")
    reviews: list[ReviewResponse]
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class BlogCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Blog added"
    blog_id: str = Field(alias="blogId")


class BlogDetailResponse(BaseModel):
    success: bool = True
    blog: BlogResponse


class LikeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1, max_length=128)


class LikeResponse(BaseModel):
    likes: int
    message: str = "Like added"


def blog_to_response(document: BlogDocument) -> BlogResponse:
    """
    Convert a loaded ``BlogDocument`` to ``BlogResponse``.

    Parameters
    ----------
    document : BlogDocument
        Post row plus its likes and ordered reviews.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    blog = document.blog
    return BlogResponse(
        id=str(blog.id),
        title=blog.title,
        content=blog.content,
        category=blog.category,
        image=blog.image,
        author=AuthorResponse(uid=blog.author_uid, email=blog.author_email),
        likes=blog.likes,
        liked_users=document.liked_users,
        reviews=[ReviewResponse.model_validate(r, from_attributes=True) for r in document.reviews],
        created_at=blog.created_at,
        updated_at=blog.updated_at,
    )
