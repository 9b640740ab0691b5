"""Review schemas for request validation and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog_api.configs.settings import MAX_COMMENT_LENGTH, MAX_NAME_LENGTH, MAX_URL_LENGTH


class ReviewCreate(BaseModel):
    """
    Review payload appended to a post.

    Every field is optional; a missing ``reviewId`` is assigned by the
    repository.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    review_id: str | None = Field(
        default=None,
        alias="reviewId",
        min_length=1,
        max_length=64,
        description="Caller-supplied review id (generated when omitted)",
    )
    user_id: str | None = Field(default=None, alias="userId", max_length=128)
    user_name: str | None = Field(
        default=None,
        alias="userName",
        max_length=MAX_NAME_LENGTH,
        examples=["Bob"],
    )
    user_image: str | None = Field(default=None, alias="userImage", max_length=MAX_URL_LENGTH)
    comment: str | None = Field(
        default=None,
        max_length=MAX_COMMENT_LENGTH,
        examples=["nice"],
    )
    rating: int | None = Field(default=None, ge=0, le=5)
    date: datetime | None = None


class ReviewResponse(BaseModel):
    """A review as stored on its post."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    review_id: str = Field(alias="reviewId")
    user_id: str | None = Field(default=None, alias="userId")
    user_name: str | None = Field(default=None, alias="userName")
    user_image: str | None = Field(default=None, alias="userImage")
    comment: str | None = None
    rating: int | None = None
    date: datetime | None = None


class ReviewMutationResponse(BaseModel):
    """Acknowledgement for review add/remove with the resulting review list."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    reviews: list[ReviewResponse]


class ReviewFeedItem(BaseModel):
    """Review flattened across posts, enriched with its parent post."""

    model_config = ConfigDict(populate_by_name=True)

    review_id: str = Field(alias="reviewId")
    user_name: str = Field(alias="userName")
    user_image: str = Field(alias="userImage")
    comment: str
    rating: int
    date: datetime
    blog_id: str = Field(alias="blogId")
    blog_title: str = Field(alias="blogTitle")
