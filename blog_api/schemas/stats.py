from pydantic import BaseModel, ConfigDict, Field

from blog_api.schemas.blog import BlogResponse


class StatsResponse(BaseModel):
    """Summary counts and the most liked post (``null`` when there are no posts)."""

    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(alias="totalUsers")
    total_blogs: int = Field(alias="totalBlogs")
    most_liked: BlogResponse | None = Field(default=None, alias="mostLiked")
