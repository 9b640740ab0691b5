"""Engagement Aggregator: read-only views derived from posts."""

from blog_api.configs import settings
from blog_api.repositories.blog import BlogRepository
from blog_api.repositories.user import UserRepository
from blog_api.schemas.blog import blog_to_response
from blog_api.schemas.review import ReviewFeedItem
from blog_api.schemas.stats import StatsResponse
from blog_api.utils.helpers import utcnow

GUEST_NAME = "Guest"


class EngagementService:
    def __init__(
        self,
        blogs: BlogRepository,
        users: UserRepository,
        default_avatar_url: str = settings.DEFAULT_AVATAR_URL,
    ) -> None:
        self.blogs = blogs
        self.users = users
        self.default_avatar_url = default_avatar_url

    async def all_reviews(self) -> list[ReviewFeedItem]:
        """
        Flatten every post's reviews into one list.

        Posts are walked in creation order and reviews in insertion order.
        Missing optional fields fall back to ``Guest``, the default avatar,
        an empty comment, rating ``0`` and the current time.
        """
        now = utcnow()
        return [
            ReviewFeedItem(
                review_id=review.review_id,
                user_name=review.user_name or GUEST_NAME,
                user_image=review.user_image or self.default_avatar_url,
                comment=review.comment or "",
                rating=review.rating or 0,
                date=review.date or now,
                blog_id=str(document.blog.id),
                blog_title=document.blog.title,
            )
            for document in await self.blogs.list_all()
            for review in document.reviews
        ]

    async def stats(self) -> StatsResponse:
        most_liked = await self.blogs.most_liked()
        return StatsResponse(
            total_users=await self.users.count(),
            total_blogs=await self.blogs.count(),
            most_liked=blog_to_response(most_liked) if most_liked else None,
        )
