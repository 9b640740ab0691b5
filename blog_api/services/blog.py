"""Blog creation with its audit trail."""

from logging import getLogger

from blog_api.auth.identity import Identity
from blog_api.configs import file_logger
from blog_api.models import ActivityType, BlogDB
from blog_api.repositories.activity import ActivityRepository
from blog_api.repositories.blog import BlogRepository
from blog_api.schemas.blog import BlogCreate

logger = file_logger(getLogger(__name__))


def creation_message(email: str | None, title: str) -> str:
    return f'{email or "Someone"} created a new blog "{title}"'


class BlogService:
    """
    Write paths that span the Blog Repository and the Audit Log.

    Both repositories must share one session so the post and its audit
    entry commit or roll back together.
    """

    def __init__(self, blogs: BlogRepository, activities: ActivityRepository) -> None:
        self.blogs = blogs
        self.activities = activities

    async def create(self, data: BlogCreate, identity: Identity) -> BlogDB:
        """
        Create a post authored by ``identity`` and append a CREATE entry.

        Args:
            data: Validated creation payload (author fields already dropped)
            identity: Authenticated caller

        Returns:
            BlogDB: The new post
        """
        author = identity.snapshot
        blog = await self.blogs.create_post(data, author_uid=author.uid, author_email=author.email)
        await self.activities.append(
            uid=author.uid,
            email=author.email,
            activity_type=ActivityType.CREATE,
            message=creation_message(author.email, blog.title),
            blog_id=blog.id,
        )
        logger.info(f"Blog {blog.id} created by {author.uid}")
        return blog
