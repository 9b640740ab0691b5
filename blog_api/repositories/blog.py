"""Blog repository: the post entity and every structural mutation on it."""

from collections import defaultdict
from logging import getLogger
from uuid import UUID, uuid4

from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import col

from blog_api.configs import file_logger
from blog_api.errors.auth import NotOwnerError
from blog_api.errors.blog import AlreadyLikedError, ReviewNotFoundError
from blog_api.errors.database import RecordNotFoundError
from blog_api.errors.validation import InvalidIdError, InvalidInputError
from blog_api.models import BlogDB, BlogLikeDB, BlogReviewDB
from blog_api.repositories.base import BaseRepository, parse_id
from blog_api.schemas.blog import BlogCreate, BlogDocument, BlogUpdate
from blog_api.schemas.review import ReviewCreate
from blog_api.utils.helpers import utcnow

logger = file_logger(getLogger(__name__))

BLOG_NOT_FOUND = "Blog not found"


class BlogRepository(BaseRepository[BlogDB, BlogCreate]):
    """
    Repository for blog posts and their embedded engagement data.

    Likes live in ``blog_likes`` (one row per user) and reviews in
    ``blog_reviews`` (ordered by insertion sequence). Every mutation of a
    post and its children is issued inside the caller's transaction.
    """

    model = BlogDB
    not_found_detail = BLOG_NOT_FOUND

    async def create_post(self, blog: BlogCreate, author_uid: str, author_email: str | None) -> BlogDB:
        """
        Store a new post authored by the given identity.

        Args:
            blog: Validated creation payload
            author_uid: Uid of the authenticated caller
            author_email: E-mail of the authenticated caller

        Returns:
            BlogDB: Created post with ``likes == 0``
        """
        return await self.create(
            blog,
            author_uid=author_uid,
            author_email=author_email,
            likes=0,
            created_at=utcnow(),
        )

    async def get(self, raw_id: str) -> BlogDocument:
        """
        Load one post with its likes and reviews.

        Raises:
            RecordNotFoundError: If the id is malformed or no post has it
        """
        try:
            blog_id = parse_id(raw_id)
        except InvalidIdError as e:
            raise RecordNotFoundError(BLOG_NOT_FOUND) from e
        blog = await self.get_or_raise(blog_id)
        return (await self._documents([blog]))[0]

    async def list_all(self) -> list[BlogDocument]:
        statement = select(BlogDB).order_by(BlogDB.created_at, BlogDB.id)
        result = await self.session.execute(statement)
        return await self._documents(list(result.scalars().all()))

    async def list_by_author_email(self, email: str) -> list[BlogDocument]:
        statement = (
            select(BlogDB)
            .where(func.lower(col(BlogDB.author_email)) == email.lower())
            .order_by(BlogDB.created_at, BlogDB.id)
        )
        result = await self.session.execute(statement)
        return await self._documents(list(result.scalars().all()))

    async def most_liked(self) -> BlogDocument | None:
        """Return the post with the most likes; ties go to the earliest created."""
        statement = (
            select(BlogDB)
            .order_by(desc(BlogDB.likes), BlogDB.created_at, BlogDB.id)
            .limit(1)
        )
        result = await self.session.execute(statement)
        blog = result.scalar_one_or_none()
        if blog is None:
            return None
        return (await self._documents([blog]))[0]

    async def update_owned(
        self,
        raw_id: str,
        changes: BlogUpdate,
        caller_email: str | None,
    ) -> BlogDocument:
        """
        Merge caller-editable fields into a post the caller authored.

        Raises:
            InvalidIdError: If the id is malformed
            RecordNotFoundError: If the post does not exist
            NotOwnerError: If the caller is not the author
            InvalidInputError: If no editable field was supplied
        """
        blog = await self.get_or_raise(parse_id(raw_id))
        self._check_owner(blog, caller_email)
        return await self._apply_changes(blog, changes)

    async def update_unowned(self, raw_id: str, changes: BlogUpdate) -> BlogDocument:
        """Administrative merge without the ownership check."""
        blog = await self.get_or_raise(parse_id(raw_id))
        return await self._apply_changes(blog, changes)

    async def delete_owned(self, raw_id: str, caller_email: str | None) -> None:
        """
        Delete a post the caller authored, with its likes and reviews.

        Raises:
            InvalidIdError: If the id is malformed
            RecordNotFoundError: If the post does not exist
            NotOwnerError: If the caller is not the author
        """
        blog = await self.get_or_raise(parse_id(raw_id))
        self._check_owner(blog, caller_email)

        await self.session.execute(delete(BlogLikeDB).where(col(BlogLikeDB.blog_id) == blog.id))
        await self.session.execute(
            delete(BlogReviewDB).where(col(BlogReviewDB.blog_id) == blog.id),
        )
        await self.session.delete(blog)
        await self.session.flush()
        logger.info(f"Blog {blog.id} deleted")

    async def like(self, raw_id: str, user_id: str) -> int:
        """
        Record a like from ``user_id`` and return the new like count.

        The membership row and the counter increment are written in the
        same transaction; the composite primary key on ``blog_likes``
        rejects a concurrent duplicate.

        Raises:
            InvalidIdError: If the id is malformed
            RecordNotFoundError: If the post does not exist
            AlreadyLikedError: If the user already liked the post
        """
        blog_id = parse_id(raw_id)
        blog = await self.get_or_raise(blog_id)

        liked = await self.session.execute(
            select(1)
            .where(col(BlogLikeDB.blog_id) == blog_id, col(BlogLikeDB.user_id) == user_id)
            .limit(1),
        )
        if liked.scalar_one_or_none() is not None:
            raise AlreadyLikedError()

        try:
            self.session.add(BlogLikeDB(blog_id=blog_id, user_id=user_id, created_at=utcnow()))
            await self.session.flush()
            await self.session.execute(
                update(BlogDB)
                .where(col(BlogDB.id) == blog_id)
                .values(likes=col(BlogDB.likes) + 1),
            )
        except IntegrityError as e:
            await self.session.rollback()
            # The post may have been deleted since the existence check
            if not await self._exists(blog_id):
                raise RecordNotFoundError(BLOG_NOT_FOUND) from e
            raise AlreadyLikedError() from e

        await self.session.refresh(blog)
        return blog.likes

    async def _exists(self, blog_id: UUID) -> bool:
        result = await self.session.execute(
            select(1).where(col(BlogDB.id) == blog_id).limit(1),
        )
        return result.scalar_one_or_none() is not None

    async def add_review(self, raw_id: str, review: ReviewCreate) -> list[BlogReviewDB]:
        """
        Append a review to the end of a post's review list.

        Returns:
            list[BlogReviewDB]: The post's reviews after the append

        Raises:
            InvalidIdError: If the id is malformed
            RecordNotFoundError: If the post does not exist
            DuplicateEntryError: If the post already has a review with that id
        """
        blog_id = parse_id(raw_id)
        await self.get_or_raise(blog_id)

        review_id = review.review_id or uuid4().hex
        row = BlogReviewDB(
            review_id=review_id,
            blog_id=blog_id,
            user_id=review.user_id,
            user_name=review.user_name,
            user_image=review.user_image,
            comment=review.comment,
            rating=review.rating,
            date=review.date or utcnow(),
        )
        await self._add_and_refresh(
            row,
            duplicate_detail=f"Review {review_id} already exists on this blog",
        )
        return await self.reviews_for(blog_id)

    async def remove_review(self, raw_id: str, review_id: str) -> list[BlogReviewDB]:
        """
        Remove exactly one review, keeping the order of the rest.

        Raises:
            InvalidIdError: If the id is malformed
            RecordNotFoundError: If the post does not exist
            ReviewNotFoundError: If the post has no review with that id
        """
        blog_id = parse_id(raw_id)
        await self.get_or_raise(blog_id)

        result = await self.session.execute(
            delete(BlogReviewDB).where(
                col(BlogReviewDB.blog_id) == blog_id,
                col(BlogReviewDB.review_id) == review_id,
            ),
        )
        if result.rowcount == 0:
            raise ReviewNotFoundError()
        return await self.reviews_for(blog_id)

    async def reviews_for(self, blog_id: UUID) -> list[BlogReviewDB]:
        result = await self.session.execute(
            select(BlogReviewDB)
            .where(col(BlogReviewDB.blog_id) == blog_id)
            .order_by(BlogReviewDB.seq),
        )
        return list(result.scalars().all())

    @staticmethod
    def _check_owner(blog: BlogDB, caller_email: str | None) -> None:
        if not caller_email or (blog.author_email or "").lower() != caller_email.lower():
            raise NotOwnerError()

    async def _apply_changes(self, blog: BlogDB, changes: BlogUpdate) -> BlogDocument:
        data = changes.changes()
        if not data:
            raise InvalidInputError("No updatable fields supplied")

        for key, value in data.items():
            setattr(blog, key, value)
        blog.updated_at = utcnow()

        blog = await self._add_and_refresh(blog)
        return (await self._documents([blog]))[0]

    async def _documents(self, blogs: list[BlogDB]) -> list[BlogDocument]:
        """Attach likes and ordered reviews to posts with one query per child table."""
        if not blogs:
            return []

        ids = [blog.id for blog in blogs]

        liked_users: dict[UUID, list[str]] = defaultdict(list)
        likes = await self.session.execute(
            select(BlogLikeDB.blog_id, BlogLikeDB.user_id)
            .where(col(BlogLikeDB.blog_id).in_(ids))
            .order_by(BlogLikeDB.created_at),
        )
        for blog_id, user_id in likes.all():
            liked_users[blog_id].append(user_id)

        reviews: dict[UUID, list[BlogReviewDB]] = defaultdict(list)
        rows = await self.session.execute(
            select(BlogReviewDB)
            .where(col(BlogReviewDB.blog_id).in_(ids))
            .order_by(BlogReviewDB.seq),
        )
        for review in rows.scalars().all():
            reviews[review.blog_id].append(review)

        return [
            BlogDocument(blog=blog, liked_users=liked_users[blog.id], reviews=reviews[blog.id])
            for blog in blogs
        ]
