"""User repository for database operations."""

from uuid import UUID

from blog_api.configs import settings
from blog_api.models.user import Role, UserDB
from blog_api.repositories.base import BaseRepository
from blog_api.schemas.user import UserCreate, UserUpdate
from blog_api.utils.helpers import utcnow


class UserRepository(BaseRepository[UserDB, UserCreate]):
    """
    Repository for User database operations.

    Users are keyed by e-mail; ``register`` never creates a second record
    for an address that already exists.
    """

    model = UserDB
    not_found_detail = "User not found"

    async def get_by_email(self, email: str) -> UserDB | None:
        return await self.get_by_field("email", email.lower())

    async def register(self, user: UserCreate) -> tuple[UserDB, bool]:
        """
        Create a user, or refresh ``last_log_in`` for an existing e-mail.

        Args:
            user: Profile from the front end

        Returns:
            tuple[UserDB, bool]: The user and whether it was created
        """
        now = utcnow()
        existing = await self.get_by_email(user.email)
        if existing:
            existing.last_log_in = now
            if user.uid and not existing.uid:
                existing.uid = user.uid
            return await self._add_and_refresh(existing), False

        db_user = UserDB(
            uid=user.uid,
            display_name=user.display_name,
            email=user.email,
            photo_url=user.photo_url or settings.DEFAULT_AVATAR_URL,
            role=Role.USER.value,
            created_at=now,
            last_log_in=now,
        )
        created = await self._add_and_refresh(
            db_user,
            duplicate_detail=f"Email '{user.email}' already exists",
        )
        return created, True

    async def update_profile(self, user_id: UUID, changes: UserUpdate) -> UserDB:
        """
        Apply profile changes and stamp ``last_updated``.

        Raises:
            RecordNotFoundError: If the user does not exist
        """
        db_user = await self.get_or_raise(user_id)

        for key, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(db_user, key, value)
        db_user.last_updated = utcnow()

        return await self._add_and_refresh(db_user)

    async def set_role(self, user_id: UUID, role: Role) -> UserDB:
        db_user = await self.get_or_raise(user_id)
        db_user.role = role.value
        db_user.last_updated = utcnow()
        return await self._add_and_refresh(db_user)
