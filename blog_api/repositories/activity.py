"""Audit log repository (append-only)."""

from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import desc, select
from sqlmodel import col

from blog_api.models.activity import GUEST_UID, UNKNOWN_EMAIL, ActivityDB, ActivityType
from blog_api.repositories.base import BaseRepository
from blog_api.utils.helpers import utcnow


class ActivityRepository(BaseRepository[ActivityDB, BaseModel]):
    """
    Repository for audit entries.

    Entries are only appended and read back per identity; there is no
    update or delete.
    """

    model = ActivityDB
    id_field = "seq"
    order_field = "timestamp"

    async def append(
        self,
        uid: str | None,
        email: str | None,
        activity_type: ActivityType,
        message: str,
        blog_id: UUID | None = None,
    ) -> ActivityDB:
        """
        Append an audit entry with a snapshot of the acting identity.

        Args:
            uid: Actor uid (``"guest"`` when missing)
            email: Actor e-mail (``"unknown"`` when missing)
            activity_type: Kind of event
            message: Human-readable description
            blog_id: Post the event refers to, if any

        Returns:
            ActivityDB: Stored entry
        """
        activity = ActivityDB(
            user_uid=uid or GUEST_UID,
            user_email=email or UNKNOWN_EMAIL,
            type=activity_type.value,
            message=message,
            blog_id=blog_id,
            timestamp=utcnow(),
        )
        return await self._add_and_refresh(activity)

    async def list_for_identity(self, uid: str) -> list[ActivityDB]:
        """Entries recorded for ``uid``, newest first."""
        statement = (
            select(ActivityDB)
            .where(col(ActivityDB.user_uid) == uid)
            .order_by(desc(ActivityDB.timestamp), desc(ActivityDB.seq))
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
