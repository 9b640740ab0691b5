"""Subscriber and contact repositories."""

from blog_api.errors.database import DuplicateEntryError
from blog_api.models.subscriber import ContactDB, SubscriberDB
from blog_api.repositories.base import BaseRepository
from blog_api.schemas.subscriber import ContactCreate, SubscriberCreate
from blog_api.utils.helpers import utcnow

ALREADY_SUBSCRIBED = "Email already subscribed"


class SubscriberRepository(BaseRepository[SubscriberDB, SubscriberCreate]):
    model = SubscriberDB
    not_found_detail = "Subscriber not found"

    async def subscribe(self, subscriber: SubscriberCreate) -> SubscriberDB:
        """
        Add an e-mail to the mailing list.

        Raises:
            DuplicateEntryError: If the e-mail is already subscribed
        """
        if await self._check_exists_by_field("email", subscriber.email):
            raise DuplicateEntryError(ALREADY_SUBSCRIBED)
        db_subscriber = SubscriberDB(email=subscriber.email, created_at=utcnow())
        return await self._add_and_refresh(db_subscriber, duplicate_detail=ALREADY_SUBSCRIBED)


class ContactRepository(BaseRepository[ContactDB, ContactCreate]):
    model = ContactDB
    not_found_detail = "Message not found"

    async def submit(self, contact: ContactCreate) -> ContactDB:
        return await self.create(contact, created_at=utcnow())
