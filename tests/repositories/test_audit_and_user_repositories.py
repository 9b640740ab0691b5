# tests/repositories/test_audit_and_user_repositories.py
"""Tests for the activity, user, subscriber and contact repositories."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.errors import DuplicateEntryError, RecordNotFoundError
from blog_api.models import ActivityType, Role
from blog_api.repositories import (
    ActivityRepository,
    ContactRepository,
    SubscriberRepository,
    UserRepository,
)
from blog_api.schemas import ContactCreate, SubscriberCreate, UserCreate, UserUpdate


class TestActivityRepository:
    """Tests for the append-only audit log."""

    @pytest.mark.asyncio
    async def test_append_defaults_missing_identity(self, session: AsyncSession) -> None:
        """Missing uid and email are stored as guest and unknown."""
        repo = ActivityRepository(session)

        entry = await repo.append(None, None, ActivityType.CREATE, "created")

        assert entry.user_uid == "guest"
        assert entry.user_email == "unknown"
        assert entry.type == "CREATE"
        assert entry.blog_id is None

    @pytest.mark.asyncio
    async def test_list_for_identity_newest_first(self, session: AsyncSession) -> None:
        repo = ActivityRepository(session)
        blog_id = uuid4()
        await repo.append("u1", "e1@example.com", ActivityType.CREATE, "first", blog_id)
        await repo.append("u2", "e2@example.com", ActivityType.CREATE, "other")
        await repo.append("u1", "e1@example.com", ActivityType.CREATE, "second")

        entries = await repo.list_for_identity("u1")

        assert [e.message for e in entries] == ["second", "first"]
        assert entries[1].blog_id == blog_id

    @pytest.mark.asyncio
    async def test_list_for_unknown_identity_is_empty(self, session: AsyncSession) -> None:
        assert await ActivityRepository(session).list_for_identity("nobody") == []


class TestUserRepository:
    """Tests for register-or-touch and profile changes."""

    @pytest.mark.asyncio
    async def test_register_creates_with_defaults(self, session: AsyncSession) -> None:
        repo = UserRepository(session)

        user, created = await repo.register(
            UserCreate.model_validate({"email": "new@example.com", "displayName": "New"}),
        )

        assert created is True
        assert user.role == Role.USER
        assert user.display_name == "New"
        assert user.photo_url
        assert user.last_log_in is not None

    @pytest.mark.asyncio
    async def test_register_existing_email_touches_login(self, session: AsyncSession) -> None:
        """A second registration refreshes the login time instead of duplicating."""
        repo = UserRepository(session)
        first, _ = await repo.register(UserCreate(email="dup@example.com"))
        first_login = first.last_log_in

        again, created = await repo.register(UserCreate(email="dup@example.com", uid="uid-1"))

        assert created is False
        assert again.id == first.id
        assert again.uid == "uid-1"
        assert again.last_log_in is not None
        assert first_login is not None
        assert again.last_log_in >= first_login
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_update_profile_stamps_last_updated(self, session: AsyncSession) -> None:
        repo = UserRepository(session)
        user, _ = await repo.register(UserCreate(email="p@example.com"))

        updated = await repo.update_profile(
            user.id,
            UserUpdate.model_validate({"displayName": "Renamed", "role": "admin"}),
        )

        assert updated.display_name == "Renamed"
        assert updated.role == Role.USER
        assert updated.last_updated is not None

    @pytest.mark.asyncio
    async def test_set_role(self, session: AsyncSession) -> None:
        repo = UserRepository(session)
        user, _ = await repo.register(UserCreate(email="r@example.com"))

        updated = await repo.set_role(user.id, Role.ADMIN)

        assert updated.role == "admin"

    @pytest.mark.asyncio
    async def test_set_role_missing_user(self, session: AsyncSession) -> None:
        with pytest.raises(RecordNotFoundError):
            await UserRepository(session).set_role(uuid4(), Role.ADMIN)


class TestSubscriberAndContactRepositories:
    """Tests for the mailing list and contact inbox."""

    @pytest.mark.asyncio
    async def test_duplicate_subscription_rejected(self, session: AsyncSession) -> None:
        repo = SubscriberRepository(session)
        await repo.subscribe(SubscriberCreate(email="s@example.com"))

        with pytest.raises(DuplicateEntryError) as exc_info:
            await repo.subscribe(SubscriberCreate(email="s@example.com"))

        assert exc_info.value.status_code == 409
        assert exc_info.value.detail == "Email already subscribed"

    @pytest.mark.asyncio
    async def test_contact_submit_and_delete(self, session: AsyncSession) -> None:
        repo = ContactRepository(session)
        contact = await repo.submit(
            ContactCreate(name="Ann", email="ann@example.com", message="Hello"),
        )

        assert [c.id for c in await repo.get_all()] == [contact.id]
        assert await repo.delete(contact.id) is True
        assert await repo.delete(contact.id) is False
