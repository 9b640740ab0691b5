# tests/routes/test_subscriber_contact_routes.py
"""Tests for blog_api/routes/subscriber.py and blog_api/routes/contact.py."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from blog_api.models import UserDB
from helpers import ADMIN_TOKEN, AUTHOR_TOKEN, bearer


class TestSubscribers:
    """Tests for the /subscribers endpoints."""

    @pytest.mark.asyncio
    async def test_subscribe(self, client: AsyncClient) -> None:
        response = await client.post("/subscribers", json={"email": "reader@example.com"})

        assert response.status_code == 201
        assert response.json() == {"success": True, "message": "Subscribed successfully"}

    @pytest.mark.asyncio
    async def test_duplicate_subscription(self, client: AsyncClient) -> None:
        await client.post("/subscribers", json={"email": "reader@example.com"})

        response = await client.post("/subscribers", json={"email": "reader@example.com"})

        assert response.status_code == 409
        assert response.json()["detail"] == "Email already subscribed"

    @pytest.mark.asyncio
    async def test_duplicate_ignores_case(self, client: AsyncClient) -> None:
        await client.post("/subscribers", json={"email": "reader@example.com"})

        response = await client.post("/subscribers", json={"email": "Reader@Example.com"})

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_invalid_email(self, client: AsyncClient) -> None:
        response = await client.post("/subscribers", json={"email": "nope"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_non_admin_list_forbidden(self, client: AsyncClient) -> None:
        """Callers without a stored admin record are treated as plain users."""
        response = await client.get("/subscribers", headers=bearer(AUTHOR_TOKEN))

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied: Admins only"

    @pytest.mark.asyncio
    async def test_admin_lists(self, client: AsyncClient, admin_user: UserDB) -> None:
        await client.post("/subscribers", json={"email": "reader@example.com"})

        response = await client.get("/subscribers", headers=bearer(ADMIN_TOKEN))

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [s["email"] for s in data["subscribers"]] == ["reader@example.com"]

    @pytest.mark.asyncio
    async def test_admin_deletes(self, client: AsyncClient, admin_user: UserDB) -> None:
        await client.post("/subscribers", json={"email": "reader@example.com"})
        listing = await client.get("/subscribers", headers=bearer(ADMIN_TOKEN))
        subscriber_id = listing.json()["subscribers"][0]["id"]

        response = await client.delete(
            f"/subscribers/{subscriber_id}",
            headers=bearer(ADMIN_TOKEN),
        )
        missing = await client.delete(f"/subscribers/{subscriber_id}", headers=bearer(ADMIN_TOKEN))

        assert response.status_code == 200
        assert response.json()["message"] == "Subscriber deleted"
        assert missing.status_code == 404
        assert missing.json()["detail"] == "Subscriber not found"


class TestContacts:
    """Tests for the /contacts endpoints."""

    @pytest.mark.asyncio
    async def test_submit(self, client: AsyncClient) -> None:
        response = await client.post(
            "/contacts",
            json={"name": "Ann", "email": "ann@example.com", "message": "Hello"},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Message received!"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "ann@example.com", "message": "Hello"},
            {"name": "Ann", "message": "Hello"},
            {"name": "Ann", "email": "ann@example.com", "message": ""},
        ],
    )
    async def test_missing_fields(self, client: AsyncClient, payload: dict[str, str]) -> None:
        response = await client.post("/contacts", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Validation failed"

    @pytest.mark.asyncio
    async def test_admin_inbox(self, client: AsyncClient, admin_user: UserDB) -> None:
        await client.post(
            "/contacts",
            json={"name": "Ann", "email": "ann@example.com", "message": "Hello"},
        )

        listing = await client.get("/contacts", headers=bearer(ADMIN_TOKEN))
        [contact] = listing.json()
        deleted = await client.delete(f"/contacts/{contact['id']}", headers=bearer(ADMIN_TOKEN))

        assert listing.status_code == 200
        assert contact["name"] == "Ann"
        assert contact["createdAt"]
        assert deleted.json() == {"message": "Message deleted successfully!"}
        assert (await client.get("/contacts", headers=bearer(ADMIN_TOKEN))).json() == []

    @pytest.mark.asyncio
    async def test_delete_missing(self, client: AsyncClient, admin_user: UserDB) -> None:
        response = await client.delete(f"/contacts/{uuid4()}", headers=bearer(ADMIN_TOKEN))

        assert response.status_code == 404
        assert response.json()["detail"] == "Message not found"

    @pytest.mark.asyncio
    async def test_inbox_non_admin(self, client: AsyncClient) -> None:
        response = await client.get("/contacts", headers=bearer(AUTHOR_TOKEN))

        assert response.status_code == 403
