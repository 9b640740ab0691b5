# tests/routes/test_activity_health_routes.py
"""Tests for the activity, stats, health and root endpoints."""

import pytest
from httpx import AsyncClient

from blog_api.models import UserDB
from helpers import AUTHOR_TOKEN, NO_EMAIL_TOKEN, OTHER_TOKEN, bearer


async def create_blog(client: AsyncClient, token: str, title: str) -> str:
    response = await client.post(
        "/blogs",
        json={"title": title, "content": "C"},
        headers=bearer(token),
    )
    return response.json()["blogId"]


class TestActivities:
    """Tests for GET /activities."""

    @pytest.mark.asyncio
    async def test_scoped_to_caller_newest_first(self, client: AsyncClient) -> None:
        first = await create_blog(client, AUTHOR_TOKEN, "One")
        await create_blog(client, OTHER_TOKEN, "Theirs")
        second = await create_blog(client, AUTHOR_TOKEN, "Two")

        response = await client.get("/activities", headers=bearer(AUTHOR_TOKEN))

        assert response.status_code == 200
        activities = response.json()
        assert [a["blogId"] for a in activities] == [second, first]
        assert all(a["user"]["uid"] == "u1" for a in activities)

    @pytest.mark.asyncio
    async def test_entries_survive_blog_deletion(self, client: AsyncClient) -> None:
        blog_id = await create_blog(client, AUTHOR_TOKEN, "Gone")
        await client.delete(f"/blogs/{blog_id}", headers=bearer(AUTHOR_TOKEN))

        [activity] = (await client.get("/activities", headers=bearer(AUTHOR_TOKEN))).json()

        assert activity["blogId"] == blog_id

    @pytest.mark.asyncio
    async def test_caller_without_email(self, client: AsyncClient) -> None:
        await create_blog(client, NO_EMAIL_TOKEN, "Anon")

        [activity] = (await client.get("/activities", headers=bearer(NO_EMAIL_TOKEN))).json()

        assert activity["user"] == {"uid": "u3", "email": "unknown"}
        assert activity["message"] == 'Someone created a new blog "Anon"'

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.get("/activities")

        assert response.status_code == 401


class TestStats:
    """Tests for GET /stats."""

    @pytest.mark.asyncio
    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/stats", headers=bearer(AUTHOR_TOKEN))

        assert response.status_code == 200
        assert response.json() == {"totalUsers": 0, "totalBlogs": 0, "mostLiked": None}

    @pytest.mark.asyncio
    async def test_counts_and_most_liked(self, client: AsyncClient, regular_user: UserDB) -> None:
        await create_blog(client, AUTHOR_TOKEN, "Quiet")
        popular = await create_blog(client, AUTHOR_TOKEN, "Popular")
        await client.post(f"/blogs/{popular}/like", json={"userId": "x"})

        data = (await client.get("/stats", headers=bearer(AUTHOR_TOKEN))).json()

        assert data["totalUsers"] == 1
        assert data["totalBlogs"] == 2
        assert data["mostLiked"]["id"] == popular
        assert data["mostLiked"]["likes"] == 1


class TestHealthAndRoot:
    """Tests for GET / and GET /health."""

    @pytest.mark.asyncio
    async def test_root(self, client: AsyncClient) -> None:
        response = await client.get("/")

        assert response.status_code == 200
        assert "running" in response.text

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"] == "ok"
        assert data["version"]


class TestRequestContext:
    """Tests for request correlation and security headers."""

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert len(response.headers["X-Request-ID"]) == 32

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_invalid_request_id_replaced(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "bad id;drop"})

        assert response.headers["X-Request-ID"] != "bad id;drop"

    @pytest.mark.asyncio
    async def test_security_headers(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in response.headers
