# tests/routes/test_review_routes.py
"""Tests for blog_api/routes/review.py."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from helpers import AUTHOR_TOKEN, bearer


@pytest.fixture
async def blog_id(client: AsyncClient) -> str:
    response = await client.post(
        "/blogs",
        json={"title": "Kyoto", "content": "C"},
        headers=bearer(AUTHOR_TOKEN),
    )
    return response.json()["blogId"]


class TestAddReview:
    """Tests for POST /blogs/{id}/reviews."""

    @pytest.mark.asyncio
    async def test_add_review(self, client: AsyncClient, blog_id: str) -> None:
        response = await client.post(
            f"/blogs/{blog_id}/reviews",
            json={"reviewId": "r1", "userName": "Bob", "comment": "nice", "rating": 5},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Review added successfully"
        [review] = data["reviews"]
        assert review["reviewId"] == "r1"
        assert review["userName"] == "Bob"
        assert review["rating"] == 5
        assert review["date"]

    @pytest.mark.asyncio
    async def test_generated_review_id(self, client: AsyncClient, blog_id: str) -> None:
        response = await client.post(f"/blogs/{blog_id}/reviews", json={"comment": "hi"})

        assert response.json()["reviews"][0]["reviewId"]

    @pytest.mark.asyncio
    async def test_reviews_keep_insertion_order(self, client: AsyncClient, blog_id: str) -> None:
        for review_id in ("r1", "r2", "r3"):
            response = await client.post(
                f"/blogs/{blog_id}/reviews",
                json={"reviewId": review_id},
            )

        assert [r["reviewId"] for r in response.json()["reviews"]] == ["r1", "r2", "r3"]

    @pytest.mark.asyncio
    async def test_duplicate_review_id(self, client: AsyncClient, blog_id: str) -> None:
        await client.post(f"/blogs/{blog_id}/reviews", json={"reviewId": "r1"})

        response = await client.post(f"/blogs/{blog_id}/reviews", json={"reviewId": "r1"})

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_rating_out_of_range(self, client: AsyncClient, blog_id: str) -> None:
        response = await client.post(f"/blogs/{blog_id}/reviews", json={"rating": 9})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_missing_blog(self, client: AsyncClient) -> None:
        response = await client.post(f"/blogs/{uuid4()}/reviews", json={"comment": "x"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Blog not found"

    @pytest.mark.asyncio
    async def test_malformed_blog_id(self, client: AsyncClient) -> None:
        response = await client.post("/blogs/nope/reviews", json={"comment": "x"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid blog ID"


class TestRemoveReview:
    """Tests for DELETE /blogs/{id}/reviews/{reviewId}."""

    @pytest.mark.asyncio
    async def test_remove_middle_review(self, client: AsyncClient, blog_id: str) -> None:
        for review_id in ("r1", "r2", "r3"):
            await client.post(f"/blogs/{blog_id}/reviews", json={"reviewId": review_id})

        response = await client.delete(f"/blogs/{blog_id}/reviews/r2")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Review deleted successfully"
        assert [r["reviewId"] for r in data["reviews"]] == ["r1", "r3"]

    @pytest.mark.asyncio
    async def test_unknown_review(self, client: AsyncClient, blog_id: str) -> None:
        response = await client.delete(f"/blogs/{blog_id}/reviews/missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Review not found"

    @pytest.mark.asyncio
    async def test_unknown_blog(self, client: AsyncClient) -> None:
        response = await client.delete(f"/blogs/{uuid4()}/reviews/r1")

        assert response.status_code == 404
        assert response.json()["detail"] == "Blog not found"


class TestReviewFeed:
    """Tests for GET /reviews."""

    @pytest.mark.asyncio
    async def test_empty_feed(self, client: AsyncClient) -> None:
        response = await client.get("/reviews")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_defaults_and_parent_blog(self, client: AsyncClient, blog_id: str) -> None:
        await client.post(f"/blogs/{blog_id}/reviews", json={"reviewId": "r1"})

        [item] = (await client.get("/reviews")).json()

        assert item["reviewId"] == "r1"
        assert item["userName"] == "Guest"
        assert item["userImage"].startswith("http")
        assert item["comment"] == ""
        assert item["rating"] == 0
        assert item["blogId"] == blog_id
        assert item["blogTitle"] == "Kyoto"

    @pytest.mark.asyncio
    async def test_feed_follows_blog_order(self, client: AsyncClient, blog_id: str) -> None:
        second = await client.post(
            "/blogs",
            json={"title": "Osaka", "content": "C"},
            headers=bearer(AUTHOR_TOKEN),
        )
        await client.post(f"/blogs/{second.json()['blogId']}/reviews", json={"reviewId": "c"})
        await client.post(f"/blogs/{blog_id}/reviews", json={"reviewId": "a"})
        await client.post(f"/blogs/{blog_id}/reviews", json={"reviewId": "b"})

        feed = (await client.get("/reviews")).json()

        assert [item["reviewId"] for item in feed] == ["a", "b", "c"]
