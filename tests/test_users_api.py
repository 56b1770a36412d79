"""
Tests for the /api/v1/users endpoints and the response envelope.
"""

import pytest
import pytest_asyncio

from reddit.domain.post import Post
from reddit.domain.user import User


@pytest_asyncio.fixture
async def users(db_session):
    db_session.add_all(
        [User(name=f"user{i}", email=f"user{i}@example.com") for i in range(1, 4)]
    )
    await db_session.flush()
    db_session.add_all([Post(title="only post", author_id=1)])
    await db_session.flush()


@pytest.mark.asyncio
class TestListUsers:
    """Test GET /api/v1/users."""

    async def test_envelope_uses_camel_case(self, client, users):
        response = await client.get("/api/v1/users", params={"pageNumber": 1, "pageSize": 2})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {
            "items",
            "pageNumber",
            "pageSize",
            "totalCount",
            "hasNextPage",
            "hasPreviousPage",
        }
        assert body["pageNumber"] == 1
        assert body["pageSize"] == 2
        assert body["totalCount"] == 3
        assert body["hasNextPage"] is True
        assert body["hasPreviousPage"] is False

    async def test_items_exclude_owned_collections(self, client, users):
        response = await client.get("/api/v1/users")

        items = response.json()["items"]
        assert items[0] == {"id": 1, "name": "user1", "email": "user1@example.com"}
        assert all("posts" not in item and "comments" not in item for item in items)

    async def test_search_sort_and_direction(self, client, users):
        response = await client.get(
            "/api/v1/users",
            params={"searchKey": "user", "sortKey": "numberofposts", "isAscending": "false"},
        )

        assert [u["name"] for u in response.json()["items"]] == ["user1", "user3", "user2"]

    async def test_page_size_out_of_range(self, client, users):
        response = await client.get("/api/v1/users", params={"pageSize": 100})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "PAGE_OUT_OF_RANGE"
        assert "pageSize" in error["message"]

    async def test_page_number_out_of_range(self, client, users):
        response = await client.get("/api/v1/users", params={"pageNumber": 0})

        assert response.status_code == 422
        assert "pageNumber" in response.json()["error"]["message"]


@pytest.mark.asyncio
class TestGetUser:
    """Test GET /api/v1/users/{id}."""

    async def test_found(self, client, users):
        response = await client.get("/api/v1/users/2")

        assert response.status_code == 200
        assert response.json() == {
            "data": {"id": 2, "name": "user2", "email": "user2@example.com"}
        }

    async def test_not_found(self, client, users):
        response = await client.get("/api/v1/users/42")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
class TestUserPostsAndComments:
    """Test GET /api/v1/users/{id}/posts and /comments."""

    async def test_posts_page(self, client, users):
        response = await client.get("/api/v1/users/1/posts")

        assert response.status_code == 200
        body = response.json()
        assert body["totalCount"] == 1
        post = body["items"][0]
        assert post["title"] == "only post"
        assert post["authorId"] == 1
        assert "createdAt" in post

    async def test_comments_page_empty(self, client, users):
        response = await client.get("/api/v1/users/2/comments", params={"pageSize": 5})

        assert response.status_code == 200
        body = response.json()
        assert body["items"] == []
        assert body["totalCount"] == 0
        assert body["hasNextPage"] is False

    async def test_unknown_user(self, client, users):
        response = await client.get("/api/v1/users/42/posts")

        assert response.status_code == 404
