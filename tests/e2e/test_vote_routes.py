"""End-to-end tests for vote endpoints.

Requests go through the real FastAPI app (routing, auth, error handlers)
backed by the in-memory test container.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from campus.config import Settings
from campus.domain.repository import PostRepository
from campus.interface.api.app import create_app
from campus.util.jwt import create_token
from tests.conftest import make_post
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    """Create test client with test container."""
    app_instance = create_app(container=container)
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def post(container):
    """A seeded community post with a few existing votes."""
    post_repo = await container.get(PostRepository)
    return await post_repo.save(make_post(upvotes=3, downvotes=1))


def _auth(user_id: str | None = None) -> dict[str, str]:
    token = create_token(user_id or str(uuid4()), Settings().auth)
    return {"Authorization": f"Bearer {token}"}


class TestCastVoteEndpoint:
    """POST /posts/{post_id}/vote"""

    @pytest.mark.asyncio
    async def test_upvote_switch_and_remove(self, client, post):
        """Upvote, switch to downvote, then toggle the downvote off."""
        headers = _auth()
        url = f"/posts/{post.id}/vote"

        # Upvote
        response = await client.post(url, json={"vote_type": "upvote"}, headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["vote_type"] == "upvote"
        assert body["message"] == "Vote recorded"
        assert body["votes"] == {"upvotes": 4, "downvotes": 1, "user_vote": "upvote"}

        # Switch
        response = await client.post(
            url, json={"vote_type": "downvote"}, headers=headers
        )
        assert response.status_code == 200
        assert response.json()["votes"] == {
            "upvotes": 3,
            "downvotes": 2,
            "user_vote": "downvote",
        }

        # Toggle off
        response = await client.post(
            url, json={"vote_type": "downvote"}, headers=headers
        )
        assert response.status_code == 200
        body = response.json()
        assert body["vote_id"] is None
        assert body["vote_type"] is None
        assert body["message"] == "Vote removed"
        assert body["votes"] == {"upvotes": 3, "downvotes": 1, "user_vote": None}

    @pytest.mark.asyncio
    async def test_cookie_token_is_accepted(self, client, post):
        token = create_token(str(uuid4()), Settings().auth)
        client.cookies.set("auth_token", token)

        response = await client.post(
            f"/posts/{post.id}/vote", json={"vote_type": "upvote"}
        )

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_without_auth_returns_401(self, client, post):
        response = await client.post(
            f"/posts/{post.id}/vote", json={"vote_type": "upvote"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_invalid_token_returns_401(self, client, post):
        response = await client.post(
            f"/posts/{post.id}/vote",
            json={"vote_type": "upvote"},
            headers={"Authorization": "Bearer invalid-token"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_sideways_returns_400_and_changes_nothing(self, client, post):
        headers = _auth()

        response = await client.post(
            f"/posts/{post.id}/vote", json={"vote_type": "sideways"}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"

        state = await client.get(f"/posts/{post.id}/votes", headers=headers)
        assert state.json()["upvotes"] == 3
        assert state.json()["downvotes"] == 1
        assert state.json()["user_vote"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("vote_type", [1, None, ["upvote"]])
    async def test_non_string_vote_type_returns_400(self, client, post, vote_type):
        headers = _auth()

        response = await client.post(
            f"/posts/{post.id}/vote", json={"vote_type": vote_type}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"

        state = await client.get(f"/posts/{post.id}/votes", headers=headers)
        assert state.json()["upvotes"] == 3
        assert state.json()["downvotes"] == 1

    @pytest.mark.asyncio
    async def test_without_auth_on_malformed_post_id_returns_401(self, client):
        response = await client.post(
            "/posts/not-a-uuid/vote", json={"vote_type": "upvote"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_malformed_post_id_returns_400(self, client):
        response = await client.post(
            "/posts/not-a-uuid/vote", json={"vote_type": "upvote"}, headers=_auth()
        )

        assert response.status_code == 400
        assert "Malformed post id" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_post_returns_404(self, client):
        response = await client.post(
            f"/posts/{uuid4()}/vote", json={"vote_type": "upvote"}, headers=_auth()
        )

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_body_returns_422(self, client, post):
        response = await client.post(f"/posts/{post.id}/vote", headers=_auth())

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestReadEndpoints:
    """GET endpoints for vote state."""

    @pytest.mark.asyncio
    async def test_vote_state_for_anonymous_and_voter(self, client, post):
        user_id = str(uuid4())
        await client.post(
            f"/posts/{post.id}/vote",
            json={"vote_type": "downvote"},
            headers=_auth(user_id),
        )

        anonymous = await client.get(f"/posts/{post.id}/votes")
        voter = await client.get(f"/posts/{post.id}/votes", headers=_auth(user_id))

        assert anonymous.status_code == 200
        assert anonymous.json() == {
            "post_id": str(post.id),
            "upvotes": 3,
            "downvotes": 2,
            "user_vote": None,
        }
        assert voter.json()["user_vote"] == "downvote"

    @pytest.mark.asyncio
    async def test_vote_state_unknown_post_returns_404(self, client):
        response = await client.get(f"/posts/{uuid4()}/votes")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_user_vote_requires_auth(self, client, post):
        response = await client.get(f"/posts/{post.id}/vote")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_user_vote(self, client, post):
        user_id = str(uuid4())
        await client.post(
            f"/posts/{post.id}/vote",
            json={"vote_type": "upvote"},
            headers=_auth(user_id),
        )

        response = await client.get(f"/posts/{post.id}/vote", headers=_auth(user_id))

        assert response.status_code == 200
        assert response.json() == {"post_id": str(post.id), "vote_type": "upvote"}

    @pytest.mark.asyncio
    async def test_batch_vote_states(self, client, container, post):
        post_repo = await container.get(PostRepository)
        other = await post_repo.save(make_post(upvotes=7))

        response = await client.get(
            "/posts/votes",
            params=[
                ("post_ids", str(other.id)),
                ("post_ids", str(uuid4())),
                ("post_ids", str(post.id)),
            ],
        )

        assert response.status_code == 200
        votes = response.json()["votes"]
        assert [v["post_id"] for v in votes] == [str(other.id), str(post.id)]
        assert [v["upvotes"] for v in votes] == [7, 3]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, 101])
    async def test_batch_size_out_of_range_returns_400(self, client, count):
        params = [("post_ids", str(uuid4())) for _ in range(count)]

        response = await client.get("/posts/votes", params=params)

        assert response.status_code == 400


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
