"""Unit tests for the vote state read use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from campus.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetUserVoteRequest,
    GetUserVoteUseCase,
    GetVoteStateRequest,
    GetVoteStatesRequest,
    GetVoteStatesUseCase,
    GetVoteStateUseCase,
)
from campus.domain.error import InvalidArgumentError, UnauthenticatedError
from campus.domain.repository import PostRepository
from campus.domain.value import VoteType
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetVoteStateUseCase:
    @pytest.mark.asyncio
    async def test_returns_counters_and_user_vote(self, unit_env):
        # Arrange
        cast = await unit_env.get(CastVoteUseCase)
        use_case = await unit_env.get(GetVoteStateUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(upvotes=3, downvotes=1))
        user_id = str(uuid4())
        await cast.execute(
            CastVoteRequest(post_id=str(post.id), vote_type="upvote", user_id=user_id)
        )

        # Act
        response = await use_case.execute(
            GetVoteStateRequest(post_id=str(post.id), user_id=user_id)
        )

        # Assert
        assert response.post_id == str(post.id)
        assert (response.upvotes, response.downvotes) == (4, 1)
        assert response.user_vote == VoteType.UPVOTE

    @pytest.mark.asyncio
    async def test_anonymous_reader(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetVoteStateUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(upvotes=3, downvotes=1))

        # Act
        response = await use_case.execute(GetVoteStateRequest(post_id=str(post.id)))

        # Assert
        assert (response.upvotes, response.downvotes, response.user_vote) == (
            3,
            1,
            None,
        )


class TestGetUserVoteUseCase:
    @pytest.mark.asyncio
    async def test_requires_user(self, unit_env):
        use_case = await unit_env.get(GetUserVoteUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(GetUserVoteRequest(post_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_no_vote_returns_null(self, unit_env):
        use_case = await unit_env.get(GetUserVoteUseCase)

        response = await use_case.execute(
            GetUserVoteRequest(post_id=str(uuid4()), user_id=str(uuid4()))
        )

        assert response.vote_type is None


class TestGetVoteStatesUseCase:
    @pytest.mark.asyncio
    async def test_preserves_request_order_and_drops_unknown(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetVoteStatesUseCase)
        post_repo = await unit_env.get(PostRepository)
        first = await post_repo.save(make_post(upvotes=1))
        second = await post_repo.save(make_post(upvotes=2))

        # Act
        response = await use_case.execute(
            GetVoteStatesRequest(
                post_ids=[str(second.id), str(uuid4()), str(first.id), str(second.id)]
            )
        )

        # Assert
        assert [state.post_id for state in response.votes] == [
            str(second.id),
            str(first.id),
        ]
        assert [state.upvotes for state in response.votes] == [2, 1]

    @pytest.mark.asyncio
    async def test_malformed_id_raises_invalid_argument(self, unit_env):
        use_case = await unit_env.get(GetVoteStatesUseCase)

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(GetVoteStatesRequest(post_ids=["nope"]))

    def test_batch_size_limits(self):
        with pytest.raises(ValidationError):
            GetVoteStatesRequest(post_ids=[])
        with pytest.raises(ValidationError):
            GetVoteStatesRequest(post_ids=[str(uuid4()) for _ in range(101)])
