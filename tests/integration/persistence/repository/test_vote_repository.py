"""Integration tests for the PostgreSQL vote path.

Needs a migrated PostgreSQL database; set DATABASE__URL to run them.
"""

import os
from uuid import uuid4

import pytest

from campus.domain.error import InvalidArgumentError
from campus.domain.model.vote import Vote
from campus.domain.repository import PostRepository, VoteRepository
from campus.domain.service import VoteLedger
from campus.domain.value import CounterField, UserId, VoteId, VoteType
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
    ),
]

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresVotePath:
    @pytest.mark.asyncio
    async def test_cast_vote_keeps_counters_in_sync(self, integration_env):
        # Arrange
        ledger = await integration_env.get(VoteLedger)
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)
        post = await post_repo.save(make_post())
        voter = UserId(uuid4())

        # Act
        await ledger.cast_vote(voter, post.id, VoteType.UPVOTE)
        await ledger.cast_vote(voter, post.id, VoteType.DOWNVOTE)

        # Assert
        updated = await post_repo.find_by_id(post.id)
        assert (updated.upvotes, updated.downvotes) == (0, 1)
        assert await vote_repo.count_by_post(post.id, VoteType.DOWNVOTE) == 1

    @pytest.mark.asyncio
    async def test_conditional_writes(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)
        post = await post_repo.save(make_post())
        vote = await vote_repo.save(
            Vote(
                id=VoteId(uuid4()),
                post_id=post.id,
                user_id=UserId(uuid4()),
                vote_type=VoteType.UPVOTE,
            )
        )

        # Act & Assert
        assert (
            await vote_repo.update_vote_type(
                vote.id, VoteType.DOWNVOTE, VoteType.UPVOTE
            )
            is None
        )
        assert await vote_repo.delete(vote.id, VoteType.DOWNVOTE) is False
        assert await vote_repo.delete(vote.id, VoteType.UPVOTE) is True

    @pytest.mark.asyncio
    async def test_decrement_floors_at_zero(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post())

        assert await post_repo.decrement_counter(post.id, CounterField.UPVOTES) is False
        assert (await post_repo.find_by_id(post.id)).upvotes == 0

    @pytest.mark.asyncio
    async def test_non_post_counter_is_rejected(self, integration_env):
        post_repo = await integration_env.get(PostRepository)

        with pytest.raises(InvalidArgumentError):
            await post_repo.increment_counter(post_id=uuid4(), field=CounterField.POST_COUNT)
