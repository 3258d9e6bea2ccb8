"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from campus.domain.model.vote import Vote
from campus.domain.repository.vote import VOTER_UNIQUE_CONSTRAINT, VoteRepository
from campus.domain.value import PostId, UserId, VoteId, VoteType


def _unique_violation(constraint: str) -> IntegrityError:
    return IntegrityError(
        "INSERT INTO post_votes",
        None,
        Exception(f'duplicate key value violates unique constraint "{constraint}"'),
    )


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    def snapshot(self) -> dict[VoteId, Vote]:
        """Copy of the current state (votes are immutable)."""
        return dict(self._votes)

    def restore(self, state: dict[VoteId, Vote]) -> None:
        """Reset to a previously taken snapshot."""
        self._votes = dict(state)

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._votes.get(vote_id)

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a vote by user and post."""
        for vote in self._votes.values():
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> list[Vote]:
        """Find a user's votes on multiple posts (batch query)."""
        if not post_ids:
            return []

        wanted = set(post_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id and v.post_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the post (duplicate)
        """
        if vote.id in self._votes:
            raise _unique_violation("post_votes_pkey")

        if any(
            v.user_id == vote.user_id and v.post_id == vote.post_id
            for v in self._votes.values()
        ):
            raise _unique_violation(VOTER_UNIQUE_CONSTRAINT)

        self._votes[vote.id] = vote
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, expected: VoteType, new: VoteType
    ) -> Optional[Vote]:
        """Flip polarity if the vote still holds the expected polarity."""
        vote = self._votes.get(vote_id)
        if not vote or vote.vote_type != expected:
            return None

        updated = vote.model_copy(
            update={"vote_type": new, "updated_at": datetime.now()}
        )
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId, expected: VoteType) -> bool:
        """Delete a vote if it still holds the expected polarity."""
        vote = self._votes.get(vote_id)
        if not vote or vote.vote_type != expected:
            return False

        del self._votes[vote_id]
        return True

    async def count_by_post(self, post_id: PostId, vote_type: VoteType) -> int:
        """Count votes of one polarity on a post."""
        return sum(
            1
            for v in self._votes.values()
            if v.post_id == post_id and v.vote_type == vote_type
        )
